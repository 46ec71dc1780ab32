"""Money / rounding helpers.

Centralized so the send calculator and the transaction history use identical
rounding semantics: amounts are rounded *up* to the next whole unit.
"""

from __future__ import annotations
from decimal import Decimal, ROUND_CEILING


def to_decimal(value: float | int | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def ceil_whole(value: float | int | Decimal) -> int:
    return int(to_decimal(value).to_integral_value(rounding=ROUND_CEILING))
