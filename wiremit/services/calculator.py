from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Mapping, Optional

from wiremit.models.constants import (
    DESTINATION_CURRENCIES,
    FEE_PERCENTAGES,
    MAX_AMOUNT,
    MIN_AMOUNT,
)
from wiremit.services.money import ceil_whole, to_decimal

"""Send-money calculator.

Responsibilities:
    - Classify a requested USD amount against the [MIN_AMOUNT, MAX_AMOUNT] bounds.
    - Compute fee and recipient-received amount per destination currency.

Rules:
    fee      = ceil(amount * fee_percent(currency))
    received = ceil((amount - fee) * rate)

Results are only produced for amounts classified VALID; any validation error
suppresses the whole result list. Everything here is pure: same inputs, same
output.
"""


class AmountValidation(str, Enum):
    EMPTY = "empty"
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"
    VALID = "valid"


_MESSAGES = {
    AmountValidation.TOO_LOW: f"Minimum amount is ${MIN_AMOUNT}",
    AmountValidation.TOO_HIGH: f"Maximum amount is ${MAX_AMOUNT}",
}


@dataclass(frozen=True)
class ConversionResult:
    currency: str
    rate: float
    fee: int
    received: int

    def as_dict(self) -> dict:
        return {
            "currency": self.currency,
            "rate": self.rate,
            "fee": self.fee,
            "received": self.received,
        }


@dataclass(frozen=True)
class SendQuote:
    amount: float
    status: AmountValidation
    error: Optional[str]
    results: List[ConversionResult] = field(default_factory=list)


def validate_amount(amount: float) -> AmountValidation:
    if math.isnan(amount) or amount <= 0:
        return AmountValidation.EMPTY
    if amount < MIN_AMOUNT:
        return AmountValidation.TOO_LOW
    if amount > MAX_AMOUNT:
        return AmountValidation.TOO_HIGH
    return AmountValidation.VALID


def validation_message(status: AmountValidation) -> Optional[str]:
    return _MESSAGES.get(status)


def fee_percent(currency: str):
    try:
        return FEE_PERCENTAGES[currency]
    except KeyError:
        raise ValueError(f"no fee configured for currency '{currency}'") from None


def compute_fee(amount: float, currency: str) -> int:
    return ceil_whole(to_decimal(amount) * fee_percent(currency))


def compute_received(amount: float, fee: int, rate: float) -> int:
    return ceil_whole((to_decimal(amount) - fee) * to_decimal(rate))


def convert_one(amount: float, currency: str, rate: float) -> ConversionResult:
    """Apply the fee/rate rule for a single destination currency.

    No bounds check; callers that take user input go through ``convert``.
    """
    fee = compute_fee(amount, currency)
    return ConversionResult(
        currency=currency,
        rate=rate,
        fee=fee,
        received=compute_received(amount, fee, rate),
    )


def convert(amount: float, rates: Mapping[str, float]) -> List[ConversionResult]:
    if validate_amount(amount) is not AmountValidation.VALID:
        return []
    return [
        convert_one(amount, currency, rate)
        for currency, rate in rates.items()
        if currency in DESTINATION_CURRENCIES
    ]


def quote_transfer(amount: float, rates: Mapping[str, float]) -> SendQuote:
    status = validate_amount(amount)
    return SendQuote(
        amount=amount,
        status=status,
        error=validation_message(status),
        results=convert(amount, rates),
    )
