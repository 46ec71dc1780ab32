"""Rate feed payload normalization.

The rates feed answers with either

    [{"USD": 1}, {"GBP": 0.84}, {"ZAR": 17.69}]   # list of single-key mappings
    {"USD": 1, "GBP": 0.84, "ZAR": 17.69}          # one flat mapping

Only currencies in SUPPORTED_CURRENCIES are kept, in payload order. Anything
that does not fit one of those two shapes yields the fallback quote.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Iterable, Mapping, Tuple

from wiremit.models.constants import FALLBACK_RATES, SUPPORTED_CURRENCIES

logger = logging.getLogger("wiremit.rates")


class MalformedRatesPayload(ValueError):
    pass


def fallback_rates() -> Dict[str, float]:
    return dict(FALLBACK_RATES)


def _iter_pairs(raw: Any) -> Iterable[Tuple[Any, Any]]:
    if isinstance(raw, Mapping):
        yield from raw.items()
    elif isinstance(raw, list):
        for item in raw:
            if not isinstance(item, Mapping):
                raise MalformedRatesPayload(f"list entry is not an object: {item!r}")
            yield from item.items()
    else:
        raise MalformedRatesPayload(f"unexpected payload type {type(raw).__name__}")


def _coerce_rate(currency: str, value: Any) -> float:
    # bool is an int subclass; true/false are not rates
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedRatesPayload(f"rate for {currency} is not a number: {value!r}")
    try:
        rate = float(value)
    except OverflowError:
        raise MalformedRatesPayload(f"rate for {currency} is out of range") from None
    # json.loads accepts NaN / Infinity literals
    if not math.isfinite(rate) or rate <= 0:
        raise MalformedRatesPayload(f"rate for {currency} must be a positive finite number: {value!r}")
    return rate


def parse_rates(raw: Any) -> Dict[str, float]:
    """Strict variant of normalize_rates: raises MalformedRatesPayload."""
    rates: Dict[str, float] = {}
    for currency, value in _iter_pairs(raw):
        if currency not in SUPPORTED_CURRENCIES:
            continue
        rates[currency] = _coerce_rate(currency, value)
    if not rates:
        raise MalformedRatesPayload("payload contains no supported currency")
    return rates


def normalize_rates(raw: Any) -> Dict[str, float]:
    try:
        return parse_rates(raw)
    except MalformedRatesPayload as e:
        logger.warning("rates payload rejected, using fallback: %s", e)
        return fallback_rates()
