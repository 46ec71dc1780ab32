"""Domain constants for rates, fees and amount bounds.

Fee percentages are fixed per destination currency and expressed as Decimal
strings so fee arithmetic stays exact.
"""

from decimal import Decimal
from typing import Dict, Tuple

SOURCE_CURRENCY = "USD"
# Order matters: it is the order currencies are offered in the UI
SUPPORTED_CURRENCIES: Tuple[str, ...] = ("USD", "GBP", "ZAR")
DESTINATION_CURRENCIES: Tuple[str, ...] = tuple(
    c for c in SUPPORTED_CURRENCIES if c != SOURCE_CURRENCY
)

FEE_PERCENTAGES: Dict[str, Decimal] = {
    "GBP": Decimal("0.10"),
    "ZAR": Decimal("0.20"),
}

FALLBACK_RATES: Dict[str, float] = {
    "USD": 1.0,
    "GBP": 0.84,
    "ZAR": 17.69,
}

MIN_AMOUNT = 10
MAX_AMOUNT = 10000
