"""Pydantic request / response models for the Wiremit API."""

from .constants import (
    SUPPORTED_CURRENCIES,
    DESTINATION_CURRENCIES,
    FEE_PERCENTAGES,
    FALLBACK_RATES,
    MIN_AMOUNT,
    MAX_AMOUNT,
)  # re-export
from .user import SignupIn, LoginIn, UserOut
from .transfer import RateQuoteOut, ConversionResultOut, SendQuoteOut
from .transaction import TransactionOut, TransactionPageOut
from .ads import AdOut, AdListOut, CurrentAdOut

__all__ = [
    "SUPPORTED_CURRENCIES",
    "DESTINATION_CURRENCIES",
    "FEE_PERCENTAGES",
    "FALLBACK_RATES",
    "MIN_AMOUNT",
    "MAX_AMOUNT",
    "SignupIn",
    "LoginIn",
    "UserOut",
    "RateQuoteOut",
    "ConversionResultOut",
    "SendQuoteOut",
    "TransactionOut",
    "TransactionPageOut",
    "AdOut",
    "AdListOut",
    "CurrentAdOut",
]
