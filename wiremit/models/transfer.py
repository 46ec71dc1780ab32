from __future__ import annotations
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .constants import SUPPORTED_CURRENCIES


class RateQuoteOut(BaseModel):
    rates: Dict[str, float]
    source: str
    fetched_at: datetime

    @field_validator("rates")
    @classmethod
    def supported_only(cls, v: Dict[str, float]) -> Dict[str, float]:
        for currency, rate in v.items():
            if currency not in SUPPORTED_CURRENCIES:
                raise ValueError(f"unsupported currency {currency}")
            if rate <= 0:
                raise ValueError(f"rate for {currency} must be positive")
        return v


class ConversionResultOut(BaseModel):
    currency: str
    rate: float = Field(..., gt=0)
    fee: int = Field(..., ge=0)
    received: int = Field(..., ge=0)


class SendQuoteOut(BaseModel):
    amount: float
    status: str
    error: Optional[str] = None
    results: List[ConversionResultOut] = []
