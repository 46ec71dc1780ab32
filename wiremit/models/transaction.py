from datetime import date
from typing import List

from pydantic import BaseModel, Field, field_validator

from .constants import DESTINATION_CURRENCIES


class TransactionOut(BaseModel):
    id: int
    amount_usd: int = Field(..., gt=0)
    currency: str
    received: int = Field(..., ge=0)
    fee: int = Field(..., ge=0)
    date: date

    @field_validator("currency")
    @classmethod
    def valid_currency(cls, v: str) -> str:
        if v not in DESTINATION_CURRENCIES:
            raise ValueError("unsupported destination currency")
        return v


class TransactionPageOut(BaseModel):
    items: List[TransactionOut]
    page: int
    per_page: int
    total: int
    total_pages: int
