"""Mocked transaction history (display data) and pagination.

History entries are generated, not stored: a random destination currency and
USD amount per row, priced with the fallback quote through the same fee rule
as the live calculator. Pass a seeded ``random.Random`` for a stable history.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Generic, List, Optional, Sequence, TypeVar

from wiremit.models.constants import DESTINATION_CURRENCIES, FALLBACK_RATES
from wiremit.services.calculator import convert_one

MIN_MOCK_AMOUNT = 50
MAX_MOCK_AMOUNT = 1049

T = TypeVar("T")


@dataclass(frozen=True)
class Transaction:
    id: int
    amount_usd: int
    currency: str
    received: int
    fee: int
    date: date


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T]
    page: int
    per_page: int
    total: int
    total_pages: int


def generate_transactions(
    count: int = 15,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> List[Transaction]:
    rng = rng or random.Random()
    today = today or date.today()
    history: List[Transaction] = []
    for i in range(count):
        currency = rng.choice(DESTINATION_CURRENCIES)
        amount_usd = rng.randint(MIN_MOCK_AMOUNT, MAX_MOCK_AMOUNT)
        priced = convert_one(amount_usd, currency, FALLBACK_RATES[currency])
        history.append(
            Transaction(
                id=i + 1,
                amount_usd=amount_usd,
                currency=currency,
                received=priced.received,
                fee=priced.fee,
                date=today - timedelta(days=i),
            )
        )
    return history


def paginate(items: Sequence[T], page: int = 1, per_page: int = 5) -> Page[T]:
    if per_page <= 0:
        raise ValueError("per_page must be positive")
    total = len(items)
    total_pages = max(1, math.ceil(total / per_page))
    page = max(1, min(page, total_pages))
    start = (page - 1) * per_page
    return Page(
        items=list(items[start : start + per_page]),
        page=page,
        per_page=per_page,
        total=total,
        total_pages=total_pages,
    )
