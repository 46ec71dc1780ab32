"""Dashboard state as immutable records.

Every input change (rates arriving, amount typed, page flipped) produces a new
DashboardState through one of the ``with_*`` functions; send results are
recomputed from (amount, rates) each time so they can never go stale.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, List, Mapping, Optional, Tuple

from wiremit.services.calculator import (
    AmountValidation,
    ConversionResult,
    quote_transfer,
)


@dataclass(frozen=True)
class DashboardState:
    user: Optional[Dict[str, str]] = None
    rates: Tuple[Tuple[str, float], ...] = ()
    amount: float = 0
    status: AmountValidation = AmountValidation.EMPTY
    error: Optional[str] = None
    results: List[ConversionResult] = field(default_factory=list)
    page: int = 1

    @property
    def rates_map(self) -> Dict[str, float]:
        return dict(self.rates)


def _recompute(state: DashboardState) -> DashboardState:
    quote = quote_transfer(state.amount, state.rates_map)
    return replace(
        state, status=quote.status, error=quote.error, results=list(quote.results)
    )


def initial_state(user: Optional[Mapping[str, str]] = None) -> DashboardState:
    return DashboardState(user=dict(user) if user else None)


def with_rates(state: DashboardState, rates: Mapping[str, float]) -> DashboardState:
    return _recompute(replace(state, rates=tuple(rates.items())))


def with_amount(state: DashboardState, amount: float) -> DashboardState:
    return _recompute(replace(state, amount=amount))


def with_page(state: DashboardState, page: int, total_pages: int) -> DashboardState:
    return replace(state, page=max(1, min(page, max(total_pages, 1))))
