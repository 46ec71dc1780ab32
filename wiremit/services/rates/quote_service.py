from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, TYPE_CHECKING

from .base import RateProvider
from .providers import make_rate_provider

if TYPE_CHECKING:  # pragma: no cover
    from wiremit.core.config import Settings

"""Session rate quote holder.

Purpose:
    Fetch the quote once and keep it in memory for rates_cache_ttl_seconds.
    One instance lives on app.state, so a running process behaves like one
    dashboard session: a single fetch, reused by every calculation until it
    expires or refresh() is called.
"""


@dataclass(frozen=True)
class QuoteSnapshot:
    rates: Dict[str, float]
    source: str
    fetched_at: datetime


class RateQuoteService:
    def __init__(self, provider: RateProvider, ttl_seconds: int):
        self._provider = provider
        self._ttl = timedelta(seconds=ttl_seconds)
        self._snapshot: Optional[QuoteSnapshot] = None

    @classmethod
    def from_settings(cls, settings: "Settings") -> "RateQuoteService":
        provider = make_rate_provider(settings.rate_provider, settings)
        return cls(provider, settings.rates_cache_ttl_seconds)

    def _is_fresh(self, snapshot: QuoteSnapshot) -> bool:
        return datetime.now(timezone.utc) - snapshot.fetched_at < self._ttl

    def refresh(self) -> QuoteSnapshot:
        fetched = self._provider.fetch_quote()
        self._snapshot = QuoteSnapshot(
            rates=dict(fetched.rates),
            source=fetched.source,
            fetched_at=datetime.now(timezone.utc),
        )
        return self._snapshot

    def snapshot(self) -> QuoteSnapshot:
        snap = self._snapshot
        if snap is not None and self._is_fresh(snap):
            return snap
        return self.refresh()

    def get_quote(self) -> Dict[str, float]:
        # Copy so callers cannot mutate the held quote
        return dict(self.snapshot().rates)
