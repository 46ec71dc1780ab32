from __future__ import annotations

"""Rate provider abstraction.

A provider answers with a whole quote (USD -> currency) in one call; the
quote service decides how long to hold it.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict

SOURCE_FEED = "feed"
SOURCE_FALLBACK = "fallback"


@dataclass(frozen=True)
class FetchedQuote:
    rates: Dict[str, float]
    source: str  # SOURCE_FEED | SOURCE_FALLBACK


class RateProvider(ABC):
    @abstractmethod
    def fetch_quote(self) -> FetchedQuote:
        """Return units of each supported currency per 1 USD."""
        raise NotImplementedError
