from __future__ import annotations

"""Concrete rate providers and factory.

'static' never touches the network and serves the fallback quote; it is the
default for local runs and tests. 'external-http' performs one GET against the
configured feed and degrades to the fallback quote on any failure.
"""
import logging
from typing import TYPE_CHECKING

from .base import FetchedQuote, RateProvider, SOURCE_FALLBACK, SOURCE_FEED
from .normalize import MalformedRatesPayload, fallback_rates, parse_rates
from wiremit.services.http_client import get_json, HttpError

if TYPE_CHECKING:  # pragma: no cover
    from wiremit.core.config import Settings

logger = logging.getLogger("wiremit.rates")


class StaticRateProvider(RateProvider):
    def fetch_quote(self) -> FetchedQuote:  # type: ignore[override]
        return FetchedQuote(rates=fallback_rates(), source=SOURCE_FALLBACK)


class ExternalHTTPRateProvider(RateProvider):
    def __init__(self, url: str, timeout: float = 5.0):
        self._url = url
        self._timeout = timeout

    def fetch_quote(self) -> FetchedQuote:  # type: ignore[override]
        # Single attempt: a failed feed is absorbed, never retried
        try:
            data = get_json(self._url, timeout=self._timeout)
            rates = parse_rates(data)
        except (HttpError, MalformedRatesPayload) as e:
            logger.warning("rates feed unavailable, using fallback: %s", e)
            return FetchedQuote(rates=fallback_rates(), source=SOURCE_FALLBACK)
        logger.info("fetched rates from feed: %s", sorted(rates))
        return FetchedQuote(rates=rates, source=SOURCE_FEED)


def make_rate_provider(kind: str, settings: "Settings") -> RateProvider:
    if kind == "static":
        return StaticRateProvider()
    if kind == "external-http":
        return ExternalHTTPRateProvider(
            settings.rates_feed_url, timeout=settings.http_timeout_seconds
        )
    raise ValueError(f"Unknown rate provider kind '{kind}'")
