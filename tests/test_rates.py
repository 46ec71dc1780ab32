import http.client
import logging
import urllib.error
import urllib.request
from datetime import timedelta

import pytest

from wiremit.core.config import Settings
from wiremit.models.constants import DESTINATION_CURRENCIES, SOURCE_CURRENCY
from wiremit.services.http_client import HttpError, get_json
from wiremit.services.rates import providers
from wiremit.services.rates.base import FetchedQuote, RateProvider
from wiremit.services.rates.normalize import (
    MalformedRatesPayload,
    normalize_rates,
    parse_rates,
)
from wiremit.services.rates.providers import (
    ExternalHTTPRateProvider,
    StaticRateProvider,
    make_rate_provider,
)
from wiremit.services.rates.quote_service import RateQuoteService

FALLBACK = {"USD": 1, "GBP": 0.84, "ZAR": 17.69}


def test_normalize_list_of_single_key_mappings():
    raw = [{"USD": 1}, {"GBP": 0.79}, {"EUR": 0.92}, {"ZAR": 18.1}]
    assert normalize_rates(raw) == {"USD": 1.0, "GBP": 0.79, "ZAR": 18.1}


def test_normalize_flat_mapping_filters_allow_list():
    raw = {"ZAR": 18.1, "JPY": 150, "GBP": 0.79}
    rates = normalize_rates(raw)
    assert rates == {"ZAR": 18.1, "GBP": 0.79}
    assert list(rates) == ["ZAR", "GBP"]


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "GBP=0.84",
        42,
        [1, 2, 3],
        [{"GBP": 0.8}, "oops"],
        {"GBP": "0.8"},
        {"GBP": True},
        {"GBP": -1},
        {"GBP": 0},
        {"EUR": 0.9},
        {},
        [],
    ],
)
def test_normalize_malformed_payload_returns_fallback(raw):
    assert normalize_rates(raw) == FALLBACK


def test_normalize_fallback_is_a_fresh_copy():
    first = normalize_rates(None)
    first["GBP"] = 99
    assert normalize_rates(None) == FALLBACK


def test_normalize_logs_rejection(caplog):
    with caplog.at_level(logging.WARNING, logger="wiremit.rates"):
        normalize_rates({"EUR": 1})
    assert "using fallback" in caplog.text


def test_parse_rates_is_strict():
    with pytest.raises(MalformedRatesPayload):
        parse_rates([{"GBP": None}])


def test_static_provider_serves_fallback():
    quote = StaticRateProvider().fetch_quote()
    assert quote.rates == FALLBACK
    assert quote.source == "fallback"


def test_external_provider_uses_feed(monkeypatch):
    calls = []

    def fake_get_json(url, **kwargs):
        calls.append((url, kwargs))
        return [{"USD": 1}, {"GBP": 0.8}, {"ZAR": 18}]

    monkeypatch.setattr(providers, "get_json", fake_get_json)
    quote = ExternalHTTPRateProvider("http://feed.test/rates", timeout=2.0).fetch_quote()
    assert quote == FetchedQuote(rates={"USD": 1.0, "GBP": 0.8, "ZAR": 18.0}, source="feed")
    assert calls == [("http://feed.test/rates", {"timeout": 2.0})]


def test_external_provider_absorbs_http_failure(monkeypatch):
    def boom(url, **kwargs):
        raise HttpError("connection refused")

    monkeypatch.setattr(providers, "get_json", boom)
    quote = ExternalHTTPRateProvider("http://feed.test/rates").fetch_quote()
    assert quote.rates == FALLBACK
    assert quote.source == "fallback"


def test_external_provider_absorbs_bad_shape(monkeypatch):
    monkeypatch.setattr(providers, "get_json", lambda url, **kw: {"error": "quota"})
    quote = ExternalHTTPRateProvider("http://feed.test/rates").fetch_quote()
    assert quote.rates == FALLBACK
    assert quote.source == "fallback"


def test_make_rate_provider(tmp_path):
    settings = Settings(db_path=tmp_path / "x.db", rates_feed_url="http://feed.test/r")
    assert isinstance(make_rate_provider("static", settings), StaticRateProvider)
    assert isinstance(make_rate_provider("external-http", settings), ExternalHTTPRateProvider)
    with pytest.raises(ValueError):
        make_rate_provider("carrier-pigeon", settings)


def test_settings_reject_unknown_provider(tmp_path):
    settings = Settings(db_path=tmp_path / "x.db", rate_provider="carrier-pigeon")
    with pytest.raises(ValueError):
        settings.init_post_load()


class CountingProvider(RateProvider):
    def __init__(self):
        self.calls = 0

    def fetch_quote(self) -> FetchedQuote:
        self.calls += 1
        return FetchedQuote(rates={"GBP": float(self.calls)}, source="feed")


def test_quote_service_fetches_once_per_ttl():
    provider = CountingProvider()
    svc = RateQuoteService(provider, ttl_seconds=3600)
    assert svc.get_quote() == {"GBP": 1.0}
    assert svc.get_quote() == {"GBP": 1.0}
    assert provider.calls == 1


def test_quote_service_refetches_after_expiry():
    provider = CountingProvider()
    svc = RateQuoteService(provider, ttl_seconds=60)
    first = svc.snapshot()
    # Age the held snapshot past its TTL
    svc._snapshot = first.__class__(
        rates=first.rates, source=first.source, fetched_at=first.fetched_at - timedelta(seconds=61)
    )
    assert svc.get_quote() == {"GBP": 2.0}
    assert provider.calls == 2


def test_quote_service_refresh_and_copy():
    provider = CountingProvider()
    svc = RateQuoteService(provider, ttl_seconds=3600)
    quote = svc.get_quote()
    quote["GBP"] = 123
    assert svc.get_quote() == {"GBP": 1.0}
    assert svc.refresh().rates == {"GBP": 2.0}
    assert provider.calls == 2


@pytest.mark.parametrize(
    "raw",
    [
        {"GBP": float("nan"), "ZAR": 17.69},
        {"GBP": 0.84, "ZAR": float("inf")},
        [{"USD": 1}, {"GBP": float("-inf")}],
        {"GBP": 10**400},
    ],
)
def test_normalize_rejects_non_finite_rates(raw):
    assert normalize_rates(raw) == FALLBACK


def test_destination_currencies_exclude_source():
    assert SOURCE_CURRENCY not in DESTINATION_CURRENCIES
    assert DESTINATION_CURRENCIES == ("GBP", "ZAR")


# get_json against a patched urlopen -------------------------------


class FakeResponse:
    def __init__(self, body=b"", status=200, read_error=None):
        self.status = status
        self._body = body
        self._read_error = read_error

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def read(self):
        if self._read_error is not None:
            raise self._read_error
        return self._body


def _patch_urlopen(monkeypatch, response=None, error=None):
    calls = []

    def fake_urlopen(req, timeout=None):
        calls.append((req.full_url, timeout))
        if error is not None:
            raise error
        return response

    monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)
    return calls


def test_get_json_decodes_body(monkeypatch):
    calls = _patch_urlopen(monkeypatch, FakeResponse(b'[{"GBP": 0.8}]'))
    assert get_json("http://feed.test/rates", timeout=3.0) == [{"GBP": 0.8}]
    # One attempt only
    assert calls == [("http://feed.test/rates", 3.0)]


def test_get_json_makes_a_single_attempt(monkeypatch):
    calls = _patch_urlopen(monkeypatch, error=ConnectionResetError("reset by peer"))
    with pytest.raises(HttpError):
        get_json("http://feed.test/rates")
    assert len(calls) == 1


@pytest.mark.parametrize(
    "response, error",
    [
        (
            None,
            urllib.error.HTTPError(
                "http://feed.test/rates", 503, "Service Unavailable", None, None
            ),
        ),
        (None, urllib.error.URLError("name resolution failed")),
        (None, TimeoutError("timed out")),
        (None, ConnectionResetError("reset by peer")),
        (FakeResponse(status=500), None),
        (FakeResponse(b"<html>busy</html>"), None),
        (FakeResponse(b"\xff\xfe"), None),
        (FakeResponse(read_error=http.client.IncompleteRead(b'[{"GBP"')), None),
    ],
)
def test_get_json_wraps_failures(monkeypatch, response, error):
    _patch_urlopen(monkeypatch, response, error)
    with pytest.raises(HttpError):
        get_json("http://feed.test/rates")


@pytest.mark.parametrize(
    "response, error",
    [
        (
            None,
            urllib.error.HTTPError(
                "http://feed.test/rates", 503, "Service Unavailable", None, None
            ),
        ),
        (FakeResponse(b"not json"), None),
        (FakeResponse(read_error=http.client.IncompleteRead(b'[{"GBP"')), None),
        (FakeResponse(b'{"GBP": NaN, "ZAR": 17.69}'), None),
        (FakeResponse(b'[{"USD": 1}, {"ZAR": Infinity}]'), None),
    ],
)
def test_external_provider_falls_back_on_bad_feed(monkeypatch, response, error):
    _patch_urlopen(monkeypatch, response, error)
    quote = ExternalHTTPRateProvider("http://feed.test/rates").fetch_quote()
    assert quote.rates == FALLBACK
    assert quote.source == "fallback"
