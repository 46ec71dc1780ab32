from __future__ import annotations

from fastapi import APIRouter, Depends

from wiremit.models.transfer import RateQuoteOut
from wiremit.routers.deps import get_quote_service
from wiremit.services.rates.quote_service import QuoteSnapshot, RateQuoteService

"""Rates router.

Endpoints:
    - GET /rates          -> current session quote (fetched on first use)
    - POST /rates/refresh -> force one new fetch from the configured provider

Feed failures never surface here: the quote then carries source='fallback'.
Handlers that may trigger a fetch are sync so the blocking GET runs in the
threadpool, not on the event loop.
"""

router = APIRouter(prefix="/rates", tags=["rates"])


def _snapshot_out(snap: QuoteSnapshot) -> RateQuoteOut:
    return RateQuoteOut(rates=snap.rates, source=snap.source, fetched_at=snap.fetched_at)


@router.get("", response_model=RateQuoteOut, summary="Current exchange rate quote")
def get_rates(svc: RateQuoteService = Depends(get_quote_service)):
    return _snapshot_out(svc.snapshot())


@router.post("/refresh", response_model=RateQuoteOut, summary="Re-fetch the rate quote")
def refresh_rates(svc: RateQuoteService = Depends(get_quote_service)):
    return _snapshot_out(svc.refresh())
