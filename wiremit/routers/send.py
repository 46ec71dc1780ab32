from fastapi import APIRouter, Depends, Query

from wiremit.models.transfer import ConversionResultOut, SendQuoteOut
from wiremit.routers.deps import get_quote_service
from wiremit.services.calculator import SendQuote, quote_transfer
from wiremit.services.rates.quote_service import RateQuoteService

router = APIRouter(prefix="/send", tags=["send"])


def send_quote_out(quote: SendQuote) -> SendQuoteOut:
    return SendQuoteOut(
        amount=quote.amount,
        status=quote.status.value,
        error=quote.error,
        results=[ConversionResultOut(**r.as_dict()) for r in quote.results],
    )


@router.get(
    "/quote",
    response_model=SendQuoteOut,
    summary="Fee and recipient amount per destination currency",
)
def send_quote(
    amount: float = Query(0, allow_inf_nan=False, description="Amount to send in USD"),
    svc: RateQuoteService = Depends(get_quote_service),
):
    # Out-of-bounds amounts are a normal answer (status + message), not an HTTP error
    return send_quote_out(quote_transfer(amount, svc.get_quote()))
