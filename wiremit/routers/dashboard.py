from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from wiremit.core.config import Settings
from wiremit.db.dal import Database
from wiremit.models.ads import AdOut
from wiremit.models.transaction import TransactionPageOut
from wiremit.models.transfer import RateQuoteOut, SendQuoteOut
from wiremit.models.user import UserOut
from wiremit.routers.deps import get_app_settings, get_db, get_quote_service
from wiremit.routers.send import send_quote_out
from wiremit.routers.transactions import get_history, page_out
from wiremit.services import dashboard as dash
from wiremit.services.ads import ADS
from wiremit.services.calculator import SendQuote
from wiremit.services.rates.quote_service import RateQuoteService
from wiremit.services.transactions import Transaction, paginate

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


class DashboardOut(BaseModel):
    user: Optional[UserOut] = None
    rates: RateQuoteOut
    send: SendQuoteOut
    transactions: TransactionPageOut
    ads: List[AdOut]


def _public_user(db: Database, email: Optional[str]) -> Optional[Dict[str, str]]:
    if not email:
        return None
    row = db.find_user(email)
    if row is None:
        return None
    return {"name": row.get("name", ""), "email": row["email"]}


@router.get("", response_model=DashboardOut, summary="Everything the dashboard shows")
def get_dashboard(
    amount: float = Query(0, allow_inf_nan=False, description="Amount to send in USD"),
    page: int = Query(1, description="Transaction history page"),
    email: Optional[str] = Query(None, description="Signed-in user's email"),
    db: Database = Depends(get_db),
    svc: RateQuoteService = Depends(get_quote_service),
    history: List[Transaction] = Depends(get_history),
    settings: Settings = Depends(get_app_settings),
):
    snap = svc.snapshot()
    state = dash.initial_state(_public_user(db, email))
    state = dash.with_rates(state, snap.rates)
    state = dash.with_amount(state, amount)

    first = paginate(history, page=1, per_page=settings.transactions_per_page)
    state = dash.with_page(state, page, first.total_pages)
    tx_page = paginate(history, page=state.page, per_page=settings.transactions_per_page)

    send = SendQuote(
        amount=state.amount, status=state.status, error=state.error, results=state.results
    )
    return DashboardOut(
        user=UserOut(**state.user) if state.user else None,
        rates=RateQuoteOut(rates=snap.rates, source=snap.source, fetched_at=snap.fetched_at),
        send=send_quote_out(send),
        transactions=page_out(tx_page),
        ads=[AdOut(**ad.as_dict()) for ad in ADS],
    )
