from typing import List

from fastapi import APIRouter, Depends, Query, Request

from wiremit.core.config import Settings
from wiremit.models.transaction import TransactionOut, TransactionPageOut
from wiremit.routers.deps import get_app_settings
from wiremit.services.transactions import Page, Transaction, paginate

router = APIRouter(prefix="/transactions", tags=["transactions"])


def get_history(request: Request) -> List[Transaction]:
    return request.app.state.transactions


def page_out(page: Page[Transaction]) -> TransactionPageOut:
    return TransactionPageOut(
        items=[TransactionOut(**vars(tx)) for tx in page.items],
        page=page.page,
        per_page=page.per_page,
        total=page.total,
        total_pages=page.total_pages,
    )


@router.get("", response_model=TransactionPageOut, summary="Paged transaction history")
async def list_transactions(
    page: int = Query(1, description="1-based page; out-of-range values are clamped"),
    history: List[Transaction] = Depends(get_history),
    settings: Settings = Depends(get_app_settings),
):
    return page_out(paginate(history, page=page, per_page=settings.transactions_per_page))
