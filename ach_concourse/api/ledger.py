"""
Ledger API endpoints.

Postings are append-only, so there is no update or delete
route. Balances are calculated on every request.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ach_concourse.models.base import get_db
from ach_concourse.schemas.common import ERROR_RESPONSES
from ach_concourse.services.ledger_service import LedgerService
from ach_concourse.schemas.ledger import (
    BalanceResponse,
    LedgerPostingCreate,
    LedgerPostingResponse,
)

router = APIRouter(
    prefix="/api/v1",
    tags=["Ledger"],
    responses=ERROR_RESPONSES,
)


@router.post("/postings", response_model=LedgerPostingResponse, status_code=201)
def create_posting(
    request: LedgerPostingCreate,
    db: Session = Depends(get_db),
):
    """Record a posting against one ACH side."""
    service = LedgerService(db)
    try:
        posting = service.create_posting(request)
        db.commit()
        return posting
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/postings", response_model=list[LedgerPostingResponse])
def list_postings(
    ach_side: str = "",
    trace_number: str = "",
    db: Session = Depends(get_db),
):
    """List postings, newest first, optionally filtered."""
    return LedgerService(db).list_postings(ach_side, trace_number)


@router.get("/balances", response_model=BalanceResponse)
def get_balances(db: Session = Depends(get_db)):
    """
    Get total debits, total credits and the net balance.

    Balance is calculated from postings, not stored.
    """
    return LedgerService(db).get_balances()
