"""
Receiving (RDFI) API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ach_concourse.models.base import get_db
from ach_concourse.schemas.common import ERROR_RESPONSES
from ach_concourse.services.receiving_service import ReceivingService
from ach_concourse.schemas.receiving import (
    ReceivingEntryCreate,
    ReceivingEntryResponse,
    ReturnRequest,
)

router = APIRouter(
    prefix="/api/v1/entries",
    tags=["RDFI"],
    responses=ERROR_RESPONSES,
)


@router.post("", response_model=ReceivingEntryResponse, status_code=201)
def create_entry(
    request: ReceivingEntryCreate,
    db: Session = Depends(get_db),
):
    """Record a received entry."""
    service = ReceivingService(db)
    try:
        entry = service.create_entry(request)
        db.commit()
        return entry
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=list[ReceivingEntryResponse])
def list_entries(
    status: str = "",
    trace_number: str = "",
    db: Session = Depends(get_db),
):
    return ReceivingService(db).list_entries(status, trace_number)


@router.get("/{entry_id}", response_model=ReceivingEntryResponse)
def get_entry(
    entry_id: str,
    db: Session = Depends(get_db),
):
    entry = ReceivingService(db).get_entry(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="entry not found")
    return entry


@router.post("/{entry_id}/return", response_model=ReceivingEntryResponse)
def return_entry(
    entry_id: str,
    request: ReturnRequest,
    db: Session = Depends(get_db),
):
    """Return a received entry. A reason is required."""
    service = ReceivingService(db)
    try:
        entry = service.return_entry(entry_id, request.reason)
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    if entry is None:
        raise HTTPException(status_code=404, detail="entry not found")

    db.commit()
    return entry
