"""
Origination (ODFI) API endpoints.

The API layer is thin: it handles HTTP concerns (status codes,
response formatting) and delegates all business logic to the
OriginationService.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ach_concourse.models.base import get_db
from ach_concourse.schemas.common import ERROR_RESPONSES
from ach_concourse.services.origination_service import OriginationService
from ach_concourse.schemas.origination import (
    OriginationEntryCreate,
    OriginationEntryResponse,
    OriginationStatusUpdate,
)

router = APIRouter(
    prefix="/api/v1/entries",
    tags=["ODFI"],
    responses=ERROR_RESPONSES,
)


@router.post("", response_model=OriginationEntryResponse, status_code=201)
def create_entry(
    request: OriginationEntryCreate,
    db: Session = Depends(get_db),
):
    """Create a new origination entry in PENDING status."""
    service = OriginationService(db)
    try:
        entry = service.create_entry(request)
        db.commit()
        return entry
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=list[OriginationEntryResponse])
def list_entries(
    status: str = "",
    trace_number: str = "",
    db: Session = Depends(get_db),
):
    """List entries, newest first, optionally filtered."""
    return OriginationService(db).list_entries(status, trace_number)


@router.get("/{entry_id}", response_model=OriginationEntryResponse)
def get_entry(
    entry_id: str,
    db: Session = Depends(get_db),
):
    entry = OriginationService(db).get_entry(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="entry not found")
    return entry


@router.patch("/{entry_id}/status", response_model=OriginationEntryResponse)
def update_status(
    entry_id: str,
    request: OriginationStatusUpdate,
    db: Session = Depends(get_db),
):
    """
    Change an entry's status.

    Only PENDING, SENT and CANCELLED are accepted.
    """
    service = OriginationService(db)
    try:
        entry = service.update_status(entry_id, request.status)
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    if entry is None:
        raise HTTPException(status_code=404, detail="entry not found")

    db.commit()
    return entry
