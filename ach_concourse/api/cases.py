"""
Exception case API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ach_concourse.models.base import get_db
from ach_concourse.schemas.common import ERROR_RESPONSES
from ach_concourse.services.case_service import CaseService
from ach_concourse.schemas.exception_case import (
    CaseCreate,
    CaseResponse,
    CaseStatusUpdate,
)

router = APIRouter(
    prefix="/api/v1/cases",
    tags=["EIP"],
    responses=ERROR_RESPONSES,
)


@router.post("", response_model=CaseResponse, status_code=201)
def create_case(
    request: CaseCreate,
    db: Session = Depends(get_db),
):
    """Open a new case in OPEN status."""
    service = CaseService(db)
    try:
        exception_case = service.create_case(request)
        db.commit()
        return exception_case
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=list[CaseResponse])
def list_cases(
    status: str = "",
    side: str = "",
    trace_number: str = "",
    db: Session = Depends(get_db),
):
    return CaseService(db).list_cases(status, side, trace_number)


@router.get("/{case_id}", response_model=CaseResponse)
def get_case(
    case_id: str,
    db: Session = Depends(get_db),
):
    exception_case = CaseService(db).get_case(case_id)
    if exception_case is None:
        raise HTTPException(status_code=404, detail="case not found")
    return exception_case


@router.patch("/{case_id}/status", response_model=CaseResponse)
def update_case_status(
    case_id: str,
    request: CaseStatusUpdate,
    db: Session = Depends(get_db),
):
    """Move a case to OPEN, IN_PROGRESS or RESOLVED."""
    service = CaseService(db)
    try:
        exception_case = service.update_status(case_id, request.status)
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    if exception_case is None:
        raise HTTPException(status_code=404, detail="case not found")

    db.commit()
    return exception_case
