"""
Exception case service: opens and tracks investigations.
"""

import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from ach_concourse.models.exception_case import ExceptionCase
from ach_concourse.models.enums import AchSide, CaseStatus, CaseType
from ach_concourse.schemas.exception_case import CaseCreate
from ach_concourse.services._ids import parse_id


class CaseService:

    def __init__(self, db: Session):
        self.db = db

    def create_case(self, request: CaseCreate) -> ExceptionCase:
        """
        Open a new case in OPEN status.

        Raises ValueError when side or type is missing or unknown.
        """
        if not request.side:
            raise ValueError("side is required")
        if not request.type:
            raise ValueError("type is required")

        try:
            side = AchSide(request.side)
        except ValueError:
            raise ValueError("side must be ODFI or RDFI")

        try:
            case_type = CaseType(request.type)
        except ValueError:
            raise ValueError("invalid case type")

        exception_case = ExceptionCase(
            side=side,
            trace_number=request.trace_number,
            status=CaseStatus.OPEN,
            case_type=case_type,
            notes=request.notes,
        )
        self.db.add(exception_case)
        self.db.flush()
        return exception_case

    def get_case(self, case_id: str | uuid.UUID) -> ExceptionCase | None:
        key = parse_id(case_id)
        if key is None:
            return None
        return self.db.get(ExceptionCase, key)

    def list_cases(
        self, status: str = "", side: str = "", trace_number: str = ""
    ) -> list[ExceptionCase]:
        """Return cases matching the optional filters, newest first."""
        query = select(ExceptionCase)
        try:
            if status:
                query = query.where(ExceptionCase.status == CaseStatus(status))
            if side:
                query = query.where(ExceptionCase.side == AchSide(side))
        except ValueError:
            return []
        if trace_number:
            query = query.where(ExceptionCase.trace_number == trace_number)

        cases = self.db.execute(
            query.order_by(ExceptionCase.created_at.desc())
        ).scalars().all()
        return list(cases)

    def update_status(
        self, case_id: str | uuid.UUID, status: str
    ) -> ExceptionCase | None:
        """
        Move a case to a new status.

        Raises ValueError for an unknown status. Returns None
        if the case does not exist.
        """
        try:
            new_status = CaseStatus(status)
        except ValueError:
            raise ValueError("invalid status")

        exception_case = self.get_case(case_id)
        if exception_case is None:
            return None

        exception_case.status = new_status
        self.db.flush()
        return exception_case
