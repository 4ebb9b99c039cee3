"""
Origination service: records outbound ACH entries.

New entries always start PENDING. Status changes are limited
to the known origination statuses; anything else is rejected
before the database is touched.
"""

import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from ach_concourse.models.origination_entry import OriginationEntry
from ach_concourse.models.enums import OriginationStatus
from ach_concourse.schemas.origination import OriginationEntryCreate
from ach_concourse.services._ids import parse_id


class OriginationService:

    def __init__(self, db: Session):
        self.db = db

    def create_entry(self, request: OriginationEntryCreate) -> OriginationEntry:
        """
        Create a new origination entry in PENDING status.

        Raises ValueError if the trace number is missing.
        """
        if not request.trace_number:
            raise ValueError("trace_number is required")

        entry = OriginationEntry(
            trace_number=request.trace_number,
            company_name=request.company_name,
            sec_code=request.sec_code,
            amount_cents=request.amount_cents,
            status=OriginationStatus.PENDING,
        )
        self.db.add(entry)
        self.db.flush()
        return entry

    def get_entry(self, entry_id: str | uuid.UUID) -> OriginationEntry | None:
        """Get an entry by id, or None if it does not exist."""
        key = parse_id(entry_id)
        if key is None:
            return None
        return self.db.get(OriginationEntry, key)

    def list_entries(
        self, status: str = "", trace_number: str = ""
    ) -> list[OriginationEntry]:
        """Return entries matching the optional filters, newest first."""
        query = select(OriginationEntry)
        if status:
            try:
                query = query.where(
                    OriginationEntry.status == OriginationStatus(status)
                )
            except ValueError:
                # No stored entry can carry an unknown status
                return []
        if trace_number:
            query = query.where(OriginationEntry.trace_number == trace_number)

        entries = self.db.execute(
            query.order_by(OriginationEntry.created_at.desc())
        ).scalars().all()
        return list(entries)

    def update_status(
        self, entry_id: str | uuid.UUID, status: str
    ) -> OriginationEntry | None:
        """
        Move an entry to a new status.

        Raises ValueError for an unknown status. Returns None
        if the entry does not exist.
        """
        try:
            new_status = OriginationStatus(status)
        except ValueError:
            raise ValueError("invalid status")

        entry = self.get_entry(entry_id)
        if entry is None:
            return None

        entry.status = new_status
        self.db.flush()
        return entry
