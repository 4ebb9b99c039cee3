"""
Receiving service: records inbound ACH entries and returns.

A return marks the entry RETURNED and keeps the reason on
the entry so downstream views can show why.
"""

import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from ach_concourse.models.receiving_entry import ReceivingEntry
from ach_concourse.models.enums import ReceivingStatus
from ach_concourse.schemas.receiving import ReceivingEntryCreate
from ach_concourse.services._ids import parse_id


class ReceivingService:

    def __init__(self, db: Session):
        self.db = db

    def create_entry(self, request: ReceivingEntryCreate) -> ReceivingEntry:
        """Create a new receiving entry in RECEIVED status."""
        if not request.trace_number:
            raise ValueError("trace_number is required")

        entry = ReceivingEntry(
            trace_number=request.trace_number,
            receiver_name=request.receiver_name,
            amount_cents=request.amount_cents,
            status=ReceivingStatus.RECEIVED,
        )
        self.db.add(entry)
        self.db.flush()
        return entry

    def get_entry(self, entry_id: str | uuid.UUID) -> ReceivingEntry | None:
        key = parse_id(entry_id)
        if key is None:
            return None
        return self.db.get(ReceivingEntry, key)

    def list_entries(
        self, status: str = "", trace_number: str = ""
    ) -> list[ReceivingEntry]:
        """Return entries matching the optional filters, newest first."""
        query = select(ReceivingEntry)
        if status:
            try:
                query = query.where(
                    ReceivingEntry.status == ReceivingStatus(status)
                )
            except ValueError:
                return []
        if trace_number:
            query = query.where(ReceivingEntry.trace_number == trace_number)

        entries = self.db.execute(
            query.order_by(ReceivingEntry.created_at.desc())
        ).scalars().all()
        return list(entries)

    def return_entry(
        self, entry_id: str | uuid.UUID, reason: str
    ) -> ReceivingEntry | None:
        """
        Return an entry with a reason.

        Raises ValueError if no reason is given. Returns None
        if the entry does not exist.
        """
        if not reason:
            raise ValueError("return reason is required")

        entry = self.get_entry(entry_id)
        if entry is None:
            return None

        entry.status = ReceivingStatus.RETURNED
        entry.return_reason = reason
        self.db.flush()
        return entry
