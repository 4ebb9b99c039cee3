"""
Receiving (RDFI) entry model.

An inbound ACH entry received by the bank. A received entry
can be returned, which records the reason on the entry.
"""

import uuid
from datetime import datetime

from sqlalchemy import String, BigInteger, DateTime, Enum as SAEnum, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from ach_concourse.models.base import Base, utcnow
from ach_concourse.models.enums import ReceivingStatus


class ReceivingEntry(Base):
    __tablename__ = "rdfi_entries"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    trace_number: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True
    )
    receiver_name: Mapped[str] = mapped_column(
        String(255), nullable=False, default=""
    )
    amount_cents: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0
    )
    status: Mapped[ReceivingStatus] = mapped_column(
        SAEnum(
            ReceivingStatus,
            name="rdfi_status_enum",
            create_constraint=True,
        ),
        nullable=False,
        default=ReceivingStatus.RECEIVED,
        index=True,
    )
    # NULL until the entry is returned
    return_reason: Mapped[str | None] = mapped_column(
        String(255), nullable=True, default=None
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, onupdate=utcnow
    )

    def __repr__(self) -> str:
        return (
            f"<ReceivingEntry {self.trace_number} "
            f"{self.amount_cents} ({self.status.value})>"
        )
