"""
Origination (ODFI) entry model.

An outbound ACH entry created by the originating bank. It
starts PENDING and is later marked SENT or CANCELLED.
"""

import uuid
from datetime import datetime

from sqlalchemy import String, BigInteger, DateTime, Enum as SAEnum, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from ach_concourse.models.base import Base, utcnow
from ach_concourse.models.enums import OriginationStatus


class OriginationEntry(Base):
    __tablename__ = "odfi_entries"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    trace_number: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True
    )
    company_name: Mapped[str] = mapped_column(
        String(255), nullable=False, default=""
    )
    sec_code: Mapped[str] = mapped_column(
        String(3), nullable=False, default=""
    )
    amount_cents: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0
    )
    status: Mapped[OriginationStatus] = mapped_column(
        SAEnum(
            OriginationStatus,
            name="odfi_status_enum",
            create_constraint=True,
        ),
        nullable=False,
        default=OriginationStatus.PENDING,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, onupdate=utcnow
    )

    def __repr__(self) -> str:
        return (
            f"<OriginationEntry {self.trace_number} "
            f"{self.amount_cents} ({self.status.value})>"
        )
