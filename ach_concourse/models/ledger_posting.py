"""
Ledger posting model.

Each posting records money moving in or out for one side of
an ACH payment. Postings are append-only: once written they
are never modified or deleted.
"""

import uuid
from datetime import datetime

from sqlalchemy import String, BigInteger, DateTime, Enum as SAEnum, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from ach_concourse.models.base import Base, utcnow
from ach_concourse.models.enums import AchSide, Direction


class LedgerPosting(Base):
    __tablename__ = "ledger_entries"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    ach_side: Mapped[AchSide] = mapped_column(
        SAEnum(AchSide, name="ach_side_enum"),
        nullable=False,
        index=True,
    )
    trace_number: Mapped[str] = mapped_column(
        String(32), nullable=False, default="", index=True
    )
    amount_cents: Mapped[int] = mapped_column(
        BigInteger, nullable=False
    )
    direction: Mapped[Direction] = mapped_column(
        SAEnum(Direction, name="direction_enum"),
        nullable=False,
        index=True,
    )
    description: Mapped[str] = mapped_column(
        String(255), nullable=False, default=""
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow
    )

    def __repr__(self) -> str:
        return (
            f"<LedgerPosting {self.ach_side.value} "
            f"{self.direction.value} {self.amount_cents}>"
        )
