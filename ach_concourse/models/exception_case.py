"""
Exception case model.

An investigation opened against one side of an ACH payment,
for example to review a return or a customer dispute.
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Text, DateTime, Enum as SAEnum, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from ach_concourse.models.base import Base, utcnow
from ach_concourse.models.enums import AchSide, CaseStatus, CaseType


class ExceptionCase(Base):
    __tablename__ = "eip_cases"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    side: Mapped[AchSide] = mapped_column(
        SAEnum(AchSide, name="case_side_enum"),
        nullable=False,
        index=True,
    )
    trace_number: Mapped[str] = mapped_column(
        String(32), nullable=False, default="", index=True
    )
    status: Mapped[CaseStatus] = mapped_column(
        SAEnum(CaseStatus, name="case_status_enum", create_constraint=True),
        nullable=False,
        default=CaseStatus.OPEN,
        index=True,
    )
    case_type: Mapped[CaseType] = mapped_column(
        "type",
        SAEnum(CaseType, name="case_type_enum", create_constraint=True),
        nullable=False,
        index=True,
    )
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, onupdate=utcnow
    )

    def __repr__(self) -> str:
        return (
            f"<ExceptionCase {self.case_type.value} "
            f"{self.side.value} ({self.status.value})>"
        )
