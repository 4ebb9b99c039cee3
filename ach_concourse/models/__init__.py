"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from ach_concourse.models.base import Base
from ach_concourse.models.enums import (
    AchSide,
    OriginationStatus,
    ReceivingStatus,
    Direction,
    CaseStatus,
    CaseType,
)
from ach_concourse.models.origination_entry import OriginationEntry
from ach_concourse.models.receiving_entry import ReceivingEntry
from ach_concourse.models.ledger_posting import LedgerPosting
from ach_concourse.models.exception_case import ExceptionCase

__all__ = [
    "Base",
    "AchSide",
    "OriginationStatus",
    "ReceivingStatus",
    "Direction",
    "CaseStatus",
    "CaseType",
    "OriginationEntry",
    "ReceivingEntry",
    "LedgerPosting",
    "ExceptionCase",
]
