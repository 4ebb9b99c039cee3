"""
Shared enumerations for database models.

Using Python enums mapped to database enums ensures that
only valid values can be stored. An invalid status or
direction is caught at the database level, not just in
Python validation.
"""

import enum


class AchSide(str, enum.Enum):
    """Which side of an ACH payment a record belongs to."""
    ODFI = "ODFI"
    RDFI = "RDFI"


class OriginationStatus(str, enum.Enum):
    PENDING = "PENDING"
    SENT = "SENT"
    CANCELLED = "CANCELLED"


class ReceivingStatus(str, enum.Enum):
    RECEIVED = "RECEIVED"
    POSTED = "POSTED"
    RETURNED = "RETURNED"


class Direction(str, enum.Enum):
    """Direction of a ledger posting."""
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class CaseStatus(str, enum.Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"


class CaseType(str, enum.Enum):
    """Why an exception case was opened."""
    RETURN_REVIEW = "RETURN_REVIEW"
    NOC_REVIEW = "NOC_REVIEW"
    CUSTOMER_DISPUTE = "CUSTOMER_DISPUTE"
