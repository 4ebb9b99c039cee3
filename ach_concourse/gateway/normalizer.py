"""
Maps each backend's native entry into a UnifiedRecord.

Pure functions: no I/O, no shared state. Every valid native
entry maps to a record, including ones with empty optional
fields.
"""

from ach_concourse.models.enums import AchSide
from ach_concourse.schemas.gateway import (
    OriginationExtra,
    OriginationRecord,
    ReceivingExtra,
    ReceivingRecord,
    UnifiedRecord,
)


def normalize_origination(entry: OriginationRecord) -> UnifiedRecord:
    return UnifiedRecord(
        side=AchSide.ODFI,
        source="odfi",
        entry_id=entry.id,
        trace_number=entry.trace_number,
        amount_cents=entry.amount_cents,
        status=entry.status,
        created_at=entry.created_at,
        extra=OriginationExtra(
            company_name=entry.company_name,
            sec_code=entry.sec_code,
        ),
    )


def normalize_receiving(entry: ReceivingRecord) -> UnifiedRecord:
    """The return reason is carried only once the entry has one."""
    return UnifiedRecord(
        side=AchSide.RDFI,
        source="rdfi",
        entry_id=entry.id,
        trace_number=entry.trace_number,
        amount_cents=entry.amount_cents,
        status=entry.status,
        created_at=entry.created_at,
        extra=ReceivingExtra(
            receiver_name=entry.receiver_name,
            return_reason=entry.return_reason or None,
        ),
    )
