"""
Pydantic schemas for receiving (RDFI) entries.
"""

import uuid

from pydantic import BaseModel, model_serializer

from ach_concourse.models.enums import ReceivingStatus
from ach_concourse.schemas.common import Timestamp


class ReceivingEntryCreate(BaseModel):
    trace_number: str = ""
    receiver_name: str = ""
    amount_cents: int = 0


class ReturnRequest(BaseModel):
    """Request to return a received entry."""
    reason: str = ""


class ReceivingEntryResponse(BaseModel):
    id: uuid.UUID
    trace_number: str
    receiver_name: str
    amount_cents: int
    status: ReceivingStatus
    return_reason: str | None = None
    created_at: Timestamp
    updated_at: Timestamp

    model_config = {"from_attributes": True}

    @model_serializer(mode="wrap")
    def _omit_empty_return_reason(self, handler):
        data = handler(self)
        if not data.get("return_reason"):
            data.pop("return_reason", None)
        return data
