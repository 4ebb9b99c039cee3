"""
Pydantic schemas for origination (ODFI) entries.

Request schemas only describe the shape of the payload.
Business rules (required trace number, allowed statuses)
live in OriginationService so they surface as 400s.
"""

import uuid

from pydantic import BaseModel

from ach_concourse.models.enums import OriginationStatus
from ach_concourse.schemas.common import Timestamp


class OriginationEntryCreate(BaseModel):
    trace_number: str = ""
    company_name: str = ""
    sec_code: str = ""
    amount_cents: int = 0


class OriginationStatusUpdate(BaseModel):
    status: str = ""


class OriginationEntryResponse(BaseModel):
    id: uuid.UUID
    trace_number: str
    company_name: str
    sec_code: str
    amount_cents: int
    status: OriginationStatus
    created_at: Timestamp
    updated_at: Timestamp

    model_config = {"from_attributes": True}
