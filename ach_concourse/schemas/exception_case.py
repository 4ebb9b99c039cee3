"""
Pydantic schemas for exception cases.
"""

import uuid

from pydantic import BaseModel, Field

from ach_concourse.models.enums import AchSide, CaseStatus, CaseType
from ach_concourse.schemas.common import Timestamp


class CaseCreate(BaseModel):
    side: str = ""
    trace_number: str = ""
    type: str = ""
    notes: str = ""


class CaseStatusUpdate(BaseModel):
    status: str = ""


class CaseResponse(BaseModel):
    id: uuid.UUID
    side: AchSide
    trace_number: str
    status: CaseStatus
    type: CaseType = Field(validation_alias="case_type")
    notes: str
    created_at: Timestamp
    updated_at: Timestamp

    model_config = {"from_attributes": True}
