"""
Pydantic schemas for ledger postings.

These define the API contract: what data comes in,
what data goes out. They are separate from the database
models because the API shape and the storage shape
are often different.
"""

import uuid

from pydantic import BaseModel

from ach_concourse.models.enums import AchSide, Direction
from ach_concourse.schemas.common import Timestamp


# --- Request Schemas ---

class LedgerPostingCreate(BaseModel):
    """A single posting against one side of a payment."""
    ach_side: str = ""
    trace_number: str = ""
    amount_cents: int = 0
    direction: str = ""
    description: str = ""


# --- Response Schemas ---

class LedgerPostingResponse(BaseModel):
    id: uuid.UUID
    ach_side: AchSide
    trace_number: str
    amount_cents: int
    direction: Direction
    description: str
    created_at: Timestamp

    model_config = {"from_attributes": True}


class BalanceResponse(BaseModel):
    """Totals across every posting. Net balance is credits minus debits."""
    total_debits: int
    total_credits: int
    net_balance: int
