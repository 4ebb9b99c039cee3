"""
Pydantic schemas used by the gateway.

Two groups live here. The native record shapes describe
what each backend returns over the wire, decoded without
reinterpretation (timestamps stay strings). The unified
shapes describe what the aggregator hands back to callers.
"""

from pydantic import BaseModel, ConfigDict, model_serializer

from ach_concourse.models.enums import AchSide


# --- Native backend records ---

class OriginationRecord(BaseModel):
    id: str
    trace_number: str = ""
    company_name: str = ""
    sec_code: str = ""
    amount_cents: int = 0
    status: str = ""
    created_at: str = ""
    updated_at: str = ""


class ReceivingRecord(BaseModel):
    id: str
    trace_number: str = ""
    receiver_name: str = ""
    amount_cents: int = 0
    status: str = ""
    return_reason: str = ""
    created_at: str = ""
    updated_at: str = ""

    @model_serializer(mode="wrap")
    def _omit_empty_return_reason(self, handler):
        data = handler(self)
        if not data.get("return_reason"):
            data.pop("return_reason", None)
        return data


class LedgerPostingRecord(BaseModel):
    id: str
    ach_side: str = ""
    trace_number: str = ""
    amount_cents: int = 0
    direction: str = ""
    description: str = ""
    created_at: str = ""


class BalancesRecord(BaseModel):
    total_debits: int = 0
    total_credits: int = 0
    net_balance: int = 0


class CaseRecord(BaseModel):
    id: str
    side: str = ""
    trace_number: str = ""
    status: str = ""
    type: str = ""
    notes: str = ""
    created_at: str = ""
    updated_at: str = ""


# --- Unified view ---

class OriginationExtra(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    company_name: str = ""
    sec_code: str = ""


class ReceivingExtra(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    receiver_name: str = ""
    # Only set once an entry has been returned
    return_reason: str | None = None

    @model_serializer(mode="wrap")
    def _omit_missing_return_reason(self, handler):
        data = handler(self)
        if not data.get("return_reason"):
            data.pop("return_reason", None)
        return data


class UnifiedRecord(BaseModel):
    """
    One ACH entry from either side, in a shape common to both.

    The common fields are what the gateway sorts and filters on.
    Anything only one side produces lives in extra.
    """
    model_config = ConfigDict(frozen=True)

    side: AchSide
    source: str
    entry_id: str
    trace_number: str
    amount_cents: int
    status: str
    created_at: str
    extra: OriginationExtra | ReceivingExtra


class ServiceHealth(BaseModel):
    """Whether one backend answered during an aggregation, and how fast."""
    service: str
    available: bool
    error: str | None = None
    latency: str


class AggregationResponse(BaseModel):
    items: list[UnifiedRecord]
    service_info: list[ServiceHealth]
    partial: bool
    total_count: int
