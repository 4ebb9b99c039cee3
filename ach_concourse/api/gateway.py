"""
Gateway API endpoints.

The unified /ach-items routes go through the Aggregator. The
per-service routes pass requests through to one backend and
translate its failures into HTTP errors: a failed read is a
500, a failed write is a 400, and a missing record is a 404.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from ach_concourse.gateway.aggregator import InvalidSideError
from ach_concourse.gateway.clients import BackendError
from ach_concourse.gateway.container import Gateway
from ach_concourse.gateway.sorting import SORT_KEYS, SORT_ORDERS
from ach_concourse.models.enums import AchSide
from ach_concourse.schemas.common import ERROR_RESPONSES, ErrorResponse
from ach_concourse.schemas.exception_case import CaseCreate, CaseStatusUpdate
from ach_concourse.schemas.gateway import (
    AggregationResponse,
    BalancesRecord,
    CaseRecord,
    LedgerPostingRecord,
    OriginationRecord,
    ReceivingRecord,
    UnifiedRecord,
)
from ach_concourse.schemas.ledger import LedgerPostingCreate
from ach_concourse.schemas.origination import (
    OriginationEntryCreate,
    OriginationStatusUpdate,
)
from ach_concourse.schemas.receiving import ReceivingEntryCreate, ReturnRequest

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1",
    tags=["Gateway"],
    responses={**ERROR_RESPONSES, 500: {"model": ErrorResponse}},
)

DEFAULT_LIMIT = 100
MAX_LIMIT = 1000


def get_gateway(request: Request) -> Gateway:
    """The Gateway built at startup. Overridden in tests."""
    return request.app.state.gateway


def parse_limit(raw: str | None) -> int:
    """Positive ints are clamped to MAX_LIMIT; anything else is the default."""
    try:
        limit = int(raw) if raw else DEFAULT_LIMIT
    except ValueError:
        return DEFAULT_LIMIT
    if limit <= 0:
        return DEFAULT_LIMIT
    return min(limit, MAX_LIMIT)


def parse_offset(raw: str | None) -> int:
    try:
        offset = int(raw) if raw else 0
    except ValueError:
        return 0
    return max(offset, 0)


def _not_found(message: str = "entry not found") -> HTTPException:
    return HTTPException(status_code=404, detail=message)


# --- Unified ACH items ---

@router.get("/ach-items", response_model=AggregationResponse)
async def list_ach_items(
    side: str = "",
    status: str = "",
    trace_number: str = "",
    sort_by: str = "",
    sort_order: str = "",
    limit: str | None = None,
    offset: str | None = None,
    gateway: Gateway = Depends(get_gateway),
):
    """
    Unified, sorted, paginated view over ODFI and RDFI entries.

    Always answers 200 when the request itself is valid; an
    unavailable backend shows up in service_info instead.
    """
    if side and side.upper() not in (s.value for s in AchSide):
        raise HTTPException(status_code=400, detail="side must be ODFI or RDFI")
    if sort_order and sort_order not in SORT_ORDERS:
        raise HTTPException(
            status_code=400, detail="sort_order must be 'asc' or 'desc'"
        )
    if sort_by and sort_by not in SORT_KEYS:
        raise HTTPException(
            status_code=400,
            detail="sort_by must be one of: created_at, status, amount, "
                   "trace_number, side",
        )

    return await gateway.aggregator.aggregate(
        side=side,
        status=status,
        trace_number=trace_number,
        sort_by=sort_by,
        sort_order=sort_order,
        limit=parse_limit(limit),
        offset=parse_offset(offset),
    )


@router.get("/ach-items/{side}/{entry_id}", response_model=UnifiedRecord)
async def get_ach_item(
    side: str,
    entry_id: str,
    gateway: Gateway = Depends(get_gateway),
):
    try:
        item = await gateway.aggregator.get_one(side, entry_id)
    except (InvalidSideError, BackendError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    if item is None:
        raise _not_found()
    return item


@router.post(
    "/ach-items/{side}/{entry_id}/return", response_model=ReceivingRecord
)
async def return_ach_item(
    side: str,
    entry_id: str,
    request: ReturnRequest,
    gateway: Gateway = Depends(get_gateway),
):
    """Only received (RDFI) entries can be returned."""
    if side.upper() != AchSide.RDFI.value:
        raise HTTPException(
            status_code=400, detail="only RDFI entries can be returned"
        )
    return await return_rdfi_entry(entry_id, request, gateway)


# --- ODFI pass-through ---

@router.post("/odfi/entries", response_model=OriginationRecord, status_code=201)
async def create_odfi_entry(
    request: OriginationEntryCreate,
    gateway: Gateway = Depends(get_gateway),
):
    try:
        return await gateway.odfi.create_entry(request)
    except BackendError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/odfi/entries", response_model=list[OriginationRecord])
async def list_odfi_entries(
    status: str = "",
    trace_number: str = "",
    gateway: Gateway = Depends(get_gateway),
):
    try:
        return await gateway.odfi.list_entries(status, trace_number)
    except BackendError as e:
        logger.error("Listing ODFI entries failed: %s", e)
        raise HTTPException(
            status_code=500, detail="failed to list ODFI entries"
        )


@router.get("/odfi/entries/{entry_id}", response_model=OriginationRecord)
async def get_odfi_entry(
    entry_id: str,
    gateway: Gateway = Depends(get_gateway),
):
    try:
        entry = await gateway.odfi.get_entry(entry_id)
    except BackendError as e:
        logger.error("Fetching ODFI entry %s failed: %s", entry_id, e)
        raise HTTPException(status_code=500, detail="failed to get ODFI entry")

    if entry is None:
        raise _not_found()
    return entry


@router.patch(
    "/odfi/entries/{entry_id}/status", response_model=OriginationRecord
)
async def update_odfi_status(
    entry_id: str,
    request: OriginationStatusUpdate,
    gateway: Gateway = Depends(get_gateway),
):
    try:
        entry = await gateway.odfi.update_status(entry_id, request.status)
    except BackendError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if entry is None:
        raise _not_found()
    return entry


# --- RDFI pass-through ---

@router.post("/rdfi/entries", response_model=ReceivingRecord, status_code=201)
async def create_rdfi_entry(
    request: ReceivingEntryCreate,
    gateway: Gateway = Depends(get_gateway),
):
    try:
        return await gateway.rdfi.create_entry(request)
    except BackendError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/rdfi/entries", response_model=list[ReceivingRecord])
async def list_rdfi_entries(
    status: str = "",
    trace_number: str = "",
    gateway: Gateway = Depends(get_gateway),
):
    try:
        return await gateway.rdfi.list_entries(status, trace_number)
    except BackendError as e:
        logger.error("Listing RDFI entries failed: %s", e)
        raise HTTPException(
            status_code=500, detail="failed to list RDFI entries"
        )


@router.get("/rdfi/entries/{entry_id}", response_model=ReceivingRecord)
async def get_rdfi_entry(
    entry_id: str,
    gateway: Gateway = Depends(get_gateway),
):
    try:
        entry = await gateway.rdfi.get_entry(entry_id)
    except BackendError as e:
        logger.error("Fetching RDFI entry %s failed: %s", entry_id, e)
        raise HTTPException(status_code=500, detail="failed to get RDFI entry")

    if entry is None:
        raise _not_found()
    return entry


@router.post("/rdfi/entries/{entry_id}/return", response_model=ReceivingRecord)
async def return_rdfi_entry(
    entry_id: str,
    request: ReturnRequest,
    gateway: Gateway = Depends(get_gateway),
):
    try:
        entry = await gateway.rdfi.return_entry(entry_id, request.reason)
    except BackendError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if entry is None:
        raise _not_found()
    return entry


# --- Ledger pass-through ---

@router.post(
    "/ledger/postings", response_model=LedgerPostingRecord, status_code=201
)
async def create_ledger_posting(
    request: LedgerPostingCreate,
    gateway: Gateway = Depends(get_gateway),
):
    try:
        return await gateway.ledger.create_posting(request)
    except BackendError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/ledger/postings", response_model=list[LedgerPostingRecord])
async def list_ledger_postings(
    ach_side: str = "",
    trace_number: str = "",
    gateway: Gateway = Depends(get_gateway),
):
    try:
        return await gateway.ledger.list_postings(ach_side, trace_number)
    except BackendError as e:
        logger.error("Listing ledger postings failed: %s", e)
        raise HTTPException(
            status_code=500, detail="failed to list ledger postings"
        )


@router.get("/ledger/balances", response_model=BalancesRecord)
async def get_ledger_balances(gateway: Gateway = Depends(get_gateway)):
    try:
        return await gateway.ledger.get_balances()
    except BackendError as e:
        logger.error("Fetching ledger balances failed: %s", e)
        raise HTTPException(status_code=500, detail="failed to get balances")


# --- EIP pass-through ---

@router.post("/eip/cases", response_model=CaseRecord, status_code=201)
async def create_eip_case(
    request: CaseCreate,
    gateway: Gateway = Depends(get_gateway),
):
    try:
        return await gateway.eip.create_case(request)
    except BackendError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/eip/cases", response_model=list[CaseRecord])
async def list_eip_cases(
    status: str = "",
    side: str = "",
    trace_number: str = "",
    gateway: Gateway = Depends(get_gateway),
):
    try:
        return await gateway.eip.list_cases(status, side, trace_number)
    except BackendError as e:
        logger.error("Listing EIP cases failed: %s", e)
        raise HTTPException(status_code=500, detail="failed to list EIP cases")


@router.get("/eip/cases/{case_id}", response_model=CaseRecord)
async def get_eip_case(
    case_id: str,
    gateway: Gateway = Depends(get_gateway),
):
    try:
        eip_case = await gateway.eip.get_case(case_id)
    except BackendError as e:
        logger.error("Fetching EIP case %s failed: %s", case_id, e)
        raise HTTPException(status_code=500, detail="failed to get EIP case")

    if eip_case is None:
        raise _not_found("case not found")
    return eip_case


@router.patch("/eip/cases/{case_id}/status", response_model=CaseRecord)
async def update_eip_case_status(
    case_id: str,
    request: CaseStatusUpdate,
    gateway: Gateway = Depends(get_gateway),
):
    try:
        eip_case = await gateway.eip.update_status(case_id, request.status)
    except BackendError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if eip_case is None:
        raise _not_found("case not found")
    return eip_case
