"""
HTTP clients for the backend services the gateway talks to.

Each client issues exactly one request per call, decodes the
response into the backend's native record shape and never
retries. Every failure (transport error, unexpected status,
body that does not decode) is raised as BackendError so the
caller has one thing to catch.
"""

from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from ach_concourse.schemas.exception_case import CaseCreate
from ach_concourse.schemas.gateway import (
    BalancesRecord,
    CaseRecord,
    LedgerPostingRecord,
    OriginationRecord,
    ReceivingRecord,
)
from ach_concourse.schemas.ledger import LedgerPostingCreate
from ach_concourse.schemas.origination import OriginationEntryCreate
from ach_concourse.schemas.receiving import ReceivingEntryCreate

RecordT = TypeVar("RecordT", bound=BaseModel)


class BackendError(Exception):
    """A backend could not be reached or answered with something unusable."""

    def __init__(self, service: str, message: str):
        super().__init__(message)
        self.service = service


def _filters(**params: str) -> dict[str, str]:
    """Drop empty filters so they are not sent as blank query parameters."""
    return {key: value for key, value in params.items() if value}


class ServiceClient:
    """
    Shared request/decode plumbing for one backend.

    The httpx.AsyncClient is owned by whoever built this
    client; it is shared across clients and requests.
    """

    service_name: str = ""

    def __init__(self, http: httpx.AsyncClient, base_url: str):
        self._http = http
        self._base_url = base_url.rstrip("/")

    def _url(self, path: str) -> str:
        return f"{self._base_url}/api/v1{path}"

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        try:
            return await self._http.request(
                method, self._url(path), params=params, json=json
            )
        except httpx.HTTPError as e:
            raise BackendError(
                self.service_name,
                f"{self.service_name} service request failed: {e!r}",
            ) from e

    def _status_error(
        self, response: httpx.Response, include_body: bool = False
    ) -> BackendError:
        message = (
            f"{self.service_name} service returned status "
            f"{response.status_code}"
        )
        if include_body:
            message += f": {response.text}"
        return BackendError(self.service_name, message)

    def _decode(self, response: httpx.Response, adapter: TypeAdapter):
        try:
            return adapter.validate_json(response.content)
        except ValidationError as e:
            raise BackendError(
                self.service_name,
                f"{self.service_name} service returned a malformed "
                f"payload: {e.error_count()} validation error(s)",
            ) from e

    async def _list(
        self, path: str, record: type[RecordT], params: dict[str, str]
    ) -> list[RecordT]:
        response = await self._send("GET", path, params=params)
        if response.status_code != 200:
            raise self._status_error(response)
        return self._decode(response, TypeAdapter(list[record]))

    async def _get(self, path: str, record: type[RecordT]) -> RecordT | None:
        response = await self._send("GET", path)
        if response.status_code == 404:
            return None
        if response.status_code != 200:
            raise self._status_error(response)
        return self._decode(response, TypeAdapter(record))

    async def _create(
        self, path: str, record: type[RecordT], body: BaseModel
    ) -> RecordT:
        response = await self._send("POST", path, json=body.model_dump())
        if response.status_code != 201:
            raise self._status_error(response, include_body=True)
        return self._decode(response, TypeAdapter(record))

    async def _modify(
        self,
        method: str,
        path: str,
        record: type[RecordT],
        body: dict[str, Any],
    ) -> RecordT | None:
        response = await self._send(method, path, json=body)
        if response.status_code == 404:
            return None
        if response.status_code != 200:
            raise self._status_error(response, include_body=True)
        return self._decode(response, TypeAdapter(record))


class EntryClient(ServiceClient):
    """A backend that serves ACH entries the aggregator can list and fetch."""

    record_type: type[BaseModel] = BaseModel

    async def list_entries(
        self, status: str = "", trace_number: str = ""
    ) -> list:
        """Fetch entries matching the filters. No entries is an empty list."""
        return await self._list(
            "/entries",
            self.record_type,
            _filters(status=status, trace_number=trace_number),
        )

    async def get_entry(self, entry_id: str):
        """Fetch one entry, or None if the backend does not have it."""
        return await self._get(
            f"/entries/{quote(entry_id, safe='')}", self.record_type
        )


class OriginationClient(EntryClient):
    service_name = "ODFI"
    record_type = OriginationRecord

    async def create_entry(
        self, request: OriginationEntryCreate
    ) -> OriginationRecord:
        return await self._create("/entries", OriginationRecord, request)

    async def update_status(
        self, entry_id: str, status: str
    ) -> OriginationRecord | None:
        return await self._modify(
            "PATCH",
            f"/entries/{quote(entry_id, safe='')}/status",
            OriginationRecord,
            {"status": status},
        )


class ReceivingClient(EntryClient):
    service_name = "RDFI"
    record_type = ReceivingRecord

    async def create_entry(
        self, request: ReceivingEntryCreate
    ) -> ReceivingRecord:
        return await self._create("/entries", ReceivingRecord, request)

    async def return_entry(
        self, entry_id: str, reason: str
    ) -> ReceivingRecord | None:
        return await self._modify(
            "POST",
            f"/entries/{quote(entry_id, safe='')}/return",
            ReceivingRecord,
            {"reason": reason},
        )


class LedgerClient(ServiceClient):
    service_name = "Ledger"

    async def create_posting(
        self, request: LedgerPostingCreate
    ) -> LedgerPostingRecord:
        return await self._create("/postings", LedgerPostingRecord, request)

    async def list_postings(
        self, ach_side: str = "", trace_number: str = ""
    ) -> list[LedgerPostingRecord]:
        return await self._list(
            "/postings",
            LedgerPostingRecord,
            _filters(ach_side=ach_side, trace_number=trace_number),
        )

    async def get_balances(self) -> BalancesRecord:
        response = await self._send("GET", "/balances")
        if response.status_code != 200:
            raise self._status_error(response)
        return self._decode(response, TypeAdapter(BalancesRecord))


class CaseClient(ServiceClient):
    service_name = "EIP"

    async def create_case(self, request: CaseCreate) -> CaseRecord:
        return await self._create("/cases", CaseRecord, request)

    async def list_cases(
        self, status: str = "", side: str = "", trace_number: str = ""
    ) -> list[CaseRecord]:
        return await self._list(
            "/cases",
            CaseRecord,
            _filters(status=status, side=side, trace_number=trace_number),
        )

    async def get_case(self, case_id: str) -> CaseRecord | None:
        return await self._get(f"/cases/{quote(case_id, safe='')}", CaseRecord)

    async def update_status(
        self, case_id: str, status: str
    ) -> CaseRecord | None:
        return await self._modify(
            "PATCH",
            f"/cases/{quote(case_id, safe='')}/status",
            CaseRecord,
            {"status": status},
        )
