"""
Unified ACH view over the origination and receiving backends.

aggregate() fans out one task per selected backend, waits for
all of them, and fans the results back in. A backend that
fails only degrades the response: it contributes no records,
shows up as unavailable in service_info and marks the
response partial. Nothing is retried or cached.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Callable

from pydantic import ValidationError

from ach_concourse.gateway.clients import (
    BackendError,
    EntryClient,
    OriginationClient,
    ReceivingClient,
)
from ach_concourse.gateway.normalizer import (
    normalize_origination,
    normalize_receiving,
)
from ach_concourse.gateway.sorting import paginate, sort_records
from ach_concourse.models.enums import AchSide
from ach_concourse.schemas.gateway import (
    AggregationResponse,
    ServiceHealth,
    UnifiedRecord,
)

logger = logging.getLogger(__name__)


class InvalidSideError(ValueError):
    """The caller named a side that no backend serves."""

    def __init__(self, side: str):
        super().__init__("invalid side: must be ODFI or RDFI")
        self.side = side


@dataclass(frozen=True)
class Backend:
    """One entry backend plus the function that normalizes its entries."""
    side: AchSide
    client: EntryClient
    normalize: Callable[..., UnifiedRecord]


@dataclass
class BackendOutcome:
    """What one backend produced for one aggregation."""
    backend_name: str
    records: list[UnifiedRecord] = field(default_factory=list)
    error: str | None = None
    latency: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None

    def health(self) -> ServiceHealth:
        return ServiceHealth(
            service=self.backend_name,
            available=self.ok,
            error=self.error,
            latency=format_latency(self.latency),
        )


def format_latency(seconds: float) -> str:
    """
    Render a duration rounded to the millisecond.

    Examples: "0s", "12ms", "1.5s", "1m2.25s".
    """
    millis = round(seconds * 1000)
    if millis <= 0:
        return "0s"
    if millis < 1000:
        return f"{millis}ms"

    minutes, rest = divmod(millis, 60_000)
    secs = f"{rest / 1000:.3f}".rstrip("0").rstrip(".")
    if minutes:
        return f"{minutes}m{secs}s"
    return f"{secs}s"


def parse_side(side: str) -> AchSide:
    """Case-insensitive side lookup. Raises InvalidSideError."""
    try:
        return AchSide(side.upper())
    except ValueError:
        raise InvalidSideError(side)


class Aggregator:
    """
    Queries the entry backends and merges what they return.

    The backends are injected, so the aggregator never reads
    configuration or builds HTTP clients itself.
    """

    def __init__(self, backends: list[Backend]):
        self.backends = {backend.side: backend for backend in backends}

    @classmethod
    def from_clients(
        cls, origination: OriginationClient, receiving: ReceivingClient
    ) -> "Aggregator":
        return cls([
            Backend(AchSide.ODFI, origination, normalize_origination),
            Backend(AchSide.RDFI, receiving, normalize_receiving),
        ])

    def _backend(self, side: str) -> Backend:
        backend = self.backends.get(parse_side(side))
        if backend is None:
            raise InvalidSideError(side)
        return backend

    def _select(self, side: str) -> list[Backend]:
        if not side:
            return list(self.backends.values())
        return [self._backend(side)]

    async def _fetch(
        self, backend: Backend, status: str, trace_number: str
    ) -> BackendOutcome:
        """
        Run one backend call to completion.

        Never raises for a backend failure: the error is
        recorded on the outcome instead.
        """
        outcome = BackendOutcome(backend_name=backend.side.value)
        start = time.perf_counter()
        try:
            entries = await backend.client.list_entries(status, trace_number)
            outcome.records = [backend.normalize(entry) for entry in entries]
        except (BackendError, ValidationError) as e:
            outcome.records = []
            outcome.error = str(e)
        outcome.latency = time.perf_counter() - start
        return outcome

    async def aggregate(
        self,
        side: str = "",
        status: str = "",
        trace_number: str = "",
        sort_by: str = "",
        sort_order: str = "",
        limit: int = 0,
        offset: int = 0,
    ) -> AggregationResponse:
        """
        Fetch, merge, sort and page entries from the selected backends.

        An empty side queries every backend. Backend failures
        degrade the response; only an unknown side raises.
        """
        selected = self._select(side)

        tasks = [
            asyncio.create_task(self._fetch(backend, status, trace_number))
            for backend in selected
        ]

        merged: list[UnifiedRecord] = []
        service_info: list[ServiceHealth] = []
        partial = False

        try:
            # Fan in as each backend finishes
            for next_done in asyncio.as_completed(tasks):
                outcome = await next_done
                health = outcome.health()

                if outcome.ok:
                    merged.extend(outcome.records)
                    logger.info(
                        "[OK] %s service returned %d items (latency: %s)",
                        outcome.backend_name, len(outcome.records),
                        health.latency,
                    )
                else:
                    partial = True
                    logger.warning(
                        "[DEGRADED] %s service unavailable: %s (latency: %s)",
                        outcome.backend_name, outcome.error, health.latency,
                    )

                service_info.append(health)
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()

        ordered = sort_records(merged, sort_by, sort_order)

        return AggregationResponse(
            items=paginate(ordered, limit, offset),
            service_info=service_info,
            partial=partial,
            total_count=len(ordered),
        )

    async def get_one(self, side: str, entry_id: str) -> UnifiedRecord | None:
        """
        Fetch a single entry from the backend named by side.

        Raises InvalidSideError before contacting anything if
        the side is unknown, and BackendError if the backend
        call fails. Returns None if the entry does not exist.
        """
        backend = self._backend(side)

        entry = await backend.client.get_entry(entry_id)
        if entry is None:
            return None
        return backend.normalize(entry)
