"""
Types shared by every service's API contract.
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, PlainSerializer


def format_timestamp(value: datetime) -> str:
    """
    Render a timestamp as fixed-width ISO-8601 UTC with a Z suffix.

    Fixed width matters: the gateway sorts these strings
    lexicographically, so every value carries microseconds.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="microseconds") + "Z"


Timestamp = Annotated[
    datetime, PlainSerializer(format_timestamp, return_type=str)
]


class ErrorResponse(BaseModel):
    error: str


# Documented on every router; the body is rendered by api.errors
ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


class HealthResponse(BaseModel):
    status: str


class ServiceHealthResponse(HealthResponse):
    service: str
    database: str
