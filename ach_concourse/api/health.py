"""
Health check endpoints.

Used by load balancers, monitoring systems, and the gateway
to verify a service is running and responsive.
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from ach_concourse.models.base import get_db
from ach_concourse.schemas.common import HealthResponse, ServiceHealthResponse

router = APIRouter(tags=["Health"])


def service_health_router(service_name: str) -> APIRouter:
    """
    Health route for a database-backed service.

    Reports "ok" when the database answers and "degraded"
    otherwise, always with HTTP 200 so callers can read why.
    """
    service_router = APIRouter(tags=["Health"])

    @service_router.get("/healthz", response_model=ServiceHealthResponse)
    def health_check(db: Session = Depends(get_db)):
        try:
            db.execute(text("SELECT 1"))
            db_status = "healthy"
        except Exception:
            db_status = "unhealthy"

        return ServiceHealthResponse(
            status="ok" if db_status == "healthy" else "degraded",
            service=service_name,
            database=db_status,
        )

    return service_router


@router.get("/healthz", response_model=HealthResponse)
def gateway_health():
    """The gateway holds no state of its own: reachable means ok."""
    return HealthResponse(status="ok")
