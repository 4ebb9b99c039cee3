"""
ACH Concourse FastAPI applications.

Each backend runs as its own process with its own app:

    uvicorn ach_concourse.main:odfi_app --port 8081
    uvicorn ach_concourse.main:rdfi_app --port 8082
    uvicorn ach_concourse.main:ledger_app --port 8083
    uvicorn ach_concourse.main:eip_app --port 8084
    uvicorn ach_concourse.main:gateway_app --port 8080

All routers are registered here.
"""

from contextlib import asynccontextmanager

import httpx
from fastapi import APIRouter, FastAPI

from ach_concourse.config import GatewayConfig, configure_logging, get_settings
from ach_concourse.api.errors import register_error_handlers
from ach_concourse.api.health import service_health_router
from ach_concourse.api.health import router as gateway_health_router
from ach_concourse.api.origination import router as origination_router
from ach_concourse.api.receiving import router as receiving_router
from ach_concourse.api.ledger import router as ledger_router
from ach_concourse.api.cases import router as cases_router
from ach_concourse.api.gateway import router as gateway_router
from ach_concourse.gateway.container import build_gateway

settings = get_settings()


@asynccontextmanager
async def _service_lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    yield


@asynccontextmanager
async def _gateway_lifespan(app: FastAPI):
    """Own the shared HTTP client for as long as the gateway runs."""
    configure_logging(settings.LOG_LEVEL)
    config = GatewayConfig.from_settings(settings)
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(config.timeout_seconds)
    ) as http:
        app.state.gateway = build_gateway(config, http)
        yield


def create_service_app(
    title: str, service_name: str, router: APIRouter
) -> FastAPI:
    """A database-backed record service with its health route."""
    app = FastAPI(
        title=f"{settings.APP_NAME}: {title}",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=_service_lifespan,
    )
    register_error_handlers(app)
    app.include_router(service_health_router(service_name))
    app.include_router(router)
    return app


def create_gateway_app() -> FastAPI:
    app = FastAPI(
        title=f"{settings.APP_NAME}: Console Gateway",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        description="Unified view over the ACH record services",
        lifespan=_gateway_lifespan,
    )
    register_error_handlers(app)
    app.include_router(gateway_health_router)
    app.include_router(gateway_router)
    return app


odfi_app = create_service_app("ODFI", "odfi", origination_router)
rdfi_app = create_service_app("RDFI", "rdfi", receiving_router)
ledger_app = create_service_app("Ledger", "ledger", ledger_router)
eip_app = create_service_app("EIP", "eip", cases_router)
gateway_app = create_gateway_app()
