"""
Application configuration.

All configuration is loaded from environment variables.
Never hardcode secrets or connection strings in code.
"""

import logging
import os
import sys
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file into environment variables
load_dotenv()

# The driver is named so the URL matches the installed psycopg2
DEFAULT_DATABASE_URL = "postgresql+psycopg2://localhost:5432/ach_concourse"


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "ACH Concourse"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8080"))

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)

    # Backend services reached by the gateway
    ODFI_BASE_URL: str = os.getenv("ODFI_BASE_URL", "http://localhost:8081")
    RDFI_BASE_URL: str = os.getenv("RDFI_BASE_URL", "http://localhost:8082")
    LEDGER_BASE_URL: str = os.getenv("LEDGER_BASE_URL", "http://localhost:8083")
    EIP_BASE_URL: str = os.getenv("EIP_BASE_URL", "http://localhost:8084")
    BACKEND_TIMEOUT_SECONDS: float = float(
        os.getenv("BACKEND_TIMEOUT_SECONDS", "30")
    )

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")


@lru_cache()
def get_settings() -> Settings:
    """
    Return cached settings instance.

    Using lru_cache means the Settings object is created once
    and reused for all subsequent calls. This avoids reading
    environment variables repeatedly.
    """
    return Settings()


@dataclass(frozen=True)
class GatewayConfig:
    """
    Where the gateway finds its backends.

    Built once at startup and handed to the gateway wiring,
    so nothing downstream reads the environment directly.
    """
    odfi_base_url: str
    rdfi_base_url: str
    ledger_base_url: str
    eip_base_url: str
    timeout_seconds: float = 30.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "GatewayConfig":
        return cls(
            odfi_base_url=settings.ODFI_BASE_URL,
            rdfi_base_url=settings.RDFI_BASE_URL,
            ledger_base_url=settings.LEDGER_BASE_URL,
            eip_base_url=settings.EIP_BASE_URL,
            timeout_seconds=settings.BACKEND_TIMEOUT_SECONDS,
        )


def configure_logging(level: str = "INFO") -> None:
    """
    Install a single stderr handler on the root logger.

    Safe to call more than once: existing root handlers are
    replaced rather than stacked.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    ))
    root_logger.addHandler(handler)

    # Reduce noise from the HTTP client stack
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
