"""
Builds the gateway's backend clients and aggregator from config.
"""

from dataclasses import dataclass

import httpx

from ach_concourse.config import GatewayConfig
from ach_concourse.gateway.aggregator import Aggregator
from ach_concourse.gateway.clients import (
    CaseClient,
    LedgerClient,
    OriginationClient,
    ReceivingClient,
)


@dataclass
class Gateway:
    """Everything the gateway routes need, built once per process."""
    odfi: OriginationClient
    rdfi: ReceivingClient
    ledger: LedgerClient
    eip: CaseClient
    aggregator: Aggregator


def build_gateway(config: GatewayConfig, http: httpx.AsyncClient) -> Gateway:
    """Wire every client to the shared HTTP client."""
    odfi = OriginationClient(http, config.odfi_base_url)
    rdfi = ReceivingClient(http, config.rdfi_base_url)
    return Gateway(
        odfi=odfi,
        rdfi=rdfi,
        ledger=LedgerClient(http, config.ledger_base_url),
        eip=CaseClient(http, config.eip_base_url),
        aggregator=Aggregator.from_clients(odfi, rdfi),
    )
