"""Business logic services."""

from ach_concourse.services.origination_service import OriginationService
from ach_concourse.services.receiving_service import ReceivingService
from ach_concourse.services.ledger_service import LedgerService
from ach_concourse.services.case_service import CaseService

__all__ = [
    "OriginationService",
    "ReceivingService",
    "LedgerService",
    "CaseService",
]
