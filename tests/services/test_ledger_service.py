"""
Tests for the LedgerService.

Tests cover:
- Posting validation (side, direction)
- Filtering postings
- Balance calculation
"""

import pytest

from ach_concourse.models.enums import AchSide, Direction
from ach_concourse.services.ledger_service import LedgerService
from ach_concourse.schemas.ledger import LedgerPostingCreate


def post(service, direction, amount_cents, ach_side="ODFI", trace_number="T1"):
    return service.create_posting(LedgerPostingCreate(
        ach_side=ach_side,
        trace_number=trace_number,
        amount_cents=amount_cents,
        direction=direction,
        description="test posting",
    ))


class TestCreatePosting:

    def test_valid_posting_succeeds(self, db_session):
        service = LedgerService(db_session)
        posting = post(service, "DEBIT", 1000)
        db_session.commit()

        assert posting.id is not None
        assert posting.ach_side == AchSide.ODFI
        assert posting.direction == Direction.DEBIT

    def test_missing_side_rejected(self, db_session):
        service = LedgerService(db_session)
        with pytest.raises(ValueError, match="ach_side is required"):
            post(service, "DEBIT", 100, ach_side="")

    def test_missing_direction_rejected(self, db_session):
        service = LedgerService(db_session)
        with pytest.raises(ValueError, match="direction is required"):
            post(service, "", 100)

    def test_unknown_direction_rejected(self, db_session):
        service = LedgerService(db_session)
        with pytest.raises(ValueError, match="DEBIT or CREDIT"):
            post(service, "SIDEWAYS", 100)

    def test_unknown_side_rejected(self, db_session):
        service = LedgerService(db_session)
        with pytest.raises(ValueError, match="ODFI or RDFI"):
            post(service, "CREDIT", 100, ach_side="XYZ")


class TestListPostings:

    def test_filters_by_side(self, db_session):
        service = LedgerService(db_session)
        post(service, "DEBIT", 100, ach_side="ODFI")
        post(service, "CREDIT", 100, ach_side="RDFI")
        db_session.commit()

        postings = service.list_postings(ach_side="RDFI")
        assert len(postings) == 1
        assert postings[0].ach_side == AchSide.RDFI


class TestBalances:

    def test_empty_ledger_is_zero(self, db_session):
        balances = LedgerService(db_session).get_balances()
        assert balances.total_debits == 0
        assert balances.total_credits == 0
        assert balances.net_balance == 0

    def test_net_is_credits_minus_debits(self, db_session):
        service = LedgerService(db_session)
        post(service, "DEBIT", 1000)
        post(service, "DEBIT", 250)
        post(service, "CREDIT", 2000)
        db_session.commit()

        balances = service.get_balances()
        assert balances.total_debits == 1250
        assert balances.total_credits == 2000
        assert balances.net_balance == 750
