"""
Tests for the OriginationService.

Tests cover:
- Entry creation and required trace number
- Filtering by status and trace number
- Status transitions and unknown statuses
- Lookups by malformed or unknown ids
"""

import uuid

import pytest

from ach_concourse.models.enums import OriginationStatus
from ach_concourse.services.origination_service import OriginationService
from ach_concourse.schemas.origination import OriginationEntryCreate


def make_entry(service, trace_number="091000010000001", amount_cents=1000):
    return service.create_entry(OriginationEntryCreate(
        trace_number=trace_number,
        company_name="Acme Payroll",
        sec_code="PPD",
        amount_cents=amount_cents,
    ))


class TestCreateEntry:

    def test_create_entry_starts_pending(self, db_session):
        service = OriginationService(db_session)
        entry = make_entry(service)
        db_session.commit()

        assert entry.id is not None
        assert entry.status == OriginationStatus.PENDING
        assert entry.company_name == "Acme Payroll"
        assert entry.amount_cents == 1000

    def test_missing_trace_number_rejected(self, db_session):
        service = OriginationService(db_session)
        with pytest.raises(ValueError, match="trace_number is required"):
            service.create_entry(OriginationEntryCreate(amount_cents=100))


class TestListEntries:

    def test_filters_by_trace_number(self, db_session):
        service = OriginationService(db_session)
        make_entry(service, trace_number="A1")
        make_entry(service, trace_number="B2")
        db_session.commit()

        entries = service.list_entries(trace_number="A1")
        assert [e.trace_number for e in entries] == ["A1"]

    def test_filters_by_status(self, db_session):
        service = OriginationService(db_session)
        sent = make_entry(service, trace_number="A1")
        make_entry(service, trace_number="B2")
        db_session.commit()
        service.update_status(sent.id, "SENT")
        db_session.commit()

        entries = service.list_entries(status="SENT")
        assert [e.trace_number for e in entries] == ["A1"]

    def test_unknown_status_filter_matches_nothing(self, db_session):
        service = OriginationService(db_session)
        make_entry(service)
        db_session.commit()

        assert service.list_entries(status="BOGUS") == []

    def test_empty_table_returns_empty_list(self, db_session):
        assert OriginationService(db_session).list_entries() == []


class TestUpdateStatus:

    def test_valid_status_applied(self, db_session):
        service = OriginationService(db_session)
        entry = make_entry(service)
        db_session.commit()

        updated = service.update_status(str(entry.id), "CANCELLED")
        db_session.commit()

        assert updated.status == OriginationStatus.CANCELLED

    def test_invalid_status_rejected(self, db_session):
        service = OriginationService(db_session)
        entry = make_entry(service)
        db_session.commit()

        with pytest.raises(ValueError, match="invalid status"):
            service.update_status(entry.id, "RETURNED")

    def test_unknown_entry_returns_none(self, db_session):
        service = OriginationService(db_session)
        assert service.update_status(uuid.uuid4(), "SENT") is None


class TestGetEntry:

    def test_malformed_id_is_not_found(self, db_session):
        assert OriginationService(db_session).get_entry("not-a-uuid") is None

    def test_get_by_string_id(self, db_session):
        service = OriginationService(db_session)
        entry = make_entry(service)
        db_session.commit()

        assert service.get_entry(str(entry.id)).id == entry.id
