"""
API tests for the console gateway.

The gateway's HTTP client is mounted straight onto the backend
apps with httpx.ASGITransport, so a request travels gateway ->
client -> backend route -> test database and back.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from ach_concourse.api.gateway import get_gateway, parse_limit, parse_offset
from ach_concourse.config import GatewayConfig
from ach_concourse.gateway.container import build_gateway
from ach_concourse.main import (
    eip_app,
    gateway_app,
    ledger_app,
    odfi_app,
    rdfi_app,
)
from ach_concourse.models.base import get_db

CONFIG = GatewayConfig(
    odfi_base_url="http://odfi.test",
    rdfi_base_url="http://rdfi.test",
    ledger_base_url="http://ledger.test",
    eip_base_url="http://eip.test",
)


def unavailable(request):
    return httpx.Response(503, json={"error": "maintenance"})


def gateway_client(db_session, **overrides):
    """
    A TestClient for the gateway wired to in-process backends.

    overrides replaces a backend's transport, keyed by host.
    """
    backends = {
        "odfi.test": odfi_app,
        "rdfi.test": rdfi_app,
        "ledger.test": ledger_app,
        "eip.test": eip_app,
    }
    mounts = {}
    for host, app in backends.items():
        app.dependency_overrides[get_db] = lambda: db_session
        transport = overrides.get(host.split(".")[0])
        if transport is None:
            transport = httpx.ASGITransport(app=app)
        mounts[f"http://{host}"] = transport

    http = httpx.AsyncClient(mounts=mounts)
    gateway = build_gateway(CONFIG, http)
    gateway_app.dependency_overrides[get_gateway] = lambda: gateway
    return TestClient(gateway_app)


@pytest.fixture
def client(db_session):
    yield gateway_client(db_session)
    for app in (gateway_app, odfi_app, rdfi_app, ledger_app, eip_app):
        app.dependency_overrides.clear()


@pytest.fixture
def rdfi_down_client(db_session):
    yield gateway_client(
        db_session, rdfi=httpx.MockTransport(unavailable)
    )
    for app in (gateway_app, odfi_app, rdfi_app, ledger_app, eip_app):
        app.dependency_overrides.clear()


def create_odfi(client, trace_number="T-ODFI", amount_cents=1000):
    response = client.post("/api/v1/odfi/entries", json={
        "trace_number": trace_number,
        "company_name": "Acme Payroll",
        "sec_code": "CCD",
        "amount_cents": amount_cents,
    })
    assert response.status_code == 201
    return response.json()


def create_rdfi(client, trace_number="T-RDFI", amount_cents=500):
    response = client.post("/api/v1/rdfi/entries", json={
        "trace_number": trace_number,
        "receiver_name": "Jane Doe",
        "amount_cents": amount_cents,
    })
    assert response.status_code == 201
    return response.json()


class TestAchItems:

    def test_merges_both_sides(self, client):
        create_odfi(client)
        create_rdfi(client)

        response = client.get("/api/v1/ach-items")

        assert response.status_code == 200
        data = response.json()
        assert data["total_count"] == 2
        assert data["partial"] is False
        assert [item["side"] for item in data["items"]] == ["RDFI", "ODFI"]
        assert data["items"][0]["extra"] == {"receiver_name": "Jane Doe"}
        assert data["items"][1]["extra"] == {
            "company_name": "Acme Payroll", "sec_code": "CCD",
        }
        assert all(h["available"] for h in data["service_info"])

    def test_sort_and_page(self, client):
        create_odfi(client, amount_cents=300)
        create_rdfi(client, amount_cents=100)
        create_odfi(client, amount_cents=200)

        response = client.get("/api/v1/ach-items", params={
            "sort_by": "amount", "sort_order": "asc", "limit": "2",
        })

        data = response.json()
        assert [i["amount_cents"] for i in data["items"]] == [100, 200]
        assert data["total_count"] == 3

    def test_side_filter(self, client):
        create_odfi(client)
        create_rdfi(client)

        response = client.get("/api/v1/ach-items", params={"side": "odfi"})

        data = response.json()
        assert [item["source"] for item in data["items"]] == ["odfi"]
        assert [h["service"] for h in data["service_info"]] == ["ODFI"]

    def test_degraded_backend_is_partial(self, rdfi_down_client):
        create_odfi(rdfi_down_client)

        response = rdfi_down_client.get("/api/v1/ach-items")

        assert response.status_code == 200
        data = response.json()
        assert data["partial"] is True
        assert data["total_count"] == 1
        health = {h["service"]: h for h in data["service_info"]}
        assert health["RDFI"]["available"] is False
        assert "503" in health["RDFI"]["error"]
        assert health["ODFI"]["error"] is None

    @pytest.mark.parametrize("params,message", [
        ({"side": "ACH"}, "side must be ODFI or RDFI"),
        ({"sort_order": "sideways"}, "sort_order must be 'asc' or 'desc'"),
        ({"sort_by": "color"}, "sort_by must be one of"),
    ])
    def test_bad_query_returns_400(self, client, params, message):
        response = client.get("/api/v1/ach-items", params=params)

        assert response.status_code == 400
        assert message in response.json()["error"]


class TestAchItem:

    def test_get_one(self, client):
        entry = create_rdfi(client)

        response = client.get(f"/api/v1/ach-items/RDFI/{entry['id']}")

        assert response.status_code == 200
        assert response.json()["entry_id"] == entry["id"]
        assert response.json()["side"] == "RDFI"

    def test_missing_returns_404(self, client):
        response = client.get("/api/v1/ach-items/ODFI/not-there")

        assert response.status_code == 404
        assert response.json() == {"error": "entry not found"}

    def test_unknown_side_returns_400(self, client):
        response = client.get("/api/v1/ach-items/ORIGIN/abc")

        assert response.status_code == 400
        assert response.json() == {"error": "invalid side: must be ODFI or RDFI"}

    def test_backend_failure_returns_400(self, rdfi_down_client):
        response = rdfi_down_client.get("/api/v1/ach-items/RDFI/abc")

        assert response.status_code == 400

    def test_return_rdfi_item(self, client):
        entry = create_rdfi(client)

        response = client.post(
            f"/api/v1/ach-items/rdfi/{entry['id']}/return",
            json={"reason": "R03"},
        )

        assert response.status_code == 200
        assert response.json()["status"] == "RETURNED"
        assert response.json()["return_reason"] == "R03"

    def test_return_odfi_item_rejected(self, client):
        entry = create_odfi(client)

        response = client.post(
            f"/api/v1/ach-items/ODFI/{entry['id']}/return",
            json={"reason": "R03"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "only RDFI entries can be returned"}


class TestPassThrough:

    def test_odfi_status_update(self, client):
        entry = create_odfi(client)

        response = client.patch(
            f"/api/v1/odfi/entries/{entry['id']}/status",
            json={"status": "SENT"},
        )

        assert response.status_code == 200
        assert response.json()["status"] == "SENT"

    def test_rejected_write_returns_400(self, client):
        response = client.post("/api/v1/odfi/entries", json={})

        assert response.status_code == 400
        assert "trace_number is required" in response.json()["error"]

    def test_failed_read_returns_500(self, rdfi_down_client):
        response = rdfi_down_client.get("/api/v1/rdfi/entries")

        assert response.status_code == 500
        assert response.json() == {"error": "failed to list RDFI entries"}

    def test_ledger_round_trip(self, client):
        response = client.post("/api/v1/ledger/postings", json={
            "ach_side": "RDFI",
            "trace_number": "T1",
            "amount_cents": 700,
            "direction": "CREDIT",
        })
        assert response.status_code == 201

        balances = client.get("/api/v1/ledger/balances").json()
        assert balances == {
            "total_debits": 0, "total_credits": 700, "net_balance": 700,
        }
        postings = client.get(
            "/api/v1/ledger/postings", params={"trace_number": "T1"}
        ).json()
        assert [p["amount_cents"] for p in postings] == [700]

    def test_eip_case_lifecycle(self, client):
        created = client.post("/api/v1/eip/cases", json={
            "side": "ODFI", "trace_number": "T1", "type": "NOC_REVIEW",
        })
        assert created.status_code == 201
        case_id = created.json()["id"]

        updated = client.patch(
            f"/api/v1/eip/cases/{case_id}/status", json={"status": "RESOLVED"}
        )
        assert updated.json()["status"] == "RESOLVED"

        fetched = client.get(f"/api/v1/eip/cases/{case_id}")
        assert fetched.json()["type"] == "NOC_REVIEW"

        listed = client.get("/api/v1/eip/cases", params={"side": "RDFI"})
        assert listed.json() == []

    def test_missing_case_returns_404(self, client):
        response = client.get("/api/v1/eip/cases/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "case not found"}


class TestQueryParsing:

    @pytest.mark.parametrize("raw,expected", [
        (None, 100),
        ("", 100),
        ("25", 25),
        ("0", 100),
        ("-4", 100),
        ("5000", 1000),
        ("ten", 100),
    ])
    def test_parse_limit(self, raw, expected):
        assert parse_limit(raw) == expected

    @pytest.mark.parametrize("raw,expected", [
        (None, 0), ("7", 7), ("-1", 0), ("x", 0),
    ])
    def test_parse_offset(self, raw, expected):
        assert parse_offset(raw) == expected
