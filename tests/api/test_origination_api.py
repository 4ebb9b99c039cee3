"""
API tests for the ODFI origination service.

These test the full HTTP request/response cycle through
FastAPI, including validation, status codes, and the
{"error": ...} body on failures.
"""

import uuid


def create_entry(client, trace_number="091000010000001", amount_cents=1500):
    response = client.post("/api/v1/entries", json={
        "trace_number": trace_number,
        "company_name": "Acme Payroll",
        "sec_code": "PPD",
        "amount_cents": amount_cents,
    })
    assert response.status_code == 201
    return response.json()


class TestCreateEntry:

    def test_create_returns_201(self, odfi_client):
        data = create_entry(odfi_client)

        assert data["status"] == "PENDING"
        assert data["company_name"] == "Acme Payroll"
        assert data["amount_cents"] == 1500
        assert data["created_at"].endswith("Z")
        uuid.UUID(data["id"])

    def test_missing_trace_number_returns_400(self, odfi_client):
        response = odfi_client.post("/api/v1/entries", json={"amount_cents": 1})
        assert response.status_code == 400
        assert response.json() == {"error": "trace_number is required"}

    def test_malformed_body_returns_400(self, odfi_client):
        response = odfi_client.post(
            "/api/v1/entries",
            content="not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert "error" in response.json()


class TestReadEntries:

    def test_list_newest_first(self, odfi_client):
        create_entry(odfi_client, trace_number="FIRST")
        create_entry(odfi_client, trace_number="SECOND")

        response = odfi_client.get("/api/v1/entries")
        assert response.status_code == 200
        traces = [e["trace_number"] for e in response.json()]
        assert traces == ["SECOND", "FIRST"]

    def test_list_empty_is_empty_array(self, odfi_client):
        response = odfi_client.get("/api/v1/entries")
        assert response.status_code == 200
        assert response.json() == []

    def test_get_unknown_returns_404(self, odfi_client):
        response = odfi_client.get(f"/api/v1/entries/{uuid.uuid4()}")
        assert response.status_code == 404
        assert response.json() == {"error": "entry not found"}


class TestUpdateStatus:

    def test_patch_status(self, odfi_client):
        entry = create_entry(odfi_client)
        response = odfi_client.patch(
            f"/api/v1/entries/{entry['id']}/status", json={"status": "SENT"}
        )
        assert response.status_code == 200
        assert response.json()["status"] == "SENT"

    def test_invalid_status_returns_400(self, odfi_client):
        entry = create_entry(odfi_client)
        response = odfi_client.patch(
            f"/api/v1/entries/{entry['id']}/status", json={"status": "LOST"}
        )
        assert response.status_code == 400

    def test_unknown_entry_returns_404(self, odfi_client):
        response = odfi_client.patch(
            f"/api/v1/entries/{uuid.uuid4()}/status", json={"status": "SENT"}
        )
        assert response.status_code == 404
