"""Testes das rotas de job request."""

from __future__ import annotations

import pytest

from api.routes.jobs.router import build_job_details


def test_build_job_details_applies_display_defaults() -> None:
    details = build_job_details({"id": "j1", "preferred_date": "2026-05-01"})

    assert details["title"] == "Untitled Job"
    assert details["description"] == ""
    assert details["location"] == "Location TBD"
    assert details["date"] == "2026-05-01"
    assert details["time"] == "09:00:00"
    assert details["urgency"] == "medium"
    assert details["category"] == "general"
    assert details["customer_name"] == "Customer"


def test_build_job_details_prefers_address_over_location() -> None:
    details = build_job_details({"id": "j1", "address": "1 Main St", "location": "Troy"})

    assert details["location"] == "1 Main St"


@pytest.mark.asyncio
async def test_job_details_found(client, data_store) -> None:
    data_store.tables["job_requests"] = [{"id": "j1", "title": "Fix sink", "status": "open"}]

    response = await client.get("/api/jobs/j1/details")

    assert response.status_code == 200
    job = response.json()["job"]
    assert job["title"] == "Fix sink"
    assert job["status"] == "open"


@pytest.mark.asyncio
@pytest.mark.parametrize("suffix", ["details", "location"])
async def test_missing_job_is_404(client, suffix) -> None:
    response = await client.get(f"/api/jobs/ghost/{suffix}")

    assert response.status_code == 404
    assert response.json() == {"error": "Job not found"}


@pytest.mark.asyncio
async def test_job_location_full_address(client, data_store) -> None:
    data_store.tables["job_requests"] = [{"id": "j1", "address": None, "location": " Troy, NY "}]

    response = await client.get("/api/jobs/j1/location")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "jobId": "j1",
        "address": None,
        "location": " Troy, NY ",
        "fullAddress": "Troy, NY",
    }


@pytest.mark.asyncio
async def test_update_status_normalizes_underscore(client, data_store) -> None:
    data_store.tables["job_requests"] = [{"id": "j1", "status": "scheduled", "title": "x"}]

    response = await client.post(
        "/api/jobs/update-status", json={"jobRequestId": "j1", "status": "in_progress"}
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "jobRequest": {"id": "j1", "status": "in-progress"}}


@pytest.mark.asyncio
async def test_update_status_rejects_unknown(client, data_store) -> None:
    response = await client.post(
        "/api/jobs/update-status", json={"jobRequestId": "j1", "status": "bogus"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": 'Invalid status "bogus"'}
    assert not data_store.called("update_row")


@pytest.mark.asyncio
async def test_update_status_requires_fields(client) -> None:
    response = await client.post("/api/jobs/update-status", json={"status": "completed"})

    assert response.status_code == 400
    assert response.json()["error"] == "jobRequestId and status are required"
