"""Testes da listagem de avaliações."""

from __future__ import annotations

import pytest

from tests.fakes.fake_data_store import failing


@pytest.mark.asyncio
async def test_reviews_for_contractor(client, data_store) -> None:
    data_store.tables["reviews"] = [
        {"id": "r1", "contractor_id": "c1", "rating": 5, "created_at": "2026-01-01"},
        {"id": "r2", "contractor_id": "c2", "rating": 3, "created_at": "2026-01-02"},
    ]

    response = await client.get("/api/reviews/contractor/c1")

    assert response.status_code == 200
    assert response.json() == [
        {"id": "r1", "contractor_id": "c1", "rating": 5, "created_at": "2026-01-01"}
    ]


@pytest.mark.asyncio
async def test_reviews_empty_list(client) -> None:
    response = await client.get("/api/reviews/contractor/nobody")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_reviews_store_failure(client, data_store) -> None:
    data_store.fail_with["fetch_many"] = failing("relation does not exist", code="42P01")

    response = await client.get("/api/reviews/contractor/c1")

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to fetch reviews",
        "details": "relation does not exist",
    }
