"""Testes das rotas de onboarding."""

from __future__ import annotations

import base64

import pytest

from tests.fakes.fake_data_store import failing

_PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image"


def _data_url(content: bytes, mime: str = "image/png") -> str:
    return f"data:{mime};base64,{base64.b64encode(content).decode()}"


@pytest.mark.asyncio
async def test_complete_updates_metadata_and_contractor_profile(client, data_store) -> None:
    response = await client.post(
        "/api/onboarding/complete",
        json={
            "userId": "u1",
            "metadata": {"onboarding_complete": True},
            "profileType": "contractor",
            "profile": {"business_name": "Acme", "id": "temp-abc", "favorite_color": "red"},
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["metadataUpdated"] is True
    assert body["profileUpdated"] is True
    assert body["updatedUserMetadata"] == {"onboarding_complete": True}
    assert body["profileData"]["user_id"] == "u1"
    assert body["profileData"]["business_name"] == "Acme"
    assert "favorite_color" not in body["profileData"]
    assert body["profileData"]["id"] != "temp-abc"
    assert data_store.tables["contractor_profiles"][0]["business_name"] == "Acme"


@pytest.mark.asyncio
async def test_complete_without_payloads_touches_nothing(client, data_store) -> None:
    response = await client.post("/api/onboarding/complete", json={"userId": "u1"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "metadataUpdated": False, "profileUpdated": False}
    assert data_store.calls == []


@pytest.mark.asyncio
async def test_complete_profile_with_only_unknown_fields_is_not_written(client, data_store) -> None:
    response = await client.post(
        "/api/onboarding/complete",
        json={"userId": "u1", "profile": {"shoe_size": 42}},
    )

    assert response.status_code == 200
    assert response.json()["profileUpdated"] is False
    assert not data_store.called("upsert_row")


@pytest.mark.asyncio
async def test_complete_requires_user_id(client) -> None:
    response = await client.post("/api/onboarding/complete", json={"metadata": {"a": 1}})

    assert response.status_code == 400
    assert response.json()["error"] == "userId is required"


@pytest.mark.asyncio
async def test_complete_rejects_unknown_profile_type(client, data_store) -> None:
    response = await client.post(
        "/api/onboarding/complete",
        json={"userId": "u1", "profileType": "scheduled_job", "profile": {"title": "x"}},
    )

    assert response.status_code == 400
    assert data_store.calls == []


@pytest.mark.asyncio
async def test_complete_metadata_failure_stops_before_profile(client, data_store) -> None:
    data_store.fail_with["update_user_metadata"] = failing("User not found")

    response = await client.post(
        "/api/onboarding/complete",
        json={"userId": "u1", "metadata": {"a": 1}, "profile": {"first_name": "Ana"}},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to update user metadata", "details": "User not found"}
    assert not data_store.called("upsert_row")


@pytest.mark.asyncio
async def test_complete_profile_failure_names_the_upsert(client, data_store) -> None:
    data_store.fail_with["upsert_row"] = failing("violates not-null constraint")

    response = await client.post(
        "/api/onboarding/complete",
        json={"userId": "u1", "metadata": {"a": 1}, "profile": {"first_name": "Ana"}},
    )

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to upsert profile",
        "details": "violates not-null constraint",
    }
    assert data_store.user_metadata["u1"] == {"a": 1}


@pytest.mark.asyncio
async def test_upload_photo_returns_public_url(client, data_store) -> None:
    response = await client.post(
        "/api/onboarding/upload-profile-photo",
        json={"userId": "u1", "dataUrl": _data_url(_PNG_BYTES), "fileNameHint": "my photo!"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["path"].startswith("users/u1/my_photo_-")
    assert body["path"].endswith(".png")
    assert body["url"] == f"https://storage.test/profile-photos/{body['path']}"
    assert data_store.files[("profile-photos", body["path"])] == (_PNG_BYTES, "image/png")


@pytest.mark.asyncio
async def test_upload_photo_malformed_data_url(client, data_store) -> None:
    response = await client.post(
        "/api/onboarding/upload-profile-photo",
        json={"userId": "u1", "dataUrl": "not-a-data-url"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid image data format"
    assert not data_store.called("upload_file")


@pytest.mark.asyncio
async def test_upload_photo_too_large(client, data_store, monkeypatch) -> None:
    from config.settings import get_supabase_settings

    monkeypatch.setenv("SUPABASE_MAX_PHOTO_BYTES", "4")
    get_supabase_settings.cache_clear()
    try:
        response = await client.post(
            "/api/onboarding/upload-profile-photo",
            json={"userId": "u1", "dataUrl": _data_url(_PNG_BYTES)},
        )
    finally:
        get_supabase_settings.cache_clear()

    assert response.status_code == 413
    assert response.json() == {"error": "Photo too large. Please choose an image under 10MB."}
    assert not data_store.called("upload_file")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"dataUrl": "data:image/png;base64,AAAA"}, "Invalid request: userId is required"),
        ({"userId": "u1"}, "Invalid request: dataUrl is required"),
    ],
)
async def test_upload_photo_required_fields(client, payload, message) -> None:
    response = await client.post("/api/onboarding/upload-profile-photo", json=payload)

    assert response.status_code == 400
    assert response.json()["error"] == message


@pytest.mark.asyncio
async def test_upload_photo_storage_failure(client, data_store) -> None:
    data_store.fail_with["upload_file"] = failing("Bucket not found")

    response = await client.post(
        "/api/onboarding/upload-profile-photo",
        json={"userId": "u1", "dataUrl": _data_url(_PNG_BYTES)},
    )

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to upload photo to storage",
        "details": "Bucket not found",
    }


@pytest.mark.asyncio
async def test_onboarding_503_without_data_store(client, app) -> None:
    app.state.data_store = None

    response = await client.post("/api/onboarding/complete", json={"userId": "u1"})

    assert response.status_code == 503
