"""Testes dos use cases de perfil e onboarding."""

from __future__ import annotations

import base64
import logging

import pytest

from app.domain.entity_fields import EntityType
from app.use_cases import CompleteOnboardingUseCase, SaveProfileUseCase, UploadProfilePhotoUseCase
from tests.fakes.fake_data_store import FakeDataStore, failing
from utils.errors import DataStoreError, PayloadTooLargeError, RequestValidationError


@pytest.mark.asyncio
async def test_save_profile_logs_dropped_field_names_only(caplog) -> None:
    store = FakeDataStore()

    with caplog.at_level(logging.WARNING):
        await SaveProfileUseCase(store).execute(
            EntityType.CONTRACTOR, "u1", {"business_name": "Acme", "ssn": "123-45-6789"}
        )

    records = [r for r in caplog.records if r.getMessage() == "payload_fields_dropped"]
    assert records[0].dropped_fields == ["ssn"]
    assert "123-45-6789" not in caplog.text


@pytest.mark.asyncio
async def test_save_profile_rejects_empty_after_sanitizing() -> None:
    store = FakeDataStore()

    with pytest.raises(RequestValidationError, match="No valid customer profile fields provided"):
        await SaveProfileUseCase(store).execute(EntityType.CUSTOMER, "u1", {"latitude": "x"})

    assert store.calls == []


@pytest.mark.asyncio
async def test_save_customer_profile_keeps_given_names() -> None:
    store = FakeDataStore()

    row = await SaveProfileUseCase(store).execute(
        EntityType.CUSTOMER, "u1", {"first_name": "Ana", "city": "Troy"}
    )

    assert row["first_name"] == "Ana"
    assert row["last_name"] == ""
    method, (table, written, on_conflict) = store.calls[0]
    assert (method, table, on_conflict) == ("upsert_row", "customer_profiles", "user_id")
    assert written == {"user_id": "u1", "first_name": "Ana", "city": "Troy", "last_name": ""}


@pytest.mark.asyncio
async def test_onboarding_profile_only() -> None:
    store = FakeDataStore()

    result = await CompleteOnboardingUseCase(store).execute(
        "u1",
        metadata=None,
        profile={"first_name": "Ana"},
        profile_type=EntityType.CUSTOMER,
    )

    assert result.metadata_updated is False
    assert result.profile_updated is True
    assert not store.called("update_user_metadata")
    assert result.as_dict()["profileData"]["first_name"] == "Ana"
    assert "updatedUserMetadata" not in result.as_dict()


@pytest.mark.asyncio
async def test_onboarding_metadata_failure_propagates() -> None:
    store = FakeDataStore()
    store.fail_with["update_user_metadata"] = failing("User not found")

    with pytest.raises(DataStoreError):
        await CompleteOnboardingUseCase(store).execute(
            "u1",
            metadata={"role": "customer"},
            profile={"first_name": "Ana"},
            profile_type=EntityType.CUSTOMER,
        )

    assert not store.called("upsert_row")


@pytest.mark.asyncio
async def test_upload_photo_uses_bucket_and_returns_url() -> None:
    store = FakeDataStore()
    data_url = "data:image/webp;base64," + base64.b64encode(b"webp").decode()

    uploaded = await UploadProfilePhotoUseCase(
        store, bucket="avatars", max_bytes=1024
    ).execute("u1", data_url)

    assert uploaded["path"].startswith("users/u1/profile-")
    assert uploaded["path"].endswith(".webp")
    assert uploaded["url"] == f"https://storage.test/avatars/{uploaded['path']}"
    assert store.files[("avatars", uploaded["path"])] == (b"webp", "image/webp")


@pytest.mark.asyncio
async def test_upload_photo_too_large_never_reaches_storage() -> None:
    store = FakeDataStore()
    data_url = "data:image/png;base64," + base64.b64encode(b"12345").decode()

    with pytest.raises(PayloadTooLargeError):
        await UploadProfilePhotoUseCase(store, bucket="avatars", max_bytes=4).execute("u1", data_url)

    assert store.calls == []
