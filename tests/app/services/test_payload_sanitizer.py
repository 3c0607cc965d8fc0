"""Testes do sanitizer de payloads."""

from __future__ import annotations

import math

import pytest

from app.domain.entity_fields import ALLOWED_FIELDS, EntityType, allowed_fields_for
from app.services.payload_sanitizer import (
    dropped_fields,
    has_persistable_fields,
    sanitize_payload,
)


def test_address_kept_empty_geo_nan_dropped_unknown_dropped() -> None:
    raw = {"address": "", "city": "Troy", "latitude": math.nan, "foo": "bar"}

    assert sanitize_payload(raw, EntityType.CUSTOMER, "u1") == {
        "user_id": "u1",
        "address": "",
        "city": "Troy",
    }


def test_temp_id_is_dropped_real_id_kept() -> None:
    temp = sanitize_payload({"id": "temp-abc", "bio": "hi"}, EntityType.CONTRACTOR, "u1")
    real = sanitize_payload({"id": "9f1c", "bio": "hi"}, EntityType.CONTRACTOR, "u1")

    assert "id" not in temp
    assert real["id"] == "9f1c"


@pytest.mark.parametrize("value", ["", 42, None])
def test_non_string_or_empty_id_is_dropped(value) -> None:
    assert "id" not in sanitize_payload({"id": value}, EntityType.CUSTOMER, "u1")


@pytest.mark.parametrize("value", [True, False, math.inf, -math.inf, "41.2", None, 10**400])
def test_invalid_geo_values_are_dropped(value) -> None:
    sanitized = sanitize_payload({"latitude": value, "longitude": -73.6}, EntityType.CUSTOMER, "u1")

    assert "latitude" not in sanitized
    assert sanitized["longitude"] == -73.6


def test_address_fields_none_and_trimmed() -> None:
    sanitized = sanitize_payload(
        {"address": None, "state": "  NY ", "zip_code": 12180}, EntityType.CUSTOMER, "u1"
    )

    assert sanitized["address"] is None
    assert sanitized["state"] == "NY"
    assert sanitized["zip_code"] == "12180"


def test_boolean_address_values_become_lowercase_text() -> None:
    sanitized = sanitize_payload({"city": True, "state": False}, EntityType.CONTRACTOR, "u1")

    assert sanitized["city"] == "true"
    assert sanitized["state"] == "false"


def test_other_values_trimmed_blank_and_none_dropped() -> None:
    sanitized = sanitize_payload(
        {
            "first_name": "  Ana ",
            "last_name": "   ",
            "bio": None,
            "email_notifications": False,
            "specialties": ["plumbing"],
        },
        EntityType.CONTRACTOR,
        "u1",
    )

    assert sanitized == {
        "user_id": "u1",
        "first_name": "Ana",
        "email_notifications": False,
        "specialties": ["plumbing"],
    }


def test_owner_cannot_be_overridden_by_payload() -> None:
    sanitized = sanitize_payload({"user_id": "intruder", "bio": "x"}, EntityType.CUSTOMER, "u1")

    assert sanitized["user_id"] == "u1"


def test_scheduled_job_has_no_owner_field() -> None:
    sanitized = sanitize_payload({"title": "Fix sink", "user_id": "u1"}, EntityType.SCHEDULED_JOB)

    assert sanitized == {"title": "Fix sink"}


@pytest.mark.parametrize("raw", [None, "not a mapping", ["address"]])
def test_non_mapping_input_yields_base(raw) -> None:
    assert sanitize_payload(raw, EntityType.CUSTOMER, "u1") == {"user_id": "u1"}
    assert sanitize_payload(raw, EntityType.SCHEDULED_JOB) == {}


@pytest.mark.parametrize("entity_type", list(EntityType))
def test_idempotent_and_keys_within_allow_list(entity_type: EntityType) -> None:
    raw = {
        "id": "temp-1",
        "first_name": " Ana ",
        "title": " Job ",
        "address": " 1 Main ",
        "latitude": 42.7,
        "longitude": "bad",
        "unknown": 1,
    }

    once = sanitize_payload(raw, entity_type, "u1")
    twice = sanitize_payload(once, entity_type, "u1")

    assert twice == once
    assert set(once) <= allowed_fields_for(entity_type) | {"user_id"}


def test_dropped_fields_lists_only_unknown_keys_sorted() -> None:
    raw = {"zeta": 1, "city": "Troy", "alpha": 2}

    assert dropped_fields(raw, EntityType.CUSTOMER) == ["alpha", "zeta"]
    assert dropped_fields(None, EntityType.CUSTOMER) == []


def test_has_persistable_fields() -> None:
    assert has_persistable_fields({"user_id": "u1"}) is False
    assert has_persistable_fields({"user_id": "u1", "city": "Troy"}) is True
    assert has_persistable_fields({"title": "x"}) is True


def test_allow_lists_are_immutable() -> None:
    with pytest.raises(TypeError):
        ALLOWED_FIELDS[EntityType.CUSTOMER] = frozenset()  # type: ignore[index]
    assert isinstance(ALLOWED_FIELDS[EntityType.CUSTOMER], frozenset)
