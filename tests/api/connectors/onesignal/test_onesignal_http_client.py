"""Testes do payload e do parsing de erros do OneSignal."""

from __future__ import annotations

import pytest

from api.connectors.onesignal import parse_onesignal_error
from api.connectors.onesignal.http_client import build_notification_payload


def test_payload_without_deep_link() -> None:
    payload = build_notification_payload(
        app_id="app", external_user_ids=["u1"], title="T", body="B"
    )

    assert payload == {
        "app_id": "app",
        "include_external_user_ids": ["u1"],
        "headings": {"en": "T"},
        "contents": {"en": "B"},
        "data": {},
    }


def test_payload_deep_link_fills_all_url_fields() -> None:
    payload = build_notification_payload(
        app_id="app",
        external_user_ids=["u1"],
        title="T",
        body="B",
        data={"jobId": "j1"},
        url="dandee://jobs/j1",
    )

    assert payload["data"] == {"jobId": "j1"}
    assert payload["url"] == payload["web_url"] == payload["app_url"] == "dandee://jobs/j1"


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        ({"errors": ["first", "second"]}, "first"),
        ({"errors": {"invalid_external_user_ids": ["u1"]}}, "invalid_external_user_ids"),
        ({"errors": "plain"}, "plain"),
        ({}, "OneSignal API error"),
        (None, "OneSignal API error"),
    ],
)
def test_parse_onesignal_error(body, expected) -> None:
    assert parse_onesignal_error(body) == expected
