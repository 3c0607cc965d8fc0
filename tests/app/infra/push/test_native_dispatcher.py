"""Testes do dispatcher nativo (APNs/FCM)."""

from __future__ import annotations

import logging

import pytest

from api.connectors.http_base import HttpError
from app.domain.push import PushMessage, PushTarget
from app.infra.push.native_dispatcher import (
    NativePushDispatcher,
    build_apns_message,
    build_fcm_message,
)
from config.settings import ApnsSettings, FcmSettings
from tests.fakes.fake_push import FakeApnsClient, FakeFcmClient

_MESSAGE = PushMessage(title="Quote accepted", body="Tap to view", data={"jobId": 42})


def _dispatcher(apns_client=None, fcm_client=None) -> NativePushDispatcher:
    return NativePushDispatcher(
        apns_client=apns_client,
        fcm_client=fcm_client,
        apns_settings=ApnsSettings(expiry_seconds=600),
        fcm_settings=FcmSettings(channel_id="dandee_test"),
    )


def test_build_apns_message_defaults_badge_and_keeps_data() -> None:
    payload = build_apns_message(_MESSAGE)

    assert payload == {
        "jobId": 42,
        "aps": {
            "alert": {"title": "Quote accepted", "body": "Tap to view"},
            "badge": 1,
            "sound": "default",
        },
    }


def test_build_apns_message_keeps_explicit_badge_and_sound() -> None:
    message = PushMessage(title="t", body="b", badge=7, sound="chime.caf")

    assert build_apns_message(message)["aps"]["badge"] == 7
    assert build_apns_message(message)["aps"]["sound"] == "chime.caf"


def test_build_fcm_message_stringifies_data() -> None:
    fcm_message = build_fcm_message("tok", _MESSAGE, "dandee_test")

    assert fcm_message == {
        "token": "tok",
        "notification": {"title": "Quote accepted", "body": "Tap to view"},
        "data": {"jobId": "42"},
        "android": {
            "priority": "high",
            "notification": {"sound": "default", "channel_id": "dandee_test"},
        },
    }


@pytest.mark.asyncio
async def test_ios_sends_through_apns() -> None:
    apns = FakeApnsClient()
    dispatcher = _dispatcher(apns_client=apns)

    result = await dispatcher.send(PushTarget("tok-ios", "ios"), _MESSAGE)

    assert result.as_dict() == {"success": True, "id": "apns-id", "recipients": 1}
    device_token, payload, ttl_seconds = apns.sent[0]
    assert device_token == "tok-ios"
    assert ttl_seconds == 600
    assert payload["aps"]["alert"]["title"] == "Quote accepted"


@pytest.mark.asyncio
async def test_apns_rejection_is_soft_failure(caplog) -> None:
    apns = FakeApnsClient(error=HttpError("BadDeviceToken", status_code=400))
    dispatcher = _dispatcher(apns_client=apns)

    with caplog.at_level(logging.WARNING):
        result = await dispatcher.send(PushTarget("tok-ios", "ios"), _MESSAGE)

    assert result.as_dict() == {"success": False, "error": "BadDeviceToken"}
    assert any(getattr(record, "soft_failure", False) for record in caplog.records)


@pytest.mark.asyncio
async def test_android_sends_through_fcm() -> None:
    fcm = FakeFcmClient()
    dispatcher = _dispatcher(fcm_client=fcm)

    result = await dispatcher.send(PushTarget("tok-android", "android"), _MESSAGE)

    assert result.success is True
    assert result.message_id == "projects/dandee/messages/1"
    assert fcm.sent[0]["token"] == "tok-android"
    assert fcm.sent[0]["android"]["notification"]["channel_id"] == "dandee_test"


@pytest.mark.asyncio
async def test_fcm_error_is_soft_failure() -> None:
    fcm = FakeFcmClient(error=HttpError("Requested entity was not found.", status_code=404))
    dispatcher = _dispatcher(fcm_client=fcm)

    result = await dispatcher.send(PushTarget("tok-android", "android"), _MESSAGE)

    assert result.success is False
    assert result.error == "Requested entity was not found."


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("target", "message", "error"),
    [
        (PushTarget("", "ios"), _MESSAGE, "No device token"),
        (PushTarget("tok", "ios"), PushMessage(title="", body="x"), "Title and body required"),
        (PushTarget("tok", "windows"), _MESSAGE, "Invalid platform"),
        (PushTarget("tok", None), _MESSAGE, "Invalid platform"),
        (PushTarget("tok", "ios"), _MESSAGE, "APNs not configured"),
        (PushTarget("tok", "android"), _MESSAGE, "FCM not configured"),
    ],
)
async def test_soft_failures(target, message, error) -> None:
    result = await _dispatcher().send(target, message)

    assert result.success is False
    assert result.error == error


@pytest.mark.asyncio
async def test_bulk_mixes_platforms() -> None:
    dispatcher = _dispatcher(apns_client=FakeApnsClient())

    result = await dispatcher.send_bulk(
        [PushTarget("a", "ios"), PushTarget("b", "android"), PushTarget("c", "ios")],
        _MESSAGE,
    )

    assert result.as_dict() == {"successful": 2, "failed": 1, "total": 3}


@pytest.mark.asyncio
async def test_shutdown_closes_apns_client() -> None:
    apns = FakeApnsClient()
    dispatcher = _dispatcher(apns_client=apns)

    await dispatcher.shutdown()

    assert apns.closed is True
    assert dispatcher.is_configured() is True
    assert _dispatcher().is_configured() is False


@pytest.mark.asyncio
async def test_unexpected_channel_errors_are_soft_failures() -> None:
    dispatcher = _dispatcher(
        apns_client=FakeApnsClient(error=RuntimeError("stream reset")),
        fcm_client=FakeFcmClient(error=ValueError()),
    )

    ios = await dispatcher.send(PushTarget("tok-ios", "ios"), _MESSAGE)
    android = await dispatcher.send(PushTarget("tok-android", "android"), _MESSAGE)

    assert ios.as_dict() == {"success": False, "error": "stream reset"}
    assert android.as_dict() == {"success": False, "error": "ValueError"}
