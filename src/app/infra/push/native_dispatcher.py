"""Dispatcher nativo: APNs para iOS e FCM para Android.

Cada canal é opcional; canal ausente vira falha suave no resultado.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.http_base import HttpError
from app.domain.push import Platform, PushResult
from app.infra.push.base import BasePushDispatcher
from app.observability import get_correlation_id
from config.logging import log_soft_failure

if TYPE_CHECKING:
    from api.connectors.apns import ApnsHttpClient
    from api.connectors.fcm import FcmHttpClient
    from app.domain.push import PushMessage, PushTarget
    from config.settings import ApnsSettings, FcmSettings

logger = logging.getLogger(__name__)

_COMPONENT = "native_push_dispatcher"
DEFAULT_BADGE = 1
FCM_ANDROID_PRIORITY = "high"


class NativePushDispatcher(BasePushDispatcher):
    """Envia push direto para APNs/FCM conforme a plataforma do token."""

    backend = "native"

    def __init__(
        self,
        *,
        apns_client: ApnsHttpClient | None,
        fcm_client: FcmHttpClient | None,
        apns_settings: ApnsSettings,
        fcm_settings: FcmSettings,
    ) -> None:
        self._apns = apns_client
        self._fcm = fcm_client
        self._apns_settings = apns_settings
        self._fcm_settings = fcm_settings

    def is_configured(self) -> bool:
        return self._apns is not None or self._fcm is not None

    async def send(self, target: PushTarget, message: PushMessage) -> PushResult:
        if not target.recipient:
            return self._soft_failure("No device token", target.platform)
        if not message.title or not message.body:
            return self._soft_failure("Title and body required", target.platform)

        if target.platform == Platform.IOS:
            return await self._send_apns(target.recipient, message)
        if target.platform == Platform.ANDROID:
            return await self._send_fcm(target.recipient, message)
        return self._soft_failure("Invalid platform", target.platform)

    async def shutdown(self) -> None:
        """Fecha a conexão HTTP/2 com o APNs, se houver."""
        if self._apns is None:
            return
        await self._apns.aclose()
        logger.info("apns_client_closed", extra={"component": _COMPONENT})

    async def _send_apns(self, device_token: str, message: PushMessage) -> PushResult:
        if self._apns is None:
            return self._soft_failure("APNs not configured", Platform.IOS)

        try:
            apns_id = await self._apns.send(
                device_token,
                build_apns_message(message),
                ttl_seconds=self._apns_settings.expiry_seconds,
            )
        except HttpError as exc:
            return self._soft_failure(str(exc), Platform.IOS, status_code=exc.status_code)
        except Exception as exc:
            return self._unexpected_failure(exc, Platform.IOS)

        self._log_sent(Platform.IOS)
        return PushResult.ok(message_id=apns_id, recipients=1)

    async def _send_fcm(self, device_token: str, message: PushMessage) -> PushResult:
        if self._fcm is None:
            return self._soft_failure("FCM not configured", Platform.ANDROID)

        try:
            message_name = await self._fcm.send(
                build_fcm_message(device_token, message, self._fcm_settings.channel_id)
            )
        except HttpError as exc:
            return self._soft_failure(str(exc), Platform.ANDROID, status_code=exc.status_code)
        except Exception as exc:
            return self._unexpected_failure(exc, Platform.ANDROID)

        self._log_sent(Platform.ANDROID)
        return PushResult.ok(message_id=message_name, recipients=1)

    def _log_sent(self, platform: str) -> None:
        logger.info(
            "push_sent",
            extra={
                "component": _COMPONENT,
                "backend": self.backend,
                "platform": platform,
                "correlation_id": get_correlation_id(),
            },
        )

    def _unexpected_failure(self, exc: Exception, platform: str) -> PushResult:
        logger.exception(
            "push_unexpected_error",
            extra={"component": _COMPONENT, "platform": platform},
        )
        return self._soft_failure(str(exc) or type(exc).__name__, platform)

    def _soft_failure(
        self,
        error: str,
        platform: str | None,
        *,
        status_code: int | None = None,
    ) -> PushResult:
        log_soft_failure(
            logger,
            _COMPONENT,
            error,
            backend=self.backend,
            platform=platform,
            status_code=status_code,
            correlation_id=get_correlation_id(),
        )
        return PushResult.failed(error)


def build_apns_message(message: PushMessage) -> dict[str, Any]:
    """Payload APNs: bloco `aps` com alert/badge/sound mais os dados extras."""
    aps = {
        "alert": {"title": message.title, "body": message.body},
        "badge": message.badge or DEFAULT_BADGE,
        "sound": message.sound or "default",
    }
    return {**message.data, "aps": aps}


def build_fcm_message(device_token: str, message: PushMessage, channel_id: str) -> dict[str, Any]:
    """Mensagem FCM v1 com prioridade alta no Android.

    O FCM só aceita valores string em `data`.
    """
    return {
        "token": device_token,
        "notification": {"title": message.title, "body": message.body},
        "data": {str(key): str(value) for key, value in message.data.items()},
        "android": {
            "priority": FCM_ANDROID_PRIORITY,
            "notification": {
                "sound": message.sound or "default",
                "channel_id": channel_id,
            },
        },
    }
