"""Dispatcher de push via OneSignal (destinatário = external user id)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.http_base import HttpError
from api.connectors.onesignal.http_client import build_notification_payload
from app.domain.push import PushResult
from app.infra.push.base import BasePushDispatcher
from app.observability import get_correlation_id
from config.logging import log_soft_failure

if TYPE_CHECKING:
    from api.connectors.onesignal import OneSignalHttpClient
    from app.domain.push import PushMessage, PushTarget

logger = logging.getLogger(__name__)

_COMPONENT = "onesignal_dispatcher"


class OneSignalPushDispatcher(BasePushDispatcher):
    """Envia push pela API REST do OneSignal."""

    backend = "onesignal"

    def __init__(self, client: OneSignalHttpClient | None) -> None:
        self._client = client

    def is_configured(self) -> bool:
        return self._client is not None

    async def send(self, target: PushTarget, message: PushMessage) -> PushResult:
        if self._client is None:
            return self._soft_failure("OneSignal not configured")
        if not target.recipient:
            return self._soft_failure("No userId")
        if not message.title or not message.body:
            return self._soft_failure("Title and body required")

        payload = build_notification_payload(
            app_id=self._client.app_id,
            external_user_ids=[target.recipient],
            title=message.title,
            body=message.body,
            data=message.data,
            url=message.deep_link_url,
        )
        try:
            response = await self._client.create_notification(payload)
        except HttpError as exc:
            return self._soft_failure(str(exc), status_code=exc.status_code)
        except Exception as exc:
            logger.exception("push_unexpected_error", extra={"component": _COMPONENT})
            return self._soft_failure(str(exc) or type(exc).__name__)

        logger.info(
            "push_sent",
            extra={
                "component": _COMPONENT,
                "backend": self.backend,
                "correlation_id": get_correlation_id(),
            },
        )
        return PushResult.ok(
            message_id=response.get("id"),
            recipients=_recipient_count(response.get("recipients")),
        )

    def _soft_failure(self, error: str, *, status_code: int | None = None) -> PushResult:
        log_soft_failure(
            logger,
            _COMPONENT,
            error,
            backend=self.backend,
            status_code=status_code,
            correlation_id=get_correlation_id(),
        )
        return PushResult.failed(error)


def _recipient_count(value: object) -> int:
    """Contagem de `recipients`; valor não numérico conta como 0."""
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0
