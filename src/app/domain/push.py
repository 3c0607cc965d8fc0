"""Tipos de valor do envio de push notification.

Compartilhados pelos dois adapters (nativo APNs/FCM e OneSignal).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class Platform(StrEnum):
    """Plataforma do device token (adapter nativo)."""

    IOS = "ios"
    ANDROID = "android"


@dataclass(frozen=True, slots=True)
class PushTarget:
    """Destinatário de um push.

    Attributes:
        recipient: Device token (nativo) ou external user id (OneSignal)
        platform: Plataforma do token; ignorada pelo OneSignal
    """

    recipient: str
    platform: str | None = None


@dataclass(frozen=True, slots=True)
class PushMessage:
    """Conteúdo de um push, independente do destinatário."""

    title: str
    body: str
    data: dict[str, Any] = field(default_factory=dict)
    deep_link_url: str | None = None
    sound: str = "default"
    badge: int | None = None


@dataclass(frozen=True, slots=True)
class PushResult:
    """Resultado de um envio; falhas nunca viram exceção."""

    success: bool
    message_id: str | None = None
    error: str | None = None
    recipients: int | None = None

    @classmethod
    def ok(cls, message_id: str | None = None, recipients: int | None = None) -> PushResult:
        return cls(success=True, message_id=message_id, recipients=recipients)

    @classmethod
    def failed(cls, error: str) -> PushResult:
        return cls(success=False, error=error)

    def as_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"success": self.success}
        if self.message_id is not None:
            body["id"] = self.message_id
        if self.recipients is not None:
            body["recipients"] = self.recipients
        if self.error is not None:
            body["error"] = self.error
        return body


@dataclass(frozen=True, slots=True)
class BulkPushResult:
    """Contagem agregada de um envio em massa."""

    successful: int
    failed: int
    total: int

    def as_dict(self) -> dict[str, int]:
        return {"successful": self.successful, "failed": self.failed, "total": self.total}
