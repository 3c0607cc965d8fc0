"""Fakes de push: dispatcher scriptado e clientes APNs/FCM."""

from __future__ import annotations

from typing import Any

from app.domain.push import PushResult
from app.infra.push.base import BasePushDispatcher


class ScriptedPushDispatcher(BasePushDispatcher):
    """Dispatcher cujo resultado por destinatário é pré-definido.

    `outcomes[recipient]` pode ser PushResult ou Exception (levantada).
    Destinatário sem entrada recebe sucesso.
    """

    backend = "scripted"

    def __init__(self, outcomes: dict[str, PushResult | Exception] | None = None) -> None:
        self.outcomes = outcomes or {}
        self.sent: list[tuple[Any, Any]] = []

    def is_configured(self) -> bool:
        return True

    async def send(self, target, message) -> PushResult:
        self.sent.append((target, message))
        outcome = self.outcomes.get(target.recipient, PushResult.ok(message_id=f"msg-{target.recipient}"))
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeApnsClient:
    """Substitui ApnsHttpClient: guarda envios e devolve `apns-id` fixo."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.sent: list[tuple[str, dict[str, Any], int]] = []
        self.closed = False

    async def send(self, device_token: str, payload: dict[str, Any], *, ttl_seconds: int) -> str:
        self.sent.append((device_token, payload, ttl_seconds))
        if self.error is not None:
            raise self.error
        return "apns-id"

    async def aclose(self) -> None:
        self.closed = True


class FakeFcmClient:
    """Substitui FcmHttpClient: guarda mensagens e devolve nome fixo."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.sent: list[dict[str, Any]] = []

    async def send(self, message: dict[str, Any]) -> str:
        self.sent.append(message)
        if self.error is not None:
            raise self.error
        return "projects/dandee/messages/1"
