"""Protocolo do despachante de push notifications.

Implementações: nativo (APNs/FCM) e OneSignal. Nenhum método levanta:
falhas, inclusive "não configurado", vêm no resultado.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.push import BulkPushResult, PushMessage, PushResult, PushTarget


class PushDispatcherProtocol(Protocol):
    """Contrato comum aos backends de push."""

    backend: str

    def is_configured(self) -> bool:
        """True se o backend tem credenciais para enviar."""
        ...

    async def send(self, target: PushTarget, message: PushMessage) -> PushResult:
        """Envia um push para um destinatário."""
        ...

    async def send_bulk(
        self, targets: Sequence[PushTarget], message: PushMessage
    ) -> BulkPushResult:
        """Envia o mesmo push para vários destinatários, em paralelo."""
        ...

    async def shutdown(self) -> None:
        """Libera clientes de longa duração (best-effort)."""
        ...
