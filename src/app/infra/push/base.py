"""Base comum dos dispatchers de push: fan-out do envio em massa."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from app.domain.push import BulkPushResult, PushResult
from app.observability import get_correlation_id

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.push import PushMessage, PushTarget

logger = logging.getLogger(__name__)


class BasePushDispatcher:
    """Implementa `send_bulk` sobre o `send` de cada adapter."""

    backend: str = "base"

    def is_configured(self) -> bool:
        raise NotImplementedError

    async def send(self, target: PushTarget, message: PushMessage) -> PushResult:
        raise NotImplementedError

    async def send_bulk(
        self, targets: Sequence[PushTarget], message: PushMessage
    ) -> BulkPushResult:
        """Um `send` por destinatário, todos em paralelo.

        Exceção inesperada de um envio conta como falha daquele envio.
        """
        outcomes = await asyncio.gather(
            *(self.send(target, message) for target in targets),
            return_exceptions=True,
        )
        successful = sum(
            1 for outcome in outcomes if isinstance(outcome, PushResult) and outcome.success
        )
        unexpected = sum(1 for outcome in outcomes if isinstance(outcome, BaseException))
        result = BulkPushResult(
            successful=successful,
            failed=len(outcomes) - successful,
            total=len(outcomes),
        )
        logger.info(
            "push_bulk_completed",
            extra={
                "component": "push_dispatcher",
                "backend": self.backend,
                "successful": result.successful,
                "failed": result.failed,
                "total": result.total,
                "unexpected_errors": unexpected,
                "correlation_id": get_correlation_id(),
            },
        )
        return result

    async def shutdown(self) -> None:
        return None
