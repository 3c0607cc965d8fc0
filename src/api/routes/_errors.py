"""Tradução de falhas de provider para a taxonomia HTTP do gateway."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from app.observability import get_correlation_id
from utils.errors import (
    CollaboratorError,
    NotFoundError,
    PaymentsProviderError,
    ProviderError,
    RowNotFoundError,
)

logger = logging.getLogger(__name__)


@contextmanager
def collaborator_errors(summary: str, *, not_found: str | None = None) -> Iterator[None]:
    """Converte erros de provider levantados dentro do bloco.

    Args:
        summary: Mensagem `error` do 500 (ex: "Failed to create payment")
        not_found: Mensagem do 404 para leituras por identificador; sem ela,
            linha ausente também vira 500

    Raises:
        NotFoundError: RowNotFoundError com `not_found` informado
        CollaboratorError: qualquer outra falha de provider
    """
    try:
        yield
    except RowNotFoundError as exc:
        if not_found is not None:
            raise NotFoundError(not_found) from exc
        raise _collaborator_error(summary, exc) from exc
    except ProviderError as exc:
        raise _collaborator_error(summary, exc) from exc


def _collaborator_error(summary: str, exc: ProviderError) -> CollaboratorError:
    extra: dict[str, str] = {}
    if isinstance(exc, PaymentsProviderError):
        extra = {"type": exc.error_type or "unknown", "code": exc.code or "unknown"}
    logger.error(
        "collaborator_call_failed",
        extra={
            "component": "api_routes",
            "summary": summary,
            "error_type": type(exc).__name__,
            "correlation_id": get_correlation_id(),
        },
    )
    return CollaboratorError(summary, details=exc.message, extra=extra)
