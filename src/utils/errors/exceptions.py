"""Exceções de domínio do gateway, cada uma com seu status HTTP.

Hierarquia:
- GatewayError: base, renderizada como JSON pelos handlers da API.
- ServiceNotConfiguredError (503): cliente externo nunca inicializado.
- RequestValidationError (400): campos obrigatórios ausentes ou enum inválido.
- NotFoundError (404): colaborador não encontrou a linha pedida.
- PayloadTooLargeError (413): upload decodificado acima do limite.
- CollaboratorError (500): falha do Stripe/Supabase/push repassada ao cliente.

Falhas de provider (DataStoreError, PaymentsProviderError) ficam fora da
hierarquia HTTP: as rotas decidem como traduzi-las.
"""

from __future__ import annotations

from typing import Any


class GatewayError(Exception):
    """Base para erros que viram resposta HTTP."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        details: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        self.extra = dict(extra or {})

    def to_body(self) -> dict[str, Any]:
        """Monta o corpo JSON no formato `{error, details?, ...extra}`."""
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        body.update(self.extra)
        return body


class ServiceNotConfiguredError(GatewayError):
    """Cliente externo ausente por falta de configuração no boot."""

    status_code = 503


class RequestValidationError(GatewayError):
    """Request sem campos obrigatórios ou com valor fora do conjunto fechado."""

    status_code = 400


class NotFoundError(GatewayError):
    """Leitura por identificador sem linha correspondente."""

    status_code = 404


class PayloadTooLargeError(GatewayError):
    """Conteúdo decodificado excede o tamanho máximo aceito."""

    status_code = 413


class CollaboratorError(GatewayError):
    """Falha em chamada a colaborador externo (mensagem repassada)."""

    status_code = 500


# ──────────────────────────────────────────────────────────────────────────────
# Falhas de provider (levantadas pelos adapters em app/infra)
# ──────────────────────────────────────────────────────────────────────────────


class ProviderError(RuntimeError):
    """Base para falhas reportadas por SDKs externos."""

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class DataStoreError(ProviderError):
    """Falha reportada pelo data store (linhas, auth ou storage)."""


class RowNotFoundError(DataStoreError):
    """Consulta de linha única não retornou resultado."""


class PaymentsProviderError(ProviderError):
    """Falha reportada pelo processador de pagamentos."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        error_type: str | None = None,
    ) -> None:
        super().__init__(message, code=code)
        self.error_type = error_type
