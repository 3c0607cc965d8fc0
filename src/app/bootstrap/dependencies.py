"""Dependências FastAPI que leem os clientes de `app.state`.

Cliente ausente (não configurado no boot) vira 503 antes de qualquer
trabalho da rota.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

from utils.errors import ServiceNotConfiguredError

if TYPE_CHECKING:
    from app.protocols import DataStoreProtocol, PaymentsGatewayProtocol, PushDispatcherProtocol

SUPABASE_NOT_CONFIGURED = "Supabase admin client not configured"
SUPABASE_CONFIG_HINT = "Check SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
STRIPE_NOT_CONFIGURED = "Payments processor not configured"
STRIPE_CONFIG_HINT = "Check STRIPE_SECRET_KEY environment variable."
PUSH_NOT_CONFIGURED = "Push dispatcher not configured"


def get_data_store(request: Request) -> DataStoreProtocol:
    """Data store do processo ou 503."""
    data_store = getattr(request.app.state, "data_store", None)
    if data_store is None:
        raise ServiceNotConfiguredError(SUPABASE_NOT_CONFIGURED, details=SUPABASE_CONFIG_HINT)
    return data_store


def get_payments_gateway(request: Request) -> PaymentsGatewayProtocol:
    """Gateway de pagamentos do processo ou 503."""
    gateway = getattr(request.app.state, "payments_gateway", None)
    if gateway is None:
        raise ServiceNotConfiguredError(STRIPE_NOT_CONFIGURED, details=STRIPE_CONFIG_HINT)
    return gateway


def get_push_dispatcher(request: Request) -> PushDispatcherProtocol:
    """Dispatcher de push do processo ou 503."""
    dispatcher = getattr(request.app.state, "push_dispatcher", None)
    if dispatcher is None:
        raise ServiceNotConfiguredError(PUSH_NOT_CONFIGURED)
    return dispatcher
