"""Factories de clientes externos: Stripe, Supabase e push.

Cada factory devolve None quando o colaborador não está configurado;
as rotas que dependem dele respondem 503.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.apns import create_apns_http_client
from api.connectors.fcm import create_fcm_http_client
from api.connectors.onesignal import create_onesignal_http_client
from app.infra.data_store import SupabaseDataStore
from app.infra.payments import StripePaymentsGateway
from app.infra.push import NativePushDispatcher, OneSignalPushDispatcher
from config.settings import (
    get_apns_settings,
    get_fcm_settings,
    get_onesignal_settings,
    get_push_settings,
    get_stripe_settings,
    get_supabase_settings,
)

if TYPE_CHECKING:
    from api.connectors.apns import ApnsHttpClient
    from api.connectors.fcm import FcmHttpClient
    from app.protocols import DataStoreProtocol, PaymentsGatewayProtocol, PushDispatcherProtocol
    from config.settings import ApnsSettings, FcmSettings

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Stripe
# ──────────────────────────────────────────────────────────────────────────────


def create_payments_gateway() -> PaymentsGatewayProtocol | None:
    """Cria gateway Stripe se houver chave utilizável."""
    stripe_settings = get_stripe_settings()
    if not stripe_settings.enabled:
        logger.warning("stripe_not_configured", extra={"component": "bootstrap"})
        return None
    logger.info("stripe_gateway_created", extra={"component": "bootstrap"})
    return StripePaymentsGateway(api_key=stripe_settings.secret_key)


# ──────────────────────────────────────────────────────────────────────────────
# Supabase
# ──────────────────────────────────────────────────────────────────────────────


def create_data_store() -> DataStoreProtocol | None:
    """Cria data store Supabase com service role (sem sessão persistida)."""
    supabase_settings = get_supabase_settings()
    if not supabase_settings.enabled:
        logger.warning("supabase_not_configured", extra={"component": "bootstrap"})
        return None

    from supabase import ClientOptions, create_client

    client = create_client(
        supabase_settings.url,
        supabase_settings.service_role_key,
        options=ClientOptions(auto_refresh_token=False, persist_session=False),
    )
    logger.info("supabase_client_created", extra={"component": "bootstrap"})
    return SupabaseDataStore(client)


# ──────────────────────────────────────────────────────────────────────────────
# Push
# ──────────────────────────────────────────────────────────────────────────────


def create_apns_client(settings: ApnsSettings) -> ApnsHttpClient | None:
    """Cria cliente APNs (token .p8) se as credenciais estiverem completas."""
    if not settings.enabled:
        logger.warning("apns_not_configured", extra={"component": "bootstrap"})
        return None

    client = create_apns_http_client(settings)
    logger.info(
        "apns_client_created",
        extra={"component": "bootstrap", "production": settings.production},
    )
    return client


def create_fcm_client(settings: FcmSettings) -> FcmHttpClient | None:
    """Cria cliente FCM a partir da service account."""
    if not settings.enabled:
        logger.warning("fcm_not_configured", extra={"component": "bootstrap"})
        return None

    client = create_fcm_http_client(settings)
    logger.info("fcm_client_created", extra={"component": "bootstrap"})
    return client


def create_push_dispatcher() -> PushDispatcherProtocol:
    """Cria o dispatcher do backend escolhido em PUSH_BACKEND."""
    backend = get_push_settings().backend

    if backend == "native":
        apns_settings = get_apns_settings()
        fcm_settings = get_fcm_settings()
        dispatcher: PushDispatcherProtocol = NativePushDispatcher(
            apns_client=create_apns_client(apns_settings),
            fcm_client=create_fcm_client(fcm_settings),
            apns_settings=apns_settings,
            fcm_settings=fcm_settings,
        )
    else:
        onesignal_settings = get_onesignal_settings()
        client = create_onesignal_http_client(onesignal_settings) if onesignal_settings.enabled else None
        if client is None:
            logger.warning("onesignal_not_configured", extra={"component": "bootstrap"})
        dispatcher = OneSignalPushDispatcher(client)

    logger.info(
        "push_dispatcher_created",
        extra={
            "component": "bootstrap",
            "backend": dispatcher.backend,
            "configured": dispatcher.is_configured(),
        },
    )
    return dispatcher
