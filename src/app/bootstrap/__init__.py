"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
(via `clients`) cria os clientes externos guardados em `app.state`.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    # Na inicialização do serviço
    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging
import os

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_apns_settings,
    get_base_settings,
    get_fcm_settings,
    get_onesignal_settings,
    get_push_settings,
    get_stripe_settings,
    get_supabase_settings,
)

# Nome do serviço para logs
SERVICE_NAME = "dandee_gateway"

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> tuple[list[str], list[str]]:
    """Coleta problemas de configuração.

    Returns:
        (inválidos, ausentes): valores inválidos bloqueiam boot em
        staging/production; colaboradores ausentes só degradam para 503.
    """
    invalid: list[str] = []
    missing: list[str] = []

    invalid.extend(f"base: {error}" for error in get_base_settings().validate())
    invalid.extend(f"push: {error}" for error in get_push_settings().validate())
    invalid.extend(f"apns: {error}" for error in get_apns_settings().validate())
    invalid.extend(f"fcm: {error}" for error in get_fcm_settings().validate())
    invalid.extend(f"onesignal: {error}" for error in get_onesignal_settings().validate())

    stripe = get_stripe_settings()
    if stripe.enabled:
        invalid.extend(f"stripe: {error}" for error in stripe.validate())
    else:
        missing.extend(f"stripe: {error}" for error in stripe.validate())

    supabase = get_supabase_settings()
    if supabase.enabled:
        invalid.extend(f"supabase: {error}" for error in supabase.validate())
    else:
        missing.extend(f"supabase: {error}" for error in supabase.validate())

    return invalid, missing


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido para valores inválidos.
    Em `development` apenas registra alerta.
    """
    environment = get_base_settings().environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    invalid, missing = collect_settings_errors()

    if missing:
        logger.warning(
            "collaborators_not_configured",
            extra={
                "component": "bootstrap",
                "environment": environment,
                "missing": missing,
            },
        )

    if not invalid:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(invalid),
            "errors": invalid,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in invalid)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")
