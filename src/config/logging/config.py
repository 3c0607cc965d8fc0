"""Configuração centralizada de logging.

Funções para configurar logging estruturado JSON com:
- Campos obrigatórios (correlation_id, service, level, logger, message)
- Níveis configuráveis por ambiente

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do serviço (app/bootstrap/)
    configure_logging(level="INFO", service_name="dandee_gateway")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("profile_upserted", extra={"table": "customer_profiles"})

Logs nunca carregam valores de payload: apenas chaves, contagens e tipos.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "dandee_gateway"

# Clientes HTTP/SDK que logam cada request (e frames HTTP/2) em DEBUG/INFO
NOISY_LOGGERS = ("httpx", "httpcore", "hpack", "h2", "stripe", "google.auth")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização do serviço (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]

    noisy_level = max(logging.getLevelName(level_upper), logging.WARNING)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O filter injeta automaticamente service e correlation_id.
    """
    return logging.getLogger(name)


def log_soft_failure(
    logger: logging.Logger,
    component: str,
    reason: str,
    **fields: object,
) -> None:
    """Registra falha não propagada (resultado de erro devolvido ao chamador).

    Usado pelos dispatchers de push, que nunca levantam exceção: a falha
    vira campo do resultado e este log garante que ela seja observável.

    Args:
        logger: Logger instance.
        component: Nome do componente (ex: "onesignal_dispatcher").
        reason: Razão curta, sem PII (ex: "not_configured").
        **fields: Campos extras estruturados (sem PII).
    """
    extra: dict[str, object] = {
        "soft_failure": True,
        "component": component,
        "reason": reason,
    }
    extra.update(fields)
    logger.warning("Soft failure in %s", component, extra=extra)
