"""Formatters de logging estruturado.

Define o formatter JSON com os campos obrigatórios do gateway.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem fixa dos campos no JSON de saída
LOG_FIELD_ORDER: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = frozenset(LOG_FIELD_ORDER)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-18 10:30:00,123",
            "level": "INFO",
            "logger": "api.routes.payments.records",
            "message": "payment_created",
            "correlation_id": "abc-123",
            "service": "dandee_gateway",
            "payment_id": "..."
        }
    """
    format_string = " ".join(f"%({field})s" for field in LOG_FIELD_ORDER)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
