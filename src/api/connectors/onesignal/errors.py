"""Parsing de erros da API do OneSignal."""

from __future__ import annotations

from typing import Any

DEFAULT_ERROR_MESSAGE = "OneSignal API error"


def parse_onesignal_error(response_data: Any) -> str:
    """Extrai a primeira mensagem de erro do corpo de resposta.

    O OneSignal responde `{"errors": [...]}` (lista de strings) ou
    `{"errors": {"invalid_external_user_ids": [...]}}`.
    """
    if not isinstance(response_data, dict):
        return DEFAULT_ERROR_MESSAGE
    errors = response_data.get("errors")
    if isinstance(errors, list) and errors:
        return str(errors[0])
    if isinstance(errors, dict) and errors:
        key = next(iter(errors))
        return str(key)
    if isinstance(errors, str) and errors:
        return errors
    return DEFAULT_ERROR_MESSAGE
