"""Parsing de erros da API HTTP v1 do FCM."""

from __future__ import annotations

from typing import Any

DEFAULT_ERROR_MESSAGE = "FCM API error"


def parse_fcm_error(response_data: Any) -> str:
    """Extrai `error.message` (formato padrão das APIs Google)."""
    if not isinstance(response_data, dict):
        return DEFAULT_ERROR_MESSAGE
    error = response_data.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return DEFAULT_ERROR_MESSAGE
