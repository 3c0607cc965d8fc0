"""Parsing de erros do APNs."""

from __future__ import annotations

from typing import Any

DEFAULT_ERROR_MESSAGE = "APNs error"


def parse_apns_error(response_data: Any) -> str:
    """Extrai `reason` do corpo de erro (ex: `BadDeviceToken`)."""
    if isinstance(response_data, dict):
        reason = response_data.get("reason")
        if reason:
            return str(reason)
    return DEFAULT_ERROR_MESSAGE
