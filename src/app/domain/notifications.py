"""Tipos de notificação in-app persistidas no data store."""

from __future__ import annotations

from enum import StrEnum


class NotificationType(StrEnum):
    """Conjunto fechado de tipos aceitos pela tabela `notifications`."""

    JOB = "job"
    QUOTE = "quote"
    MESSAGE = "message"
    REVIEW = "review"
    PAYMENT = "payment"
    SYSTEM = "system"


def is_valid_notification_type(value: str) -> bool:
    """True se `value` é um NotificationType conhecido."""
    return value in NotificationType._value2member_map_
