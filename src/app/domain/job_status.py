"""Status de job request e normalização de grafia legada."""

from __future__ import annotations

from typing import Final

ALLOWED_JOB_STATUSES: Final = frozenset(
    {
        "open",
        "quoted",
        "accepted",
        "in-progress",
        "completed",
        "cancelled",
    }
)

# Versões antigas do app enviam "in_progress"
_LEGACY_STATUS_ALIASES: Final = {"in_progress": "in-progress"}


def normalize_job_status(status: str) -> str:
    """Converte grafia legada para a canônica; demais valores passam intactos."""
    return _LEGACY_STATUS_ALIASES.get(status, status)


def is_valid_job_status(status: str) -> bool:
    """True se o status (já normalizado) pertence ao conjunto fechado."""
    return status in ALLOWED_JOB_STATUSES
