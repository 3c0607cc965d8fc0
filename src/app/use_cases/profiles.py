"""Use case de gravação de perfil (cliente ou prestador)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.domain.entity_fields import OWNER_FIELD, PROFILE_TABLES, EntityType
from app.observability import get_correlation_id
from app.services.payload_sanitizer import dropped_fields, has_persistable_fields, sanitize_payload
from utils.errors import RequestValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols import DataStoreProtocol

logger = logging.getLogger(__name__)

# Colunas NOT NULL em customer_profiles
_CUSTOMER_REQUIRED_DEFAULTS = ("first_name", "last_name")


def sanitize_profile(
    profile: Mapping[str, Any],
    entity_type: EntityType,
    user_id: str,
) -> dict[str, Any]:
    """Sanitiza perfil e registra (só nomes) as chaves descartadas."""
    dropped = dropped_fields(profile, entity_type)
    if dropped:
        logger.warning(
            "payload_fields_dropped",
            extra={
                "component": "profiles",
                "entity_type": str(entity_type),
                "dropped_fields": dropped,
                "correlation_id": get_correlation_id(),
            },
        )
    return sanitize_payload(profile, entity_type, user_id)


class SaveProfileUseCase:
    """Sanitiza e faz upsert do perfil por `user_id`."""

    def __init__(self, data_store: DataStoreProtocol) -> None:
        self._data_store = data_store

    async def execute(
        self,
        entity_type: EntityType,
        user_id: str,
        profile: Mapping[str, Any],
    ) -> dict[str, Any]:
        """Grava o perfil.

        Raises:
            RequestValidationError: nada sobrou além do `user_id`
            DataStoreError: falha no upsert
        """
        sanitized = sanitize_profile(profile, entity_type, user_id)
        if not has_persistable_fields(sanitized):
            raise RequestValidationError(f"No valid {entity_type} profile fields provided")

        if entity_type == EntityType.CUSTOMER:
            for field in _CUSTOMER_REQUIRED_DEFAULTS:
                sanitized.setdefault(field, "")

        row = await self._data_store.upsert_row(
            PROFILE_TABLES[entity_type], sanitized, on_conflict=OWNER_FIELD
        )
        logger.info(
            "profile_saved",
            extra={
                "component": "profiles",
                "entity_type": str(entity_type),
                "field_count": len(sanitized),
                "correlation_id": get_correlation_id(),
            },
        )
        return row
