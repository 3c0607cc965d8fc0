"""Sanitização de payloads antes de qualquer escrita no data store.

Regras aplicadas por chave, na ordem:
- chaves fora do allow-list são descartadas;
- `id` só sobrevive como string não vazia sem prefixo `temp-`;
- latitude/longitude só sobrevivem como número finito;
- campos de endereço sempre ficam (string aparada ou None);
- demais: None cai, strings são aparadas e vazias caem, resto passa intacto.

Função pura: nunca levanta e é idempotente.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from app.domain.entity_fields import (
    ADDRESS_FIELDS,
    GEO_FIELDS,
    ID_FIELD,
    OWNER_FIELD,
    PROFILE_ENTITY_TYPES,
    TEMP_ID_PREFIX,
    EntityType,
    allowed_fields_for,
)

_DROP = object()


def sanitize_payload(
    raw: Mapping[str, Any] | None,
    entity_type: EntityType,
    owner_id: str | None = None,
) -> dict[str, Any]:
    """Normaliza payload para o tipo de entidade.

    Args:
        raw: Payload recebido do cliente (pode ser None)
        entity_type: Tipo da entidade de destino
        owner_id: Dono do registro; injetado como `user_id` nos perfis

    Returns:
        Novo dict com chaves ⊆ allow-list ∪ {user_id}.
    """
    allowed = allowed_fields_for(entity_type)
    sanitized: dict[str, Any] = {}
    if entity_type in PROFILE_ENTITY_TYPES:
        sanitized[OWNER_FIELD] = owner_id

    if not isinstance(raw, Mapping):
        return sanitized

    for key, value in raw.items():
        if key not in allowed:
            continue
        cleaned = _clean_value(key, value)
        if cleaned is not _DROP:
            sanitized[key] = cleaned

    return sanitized


def dropped_fields(raw: Mapping[str, Any] | None, entity_type: EntityType) -> list[str]:
    """Lista (ordenada) das chaves do input fora do allow-list.

    Só nomes, nunca valores: o resultado vai para log.
    """
    if not isinstance(raw, Mapping):
        return []
    allowed = allowed_fields_for(entity_type)
    return sorted(str(key) for key in raw if key not in allowed)


def has_persistable_fields(sanitized: Mapping[str, Any]) -> bool:
    """True se há algo além do `user_id` injetado."""
    return any(key != OWNER_FIELD for key in sanitized)


def _clean_value(key: str, value: Any) -> Any:
    if key == ID_FIELD:
        if isinstance(value, str) and value and not value.startswith(TEMP_ID_PREFIX):
            return value
        return _DROP

    if key in GEO_FIELDS:
        # bool é subclasse de int
        if isinstance(value, bool) or not isinstance(value, int | float):
            return _DROP
        try:
            finite = math.isfinite(value)
        except OverflowError:
            # int do JSON grande demais para float
            return _DROP
        return value if finite else _DROP

    if key in ADDRESS_FIELDS:
        return None if value is None else _address_text(value)

    if value is None:
        return _DROP
    if isinstance(value, str):
        trimmed = value.strip()
        return trimmed if trimmed else _DROP
    return value


def _address_text(value: Any) -> str:
    """Texto do campo de endereço; booleanos em minúsculas (`true`/`false`)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value).strip()
