"""Seleção do backend de push notification."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

PushBackend = Literal["onesignal", "native"]

_VALID_BACKENDS = ("onesignal", "native")


@dataclass(frozen=True)
class PushSettings:
    """Configurações gerais de push.

    Attributes:
        backend: Adapter usado pelo dispatcher (onesignal|native)
    """

    backend: str = "onesignal"

    def validate(self) -> list[str]:
        """Valida o backend escolhido.

        Returns:
            Lista de erros de validação.
        """
        if self.backend not in _VALID_BACKENDS:
            return [f"PUSH_BACKEND deve ser 'onesignal' ou 'native' (recebido: {self.backend})"]
        return []


def _load_push_from_env() -> PushSettings:
    """Carrega PushSettings de variáveis de ambiente."""
    return PushSettings(backend=os.getenv("PUSH_BACKEND", "onesignal").lower())


@lru_cache(maxsize=1)
def get_push_settings() -> PushSettings:
    """Retorna instância cacheada de PushSettings."""
    return _load_push_from_env()
