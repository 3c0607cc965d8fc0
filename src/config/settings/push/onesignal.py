"""Settings do OneSignal (API unificada de push).

Chaves em https://app.onesignal.com → Settings → Keys & IDs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

ONESIGNAL_API_URL: str = "https://onesignal.com/api/v1"


@dataclass(frozen=True)
class OneSignalSettings:
    """Configurações do OneSignal.

    Attributes:
        app_id: ID do app no OneSignal
        rest_api_key: REST API key (Authorization: Basic)
        api_url: URL base da API
        request_timeout_seconds: Timeout das requisições HTTP
    """

    app_id: str = ""
    rest_api_key: str = ""
    api_url: str = ONESIGNAL_API_URL
    request_timeout_seconds: float = 30.0

    @property
    def enabled(self) -> bool:
        """True quando app_id e REST API key estão presentes."""
        return bool(self.app_id and self.rest_api_key)

    @property
    def notifications_endpoint(self) -> str:
        """URL completa de criação de notificações."""
        return f"{self.api_url.rstrip('/')}/notifications"

    def validate(self) -> list[str]:
        """Valida configurações do OneSignal.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.rest_api_key and not self.app_id:
            errors.append("ONESIGNAL_APP_ID não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("ONESIGNAL_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_onesignal_from_env() -> OneSignalSettings:
    """Carrega OneSignalSettings de variáveis de ambiente."""
    return OneSignalSettings(
        app_id=os.getenv("ONESIGNAL_APP_ID", ""),
        rest_api_key=os.getenv("ONESIGNAL_REST_API_KEY", ""),
        api_url=os.getenv("ONESIGNAL_API_URL", ONESIGNAL_API_URL),
        request_timeout_seconds=float(os.getenv("ONESIGNAL_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_onesignal_settings() -> OneSignalSettings:
    """Retorna instância cacheada de OneSignalSettings."""
    return _load_onesignal_from_env()
