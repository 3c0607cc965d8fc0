"""Settings do Firebase Cloud Messaging (Android, API HTTP v1)."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

DEFAULT_FCM_CHANNEL_ID = "dandee_notifications"
FCM_API_URL = "https://fcm.googleapis.com/v1"


@dataclass(frozen=True)
class FcmSettings:
    """Configurações do FCM.

    Attributes:
        service_account_json: JSON da service account do Firebase
        channel_id: Canal de notificação Android
        project_id: Projeto Firebase; vazio usa o `project_id` do JSON
        api_url: URL base da API HTTP v1
    """

    service_account_json: str = ""
    channel_id: str = DEFAULT_FCM_CHANNEL_ID
    project_id: str = ""
    api_url: str = FCM_API_URL

    @property
    def enabled(self) -> bool:
        """True quando há credencial de service account."""
        return bool(self.service_account_json)

    def service_account_info(self) -> dict[str, Any]:
        """JSON da service account já decodificado."""
        return json.loads(self.service_account_json)

    def resolved_project_id(self) -> str:
        """Projeto explícito ou o declarado na service account."""
        if self.project_id:
            return self.project_id
        return str(self.service_account_info().get("project_id") or "")

    def validate(self) -> list[str]:
        """Valida o JSON da service account quando informado.

        Returns:
            Lista de erros de validação.
        """
        if not self.service_account_json:
            return []
        try:
            info = self.service_account_info()
        except json.JSONDecodeError:
            return ["FCM_SERVICE_ACCOUNT_JSON não é um JSON válido"]
        if not isinstance(info, dict):
            return ["FCM_SERVICE_ACCOUNT_JSON deve ser um objeto JSON"]
        if not (self.project_id or info.get("project_id")):
            return ["FCM_PROJECT_ID não configurado e ausente na service account"]
        return []


def _load_fcm_from_env() -> FcmSettings:
    """Carrega FcmSettings de variáveis de ambiente."""
    return FcmSettings(
        service_account_json=os.getenv("FCM_SERVICE_ACCOUNT_JSON", ""),
        channel_id=os.getenv("FCM_CHANNEL_ID", DEFAULT_FCM_CHANNEL_ID),
        project_id=os.getenv("FCM_PROJECT_ID", ""),
        api_url=os.getenv("FCM_API_URL", FCM_API_URL),
    )


@lru_cache(maxsize=1)
def get_fcm_settings() -> FcmSettings:
    """Retorna instância cacheada de FcmSettings."""
    return _load_fcm_from_env()
