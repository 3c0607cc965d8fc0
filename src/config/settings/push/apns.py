"""Settings do Apple Push Notification service (APNs).

Autenticação por token (.p8): key id + team id + arquivo da chave.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_APNS_TOPIC = "com.dandee.homeops.app"
APNS_PRODUCTION_URL = "https://api.push.apple.com"
APNS_SANDBOX_URL = "https://api.sandbox.push.apple.com"


@dataclass(frozen=True)
class ApnsSettings:
    """Configurações do APNs.

    Attributes:
        key_path: Caminho do arquivo .p8
        key_id: ID da chave no Apple Developer
        team_id: ID do time no Apple Developer
        topic: Bundle ID do app iOS
        production: Usa gateway de produção (False = sandbox)
        expiry_seconds: Validade da notificação no APNs
    """

    key_path: str = ""
    key_id: str = ""
    team_id: str = ""
    topic: str = DEFAULT_APNS_TOPIC
    production: bool = True
    expiry_seconds: int = 3600

    @property
    def enabled(self) -> bool:
        """True quando as três credenciais estão presentes."""
        return bool(self.key_path and self.key_id and self.team_id)

    @property
    def api_url(self) -> str:
        """Gateway de produção ou sandbox."""
        return APNS_PRODUCTION_URL if self.production else APNS_SANDBOX_URL

    def validate(self) -> list[str]:
        """Valida configurações do APNs.

        Credenciais são opcionais; só validamos consistência.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []
        provided = [bool(self.key_path), bool(self.key_id), bool(self.team_id)]
        if any(provided) and not all(provided):
            errors.append("APNS_KEY_PATH, APNS_KEY_ID e APNS_TEAM_ID devem vir juntos")

        if self.expiry_seconds <= 0:
            errors.append("APNS_EXPIRY_SECONDS deve ser > 0")

        return errors


def _load_apns_from_env() -> ApnsSettings:
    """Carrega ApnsSettings de variáveis de ambiente."""
    return ApnsSettings(
        key_path=os.getenv("APNS_KEY_PATH", ""),
        key_id=os.getenv("APNS_KEY_ID", ""),
        team_id=os.getenv("APNS_TEAM_ID", ""),
        topic=os.getenv("APNS_TOPIC", DEFAULT_APNS_TOPIC),
        # Produção por padrão; só "false"/"0" ativa sandbox
        production=os.getenv("APNS_PRODUCTION", "true").lower() not in ("false", "0", "no"),
        expiry_seconds=int(os.getenv("APNS_EXPIRY_SECONDS", "3600")),
    )


@lru_cache(maxsize=1)
def get_apns_settings() -> ApnsSettings:
    """Retorna instância cacheada de ApnsSettings."""
    return _load_apns_from_env()
