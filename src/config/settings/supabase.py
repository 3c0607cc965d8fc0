"""Settings do Supabase (linhas, auth admin e storage).

O cliente usa a service role key, portanto ignora RLS: nunca expor essa
chave para o app cliente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_PROFILE_PHOTOS_BUCKET = "profile-photos"
DEFAULT_MAX_PHOTO_BYTES = 10 * 1024 * 1024  # 10MiB


@dataclass(frozen=True)
class SupabaseSettings:
    """Configurações do Supabase.

    Attributes:
        url: URL do projeto
        service_role_key: Chave service role (admin)
        profile_photos_bucket: Bucket de fotos de perfil
        max_photo_bytes: Tamanho máximo da foto decodificada
    """

    url: str = ""
    service_role_key: str = ""
    profile_photos_bucket: str = DEFAULT_PROFILE_PHOTOS_BUCKET
    max_photo_bytes: int = DEFAULT_MAX_PHOTO_BYTES

    @property
    def enabled(self) -> bool:
        """True quando URL e service role key estão presentes."""
        return bool(self.url and self.service_role_key)

    def validate(self) -> list[str]:
        """Valida configurações do Supabase.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.url:
            errors.append("SUPABASE_URL não configurado")

        if not self.service_role_key:
            errors.append("SUPABASE_SERVICE_ROLE_KEY não configurado")

        if self.max_photo_bytes <= 0:
            errors.append("SUPABASE_MAX_PHOTO_BYTES deve ser > 0")

        return errors


def _load_supabase_from_env() -> SupabaseSettings:
    """Carrega SupabaseSettings de variáveis de ambiente.

    Aceita os nomes legados usados pelo frontend (VITE_SUPABASE_URL) e as
    variações de nome da service key.
    """
    return SupabaseSettings(
        url=os.getenv("SUPABASE_URL") or os.getenv("VITE_SUPABASE_URL", ""),
        service_role_key=(
            os.getenv("SUPABASE_SERVICE_ROLE_KEY")
            or os.getenv("SUPABASE_SERVICE_KEY")
            or os.getenv("SUPABASE_SECRET_KEY", "")
        ),
        profile_photos_bucket=os.getenv(
            "SUPABASE_PROFILE_PHOTOS_BUCKET", DEFAULT_PROFILE_PHOTOS_BUCKET
        ),
        max_photo_bytes=int(
            os.getenv("SUPABASE_MAX_PHOTO_BYTES", str(DEFAULT_MAX_PHOTO_BYTES))
        ),
    )


@lru_cache(maxsize=1)
def get_supabase_settings() -> SupabaseSettings:
    """Retorna instância cacheada de SupabaseSettings."""
    return _load_supabase_from_env()
