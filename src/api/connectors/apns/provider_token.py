"""Provider token do APNs: JWT ES256 assinado com a chave .p8.

A Apple recusa tokens com mais de 1h e limita a frequência de renovação,
então o mesmo token é reaproveitado por 50 minutos.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from google.auth import jwt as google_jwt
from google.auth.crypt import es256

if TYPE_CHECKING:
    from collections.abc import Callable

PROVIDER_TOKEN_TTL_SECONDS = 50 * 60


class ApnsProviderToken:
    """Gera e cacheia o bearer token de provider."""

    def __init__(
        self,
        *,
        signing_key: str,
        key_id: str,
        team_id: str,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._signer = es256.ES256Signer.from_string(signing_key, key_id)
        self._key_id = key_id
        self._team_id = team_id
        self._clock = clock
        self._token: str | None = None
        self._issued_at = 0

    def current(self) -> str:
        """Token válido, renovado quando passou do TTL."""
        now = int(self._clock())
        if self._token is None or now - self._issued_at >= PROVIDER_TOKEN_TTL_SECONDS:
            encoded = google_jwt.encode(
                self._signer,
                {"iss": self._team_id, "iat": now},
                header={"alg": "ES256"},
                key_id=self._key_id,
            )
            self._token = encoded.decode() if isinstance(encoded, bytes) else encoded
            self._issued_at = now
        return self._token
