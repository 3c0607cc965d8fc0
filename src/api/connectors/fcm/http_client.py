"""Cliente da API HTTP v1 do FCM autenticado por service account.

O access token OAuth vem do google-auth; a renovação é síncrona e roda
em thread.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from google.auth import exceptions as google_auth_exceptions
from google.auth.transport.requests import Request as GoogleAuthRequest
from google.oauth2 import service_account

from api.connectors.fcm.errors import DEFAULT_ERROR_MESSAGE, parse_fcm_error
from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError, response_json

if TYPE_CHECKING:
    import httpx
    from google.auth.credentials import Credentials

    from config.settings import FcmSettings

logger: logging.Logger = logging.getLogger(__name__)

FCM_SCOPE = "https://www.googleapis.com/auth/firebase.messaging"
SEND_PATH = "/projects/{project_id}/messages:send"


class FcmHttpClient(HttpClient):
    """Cliente de `messages:send`."""

    def __init__(
        self,
        *,
        credentials: Credentials,
        project_id: str,
        api_url: str,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(config, transport=transport)
        self._credentials = credentials
        self._endpoint = f"{api_url.rstrip('/')}{SEND_PATH.format(project_id=project_id)}"

    async def _access_token(self) -> str:
        if not self._credentials.valid:
            try:
                await asyncio.to_thread(self._credentials.refresh, GoogleAuthRequest())
            except google_auth_exceptions.GoogleAuthError as exc:
                logger.warning("fcm_token_refresh_failed", extra={"error_type": type(exc).__name__})
                raise HttpError("FCM authentication failed") from exc
        return str(self._credentials.token)

    async def send(self, message: dict[str, Any]) -> str:
        """Envia uma mensagem.

        Returns:
            Nome da mensagem (`projects/<id>/messages/<id>`).

        Raises:
            HttpError: falha de autenticação, transporte ou status não-2xx
        """
        token = await self._access_token()
        response = await self.post(
            self._endpoint,
            json={"message": message},
            headers={"Authorization": f"Bearer {token}"},
        )
        response_data = response_json(response)

        if not response.is_success:
            error = parse_fcm_error(response_data)
            logger.warning("fcm_api_error", extra={"status_code": response.status_code})
            raise HttpError(error, status_code=response.status_code)

        if not isinstance(response_data, dict):
            raise HttpError(DEFAULT_ERROR_MESSAGE, status_code=response.status_code)
        return str(response_data.get("name", ""))


def create_fcm_http_client(
    settings: FcmSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FcmHttpClient:
    """Factory do cliente FCM a partir da service account.

    Args:
        settings: FcmSettings opcional. Se None, carrega do ambiente.
        transport: Transporte httpx alternativo (testes)
    """
    from config.settings import get_fcm_settings

    fcm = settings or get_fcm_settings()
    credentials = service_account.Credentials.from_service_account_info(
        fcm.service_account_info(),
        scopes=[FCM_SCOPE],
    )
    return FcmHttpClient(
        credentials=credentials,
        project_id=fcm.resolved_project_id(),
        api_url=fcm.api_url,
        transport=transport,
    )
