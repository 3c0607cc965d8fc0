"""Cliente HTTP especializado para a API de notificações do OneSignal.

Monta payload de notificação por external user id e interpreta a
resposta. Nunca loga títulos, corpos ou ids de usuário.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError, response_json
from api.connectors.onesignal.errors import DEFAULT_ERROR_MESSAGE, parse_onesignal_error

if TYPE_CHECKING:
    import httpx

    from config.settings import OneSignalSettings

logger: logging.Logger = logging.getLogger(__name__)

NOTIFICATIONS_PATH = "/notifications"


def build_notification_payload(
    *,
    app_id: str,
    external_user_ids: list[str],
    title: str,
    body: str,
    data: dict[str, Any] | None = None,
    url: str | None = None,
) -> dict[str, Any]:
    """Monta corpo do POST /notifications.

    Deep link, quando presente, vai em `url`, `web_url` e `app_url`.
    """
    payload: dict[str, Any] = {
        "app_id": app_id,
        "include_external_user_ids": external_user_ids,
        "headings": {"en": title},
        "contents": {"en": body},
        "data": data or {},
    }
    if url:
        payload["url"] = url
        payload["web_url"] = url
        payload["app_url"] = url
    return payload


class OneSignalHttpClient(HttpClient):
    """Cliente da API REST do OneSignal (Authorization: Basic)."""

    def __init__(
        self,
        *,
        app_id: str,
        rest_api_key: str,
        api_url: str,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(config, transport=transport)
        self.app_id = app_id
        self._rest_api_key = rest_api_key
        self._endpoint = f"{api_url.rstrip('/')}{NOTIFICATIONS_PATH}"

    async def create_notification(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Cria notificação.

        Returns:
            Corpo JSON de sucesso (`id`, `recipients`).

        Raises:
            HttpError: falha de transporte ou status não-2xx (mensagem = primeiro erro da API)
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Basic {self._rest_api_key}",
        }
        response = await self.post(self._endpoint, json=payload, headers=headers)
        response_data = response_json(response)

        if not response.is_success:
            message = parse_onesignal_error(response_data)
            logger.warning(
                "onesignal_api_error",
                extra={"status_code": response.status_code},
            )
            raise HttpError(message, status_code=response.status_code)

        if not isinstance(response_data, dict):
            raise HttpError(DEFAULT_ERROR_MESSAGE, status_code=response.status_code)
        return response_data


def create_onesignal_http_client(
    settings: OneSignalSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> OneSignalHttpClient:
    """Factory do cliente OneSignal a partir das settings.

    Args:
        settings: OneSignalSettings opcional. Se None, carrega do ambiente.
        transport: Transporte httpx alternativo (testes)
    """
    from config.settings import get_onesignal_settings

    onesignal = settings or get_onesignal_settings()
    return OneSignalHttpClient(
        app_id=onesignal.app_id,
        rest_api_key=onesignal.rest_api_key,
        api_url=onesignal.api_url,
        config=HttpClientConfig(timeout_seconds=onesignal.request_timeout_seconds),
        transport=transport,
    )
