"""Cliente HTTP/2 do APNs.

Mantém uma conexão persistente (a Apple trata reconexões frequentes como
abuso); `aclose()` fecha no shutdown. Nunca loga device tokens.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.apns.errors import parse_apns_error
from api.connectors.apns.provider_token import ApnsProviderToken
from api.connectors.http_base import HttpClientConfig, HttpError, response_json

if TYPE_CHECKING:
    from config.settings import ApnsSettings

logger: logging.Logger = logging.getLogger(__name__)

DEVICE_PATH = "/3/device/{device_token}"
ALERT_PRIORITY = 10


class ApnsHttpClient:
    """Envia notificações para `POST /3/device/<token>`."""

    def __init__(
        self,
        *,
        token: ApnsProviderToken,
        topic: str,
        api_url: str,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self._topic = topic
        self._api_url = api_url.rstrip("/")
        self._config = config or HttpClientConfig()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._api_url,
                http2=True,
                timeout=self._config.timeout_seconds,
                verify=self._config.verify_ssl,
                transport=self._transport,
            )
        return self._client

    async def send(
        self,
        device_token: str,
        payload: dict[str, Any],
        *,
        ttl_seconds: int,
        push_type: str = "alert",
    ) -> str | None:
        """Envia um push.

        Returns:
            `apns-id` atribuído pela Apple.

        Raises:
            HttpError: falha de transporte ou status != 200 (mensagem = `reason`)
        """
        headers = {
            "authorization": f"bearer {self._token.current()}",
            "apns-topic": self._topic,
            "apns-push-type": push_type,
            "apns-priority": str(ALERT_PRIORITY),
            "apns-expiration": str(int(time.time()) + ttl_seconds),
        }
        try:
            response = await self._http().post(
                DEVICE_PATH.format(device_token=device_token),
                json=payload,
                headers=headers,
            )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"timeout_seconds": self._config.timeout_seconds})
            raise HttpError("http_timeout") from exc
        except httpx.HTTPError as exc:
            raise HttpError("http_connection_error") from exc

        if response.status_code != httpx.codes.OK:
            reason = parse_apns_error(response_json(response))
            logger.warning(
                "apns_api_error",
                extra={"status_code": response.status_code, "reason": reason},
            )
            raise HttpError(reason, status_code=response.status_code)
        return response.headers.get("apns-id")

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


def create_apns_http_client(
    settings: ApnsSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ApnsHttpClient:
    """Factory do cliente APNs; lê a chave .p8 de `APNS_KEY_PATH`.

    Args:
        settings: ApnsSettings opcional. Se None, carrega do ambiente.
        transport: Transporte httpx alternativo (testes)
    """
    from config.settings import get_apns_settings

    apns = settings or get_apns_settings()
    token = ApnsProviderToken(
        signing_key=Path(apns.key_path).read_text(encoding="utf-8"),
        key_id=apns.key_id,
        team_id=apns.team_id,
    )
    return ApnsHttpClient(
        token=token,
        topic=apns.topic,
        api_url=apns.api_url,
        transport=transport,
    )
