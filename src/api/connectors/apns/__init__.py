"""Conector do Apple Push Notification service (HTTP/2, token .p8)."""

from .errors import parse_apns_error
from .http_client import ApnsHttpClient, create_apns_http_client
from .provider_token import ApnsProviderToken

__all__ = [
    "ApnsHttpClient",
    "ApnsProviderToken",
    "create_apns_http_client",
    "parse_apns_error",
]
