"""Conector da API REST do OneSignal."""

from .errors import parse_onesignal_error
from .http_client import OneSignalHttpClient, create_onesignal_http_client

__all__ = [
    "OneSignalHttpClient",
    "create_onesignal_http_client",
    "parse_onesignal_error",
]
