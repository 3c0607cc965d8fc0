"""Conector do Firebase Cloud Messaging (API HTTP v1)."""

from .errors import parse_fcm_error
from .http_client import FcmHttpClient, create_fcm_http_client

__all__ = [
    "FcmHttpClient",
    "create_fcm_http_client",
    "parse_fcm_error",
]
