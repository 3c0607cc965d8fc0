"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CollaboratorError,
    DataStoreError,
    GatewayError,
    NotFoundError,
    PayloadTooLargeError,
    PaymentsProviderError,
    ProviderError,
    RequestValidationError,
    RowNotFoundError,
    ServiceNotConfiguredError,
)

__all__ = [
    "CollaboratorError",
    "DataStoreError",
    "GatewayError",
    "NotFoundError",
    "PayloadTooLargeError",
    "PaymentsProviderError",
    "ProviderError",
    "RequestValidationError",
    "RowNotFoundError",
    "ServiceNotConfiguredError",
]
