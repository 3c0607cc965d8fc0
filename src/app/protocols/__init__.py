"""Protocolos e contratos do core da aplicação."""

from .data_store import DataStoreProtocol, Row
from .payments_gateway import PaymentsGatewayProtocol
from .push_dispatcher import PushDispatcherProtocol

__all__ = [
    "DataStoreProtocol",
    "PaymentsGatewayProtocol",
    "PushDispatcherProtocol",
    "Row",
]
