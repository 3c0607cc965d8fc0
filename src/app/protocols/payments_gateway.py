"""Protocolo do processador de pagamentos.

Implementação: Stripe. Todas as quantias em unidades menores (centavos).
Falhas sobem como PaymentsProviderError.
"""

from __future__ import annotations

from typing import Any, Protocol


class PaymentsGatewayProtocol(Protocol):
    """Contrato de payment intents e Connect."""

    async def create_payment_intent(
        self,
        *,
        amount: int,
        currency: str,
        metadata: dict[str, Any],
        application_fee_amount: int | None = None,
        destination_account: str | None = None,
    ) -> dict[str, Any]:
        """Cria payment intent com métodos automáticos habilitados."""
        ...

    async def confirm_payment_intent(
        self, payment_intent_id: str, *, payment_method: str | None = None
    ) -> dict[str, Any]: ...

    async def cancel_payment_intent(self, payment_intent_id: str) -> dict[str, Any]: ...

    async def retrieve_payment_intent(self, payment_intent_id: str) -> dict[str, Any]: ...

    async def create_connect_account(
        self,
        *,
        email: str | None,
        metadata: dict[str, str],
    ) -> dict[str, Any]:
        """Cria conta Connect express de pessoa física."""
        ...

    async def create_account_link(
        self,
        account_id: str,
        *,
        refresh_url: str,
        return_url: str,
    ) -> dict[str, Any]: ...

    async def retrieve_account(self, account_id: str) -> dict[str, Any]: ...

    async def create_transfer(
        self,
        *,
        amount: int,
        currency: str,
        destination: str,
        metadata: dict[str, Any],
    ) -> dict[str, Any]: ...
