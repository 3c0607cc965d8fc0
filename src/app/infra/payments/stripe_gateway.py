"""Gateway de pagamentos sobre o SDK oficial do Stripe.

Usa a API de recursos (`stripe.PaymentIntent`, `stripe.Account`, ...) com
`api_key` por chamada, sem tocar no estado global do módulo. O SDK é
síncrono; cada chamada roda em thread.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import stripe

from app.observability import get_correlation_id
from app.protocols.payments_gateway import PaymentsGatewayProtocol
from utils.errors import PaymentsProviderError

logger = logging.getLogger(__name__)

_COMPONENT = "stripe_gateway"

CONNECT_ACCOUNT_TYPE = "express"
CONNECT_BUSINESS_TYPE = "individual"
ACCOUNT_LINK_TYPE = "account_onboarding"


class StripePaymentsGateway(PaymentsGatewayProtocol):
    """Implementação do PaymentsGatewayProtocol com stripe-python."""

    __slots__ = ("_api_key",)

    def __init__(self, *, api_key: str) -> None:
        self._api_key = api_key

    async def create_payment_intent(
        self,
        *,
        amount: int,
        currency: str,
        metadata: dict[str, Any],
        application_fee_amount: int | None = None,
        destination_account: str | None = None,
    ) -> dict[str, Any]:
        params: dict[str, Any] = {
            "amount": amount,
            "currency": currency,
            "metadata": metadata,
            "automatic_payment_methods": {"enabled": True},
        }
        if application_fee_amount is not None:
            params["application_fee_amount"] = application_fee_amount
        if destination_account is not None:
            params["transfer_data"] = {"destination": destination_account}
        return await self._call("create_payment_intent", stripe.PaymentIntent.create, **params)

    async def confirm_payment_intent(
        self, payment_intent_id: str, *, payment_method: str | None = None
    ) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if payment_method:
            params["payment_method"] = payment_method
        return await self._call(
            "confirm_payment_intent",
            stripe.PaymentIntent.confirm,
            payment_intent_id,
            **params,
        )

    async def cancel_payment_intent(self, payment_intent_id: str) -> dict[str, Any]:
        return await self._call(
            "cancel_payment_intent", stripe.PaymentIntent.cancel, payment_intent_id
        )

    async def retrieve_payment_intent(self, payment_intent_id: str) -> dict[str, Any]:
        return await self._call(
            "retrieve_payment_intent", stripe.PaymentIntent.retrieve, payment_intent_id
        )

    async def create_connect_account(
        self,
        *,
        email: str | None,
        metadata: dict[str, str],
    ) -> dict[str, Any]:
        params: dict[str, Any] = {
            "type": CONNECT_ACCOUNT_TYPE,
            "business_type": CONNECT_BUSINESS_TYPE,
            "metadata": metadata,
        }
        if email:
            params["email"] = email
        return await self._call("create_connect_account", stripe.Account.create, **params)

    async def create_account_link(
        self,
        account_id: str,
        *,
        refresh_url: str,
        return_url: str,
    ) -> dict[str, Any]:
        return await self._call(
            "create_account_link",
            stripe.AccountLink.create,
            account=account_id,
            refresh_url=refresh_url,
            return_url=return_url,
            type=ACCOUNT_LINK_TYPE,
        )

    async def retrieve_account(self, account_id: str) -> dict[str, Any]:
        return await self._call("retrieve_account", stripe.Account.retrieve, account_id)

    async def create_transfer(
        self,
        *,
        amount: int,
        currency: str,
        destination: str,
        metadata: dict[str, Any],
    ) -> dict[str, Any]:
        return await self._call(
            "create_transfer",
            stripe.Transfer.create,
            amount=amount,
            currency=currency,
            destination=destination,
            metadata=metadata,
        )

    async def _call(self, action: str, func: Any, *args: Any, **params: Any) -> dict[str, Any]:
        try:
            result = await asyncio.to_thread(func, *args, api_key=self._api_key, **params)
        except stripe.StripeError as exc:
            error = _to_provider_error(exc)
            logger.error(
                "stripe_call_failed",
                extra={
                    "component": _COMPONENT,
                    "action": action,
                    "error_type": error.error_type,
                    "error_code": error.code,
                    "correlation_id": get_correlation_id(),
                },
            )
            raise error from exc
        return _plain(result)


def _to_provider_error(exc: stripe.StripeError) -> PaymentsProviderError:
    error_object = getattr(exc, "error", None)
    message = (
        getattr(exc, "user_message", None) or getattr(error_object, "message", None) or str(exc)
    )
    return PaymentsProviderError(
        message or "Unknown error",
        code=getattr(exc, "code", None),
        error_type=getattr(error_object, "type", None),
    )


def _plain(value: Any) -> dict[str, Any]:
    """Converte StripeObject (ou dict) em dict simples, recursivamente."""
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return dict(value)
