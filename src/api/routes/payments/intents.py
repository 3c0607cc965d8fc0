"""Rotas de payment intent (Stripe)."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends

from api.routes._errors import collaborator_errors
from api.routes.payments.schemas import (
    PaymentIntentActionRequest,
    PaymentIntentRequest,
    PaymentIntentWithFeeRequest,
)
from app.bootstrap.dependencies import get_payments_gateway
from app.domain.payments import to_minor_units
from app.protocols import PaymentsGatewayProtocol
from config.settings import get_stripe_settings
from utils.errors import RequestValidationError

logger = logging.getLogger(__name__)

router = APIRouter()

Gateway = Annotated[PaymentsGatewayProtocol, Depends(get_payments_gateway)]


def _pick(source: dict[str, Any], *keys: str) -> dict[str, Any]:
    return {key: source.get(key) for key in keys}


@router.post("/payment-intent")
async def create_payment_intent(body: PaymentIntentRequest, gateway: Gateway) -> dict[str, Any]:
    """Cria payment intent; `amount` já em centavos."""
    if not body.amount:
        raise RequestValidationError("Amount is required")

    with collaborator_errors("Failed to create payment intent"):
        intent = await gateway.create_payment_intent(
            amount=to_minor_units(body.amount),
            currency=body.currency or get_stripe_settings().default_currency,
            metadata=body.metadata or {},
        )
    logger.info("payment_intent_created", extra={"payment_intent_id": intent.get("id")})
    return _pick(intent, "id", "client_secret", "amount", "currency", "status", "created")


@router.post("/payment-intent/with-fee")
async def create_payment_intent_with_fee(
    body: PaymentIntentWithFeeRequest, gateway: Gateway
) -> dict[str, Any]:
    """Cria payment intent com taxa da plataforma e repasse ao prestador."""
    if not body.amount or body.application_fee_amount is None or not body.contractor_account_id:
        raise RequestValidationError(
            "amount, application_fee_amount and contractor_account_id are required"
        )

    with collaborator_errors("Failed to create payment intent with fee"):
        intent = await gateway.create_payment_intent(
            amount=to_minor_units(body.amount),
            currency=body.currency or get_stripe_settings().default_currency,
            metadata=body.metadata or {},
            application_fee_amount=to_minor_units(body.application_fee_amount),
            destination_account=body.contractor_account_id,
        )
    logger.info("payment_intent_with_fee_created", extra={"payment_intent_id": intent.get("id")})
    return _pick(
        intent, "id", "client_secret", "amount", "currency", "application_fee_amount", "status"
    )


@router.post("/payment-intent/confirm")
async def confirm_payment_intent(
    body: PaymentIntentActionRequest, gateway: Gateway
) -> dict[str, Any]:
    if not body.payment_intent_id:
        raise RequestValidationError("Payment intent ID is required")

    with collaborator_errors("Failed to confirm payment"):
        intent = await gateway.confirm_payment_intent(
            body.payment_intent_id, payment_method=body.payment_method_id
        )
    logger.info("payment_intent_confirmed", extra={"status": intent.get("status")})
    return _pick(intent, "id", "status", "amount", "currency")


@router.post("/payment-intent/cancel")
async def cancel_payment_intent(
    body: PaymentIntentActionRequest, gateway: Gateway
) -> dict[str, Any]:
    if not body.payment_intent_id:
        raise RequestValidationError("Payment intent ID is required")

    with collaborator_errors("Failed to cancel payment"):
        intent = await gateway.cancel_payment_intent(body.payment_intent_id)
    logger.info("payment_intent_canceled", extra={"status": intent.get("status")})
    return _pick(intent, "id", "status")


@router.get("/payment-intent/{payment_intent_id}")
async def get_payment_intent(payment_intent_id: str, gateway: Gateway) -> dict[str, Any]:
    with collaborator_errors("Failed to retrieve payment intent"):
        intent = await gateway.retrieve_payment_intent(payment_intent_id)
    return _pick(intent, "id", "status", "amount", "currency", "created", "metadata")
