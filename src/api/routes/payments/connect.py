"""Rotas de Stripe Connect (contas de prestadores e repasses)."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends

from api.routes._errors import collaborator_errors
from api.routes.payments.schemas import AccountLinkRequest, ConnectAccountRequest, TransferRequest
from app.bootstrap.dependencies import get_payments_gateway
from app.domain.payments import SUCCEEDED_STATUS, to_minor_units
from app.protocols import PaymentsGatewayProtocol
from config.settings import get_stripe_settings
from utils.errors import RequestValidationError

logger = logging.getLogger(__name__)

router = APIRouter()

Gateway = Annotated[PaymentsGatewayProtocol, Depends(get_payments_gateway)]

_ACCOUNT_SUMMARY_FIELDS = ("id", "email", "charges_enabled", "payouts_enabled", "details_submitted")


def _account_summary(account: dict[str, Any]) -> dict[str, Any]:
    return {key: account.get(key) for key in _ACCOUNT_SUMMARY_FIELDS}


@router.post("/connect-account")
async def create_connect_account(body: ConnectAccountRequest, gateway: Gateway) -> dict[str, Any]:
    """Cria conta Connect express para o prestador."""
    with collaborator_errors("Failed to create Connect account"):
        account = await gateway.create_connect_account(
            email=body.email,
            metadata={
                "contractor_id": body.contractor_id or "",
                "business_name": body.business_name or "",
            },
        )
    logger.info("connect_account_created", extra={"account_id": account.get("id")})
    return {"accountId": account.get("id"), "account": _account_summary(account)}


@router.post("/connect-account-link")
async def create_account_link(body: AccountLinkRequest, gateway: Gateway) -> dict[str, Any]:
    """Gera link de onboarding hospedado pelo Stripe."""
    if not body.account_id:
        raise RequestValidationError("accountId is required")

    stripe_settings = get_stripe_settings()
    with collaborator_errors("Failed to create account link"):
        link = await gateway.create_account_link(
            body.account_id,
            refresh_url=body.refresh_url or stripe_settings.connect_refresh_url,
            return_url=body.return_url or stripe_settings.connect_return_url,
        )
    return {"url": link.get("url"), "expires_at": link.get("expires_at")}


@router.get("/connect-account/{account_id}/status")
async def get_account_status(account_id: str, gateway: Gateway) -> dict[str, Any]:
    with collaborator_errors("Failed to get account status"):
        account = await gateway.retrieve_account(account_id)
    return {**_account_summary(account), "requirements": account.get("requirements")}


@router.post("/connect-account/transfer")
async def transfer_to_contractor(body: TransferRequest, gateway: Gateway) -> dict[str, Any]:
    """Transfere saldo da plataforma para a conta Connect."""
    if not body.account_id or not body.amount:
        raise RequestValidationError("accountId and amount are required")

    with collaborator_errors("Failed to transfer to contractor"):
        transfer = await gateway.create_transfer(
            amount=to_minor_units(body.amount),
            currency=body.currency or get_stripe_settings().default_currency,
            destination=body.account_id,
            metadata=body.metadata or {},
        )
    logger.info("connect_transfer_created", extra={"transfer_id": transfer.get("id")})
    return {
        "transferId": transfer.get("id"),
        "amount": transfer.get("amount"),
        "currency": transfer.get("currency"),
        "destination": transfer.get("destination"),
        "status": SUCCEEDED_STATUS,
    }
