"""Rotas de registros de pagamento (tabela `payments`)."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from api.routes._errors import collaborator_errors
from api.routes.payments.schemas import CreatePaymentRecordRequest, UpdatePaymentStatusRequest
from app.bootstrap.dependencies import get_data_store
from app.protocols import DataStoreProtocol
from app.use_cases import CreatePaymentRecordUseCase, UpdatePaymentStatusUseCase
from app.use_cases.payments import PAYMENTS_TABLE
from utils.errors import RequestValidationError

router = APIRouter()

DataStore = Annotated[DataStoreProtocol, Depends(get_data_store)]


@router.post("/payments/create")
async def create_payment(body: CreatePaymentRecordRequest, data_store: DataStore) -> dict[str, Any]:
    """Cria registro pendente com taxa da plataforma e repasse."""
    if not (
        body.invoice_id
        and body.job_request_id
        and body.contractor_id
        and body.customer_id
        and body.amount
    ):
        raise RequestValidationError("Missing required payment fields")

    with collaborator_errors("Failed to create payment"):
        payment = await CreatePaymentRecordUseCase(data_store).execute(
            invoice_id=body.invoice_id,
            job_request_id=body.job_request_id,
            contractor_id=body.contractor_id,
            customer_id=body.customer_id,
            amount=body.amount,
            payment_method=body.payment_method,
        )
    return {"success": True, "payment": payment}


@router.post("/payments/update-status")
async def update_payment_status(
    body: UpdatePaymentStatusRequest, data_store: DataStore
) -> dict[str, Any]:
    if not body.payment_id or not body.status:
        raise RequestValidationError("paymentId and status are required")

    with collaborator_errors("Failed to update payment status"):
        payment = await UpdatePaymentStatusUseCase(data_store).execute(
            body.payment_id,
            body.status,
            stripe_payment_intent_id=body.stripe_payment_intent_id,
        )
    return {"success": True, "payment": payment}


@router.get("/payments/contractor/{contractor_id}")
async def list_contractor_payments(contractor_id: str, data_store: DataStore) -> list[dict[str, Any]]:
    """Pagamentos do prestador, mais recentes primeiro."""
    with collaborator_errors("Failed to fetch contractor payments"):
        return await data_store.fetch_many(PAYMENTS_TABLE, "contractor_id", contractor_id)
