"""Use cases de registros de pagamento no data store."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from app.domain.payments import (
    DEFAULT_PAYMENT_METHOD,
    INITIAL_PAYMENT_STATUS,
    PAYMENT_CURRENCY,
    SUCCEEDED_STATUS,
    compute_fee_breakdown,
    generate_payment_number,
)
from app.observability import get_correlation_id

if TYPE_CHECKING:
    from app.protocols import DataStoreProtocol

logger = logging.getLogger(__name__)

PAYMENTS_TABLE = "payments"


class CreatePaymentRecordUseCase:
    """Cria linha de pagamento pendente com taxa e repasse calculados."""

    def __init__(self, data_store: DataStoreProtocol) -> None:
        self._data_store = data_store

    async def execute(
        self,
        *,
        invoice_id: str,
        job_request_id: str,
        contractor_id: str,
        customer_id: str,
        amount: float,
        payment_method: str | None = None,
    ) -> dict[str, Any]:
        breakdown = compute_fee_breakdown(amount)
        row = {
            "payment_number": generate_payment_number(),
            "invoice_id": invoice_id,
            "job_request_id": job_request_id,
            "contractor_id": contractor_id,
            "customer_id": customer_id,
            "amount": amount,
            "payment_method": payment_method or DEFAULT_PAYMENT_METHOD,
            "status": INITIAL_PAYMENT_STATUS,
            "currency": PAYMENT_CURRENCY,
            "platform_fee": breakdown.platform_fee,
            "contractor_payout": breakdown.contractor_payout,
        }
        payment = await self._data_store.insert_row(PAYMENTS_TABLE, row)
        logger.info(
            "payment_record_created",
            extra={
                "component": "payments",
                "payment_id": payment.get("id"),
                "correlation_id": get_correlation_id(),
            },
        )
        return payment


class UpdatePaymentStatusUseCase:
    """Atualiza status; `succeeded` também grava `payment_date` (UTC)."""

    def __init__(self, data_store: DataStoreProtocol) -> None:
        self._data_store = data_store

    async def execute(
        self,
        payment_id: str,
        status: str,
        *,
        stripe_payment_intent_id: str | None = None,
    ) -> dict[str, Any]:
        fields: dict[str, Any] = {"status": status}
        if stripe_payment_intent_id:
            fields["stripe_payment_intent_id"] = stripe_payment_intent_id
        if status == SUCCEEDED_STATUS:
            fields["payment_date"] = datetime.now(UTC).isoformat()

        payment = await self._data_store.update_row(PAYMENTS_TABLE, "id", payment_id, fields)
        logger.info(
            "payment_status_updated",
            extra={
                "component": "payments",
                "payment_id": payment_id,
                "status": status,
                "correlation_id": get_correlation_id(),
            },
        )
        return payment
