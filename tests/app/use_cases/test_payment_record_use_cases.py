"""Testes dos use cases de registro de pagamento."""

from __future__ import annotations

from datetime import datetime

import pytest

from app.use_cases import CreatePaymentRecordUseCase, UpdatePaymentStatusUseCase
from tests.fakes.fake_data_store import FakeDataStore


@pytest.mark.asyncio
async def test_create_record_row_shape() -> None:
    store = FakeDataStore()

    payment = await CreatePaymentRecordUseCase(store).execute(
        invoice_id="inv1",
        job_request_id="job1",
        contractor_id="c1",
        customer_id="u1",
        amount=250.0,
        payment_method="card",
    )

    assert payment["payment_method"] == "card"
    assert payment["status"] == "pending"
    assert payment["currency"] == "usd"
    assert payment["platform_fee"] == (250.0 * 0.029) + 0.30
    assert payment["contractor_payout"] == 250.0 - ((250.0 * 0.029) + 0.30)
    assert store.tables["payments"][0]["invoice_id"] == "inv1"


@pytest.mark.asyncio
async def test_update_status_succeeded_stamps_utc_date() -> None:
    store = FakeDataStore({"payments": [{"id": "p1", "status": "pending"}]})

    payment = await UpdatePaymentStatusUseCase(store).execute("p1", "succeeded")

    stamped = datetime.fromisoformat(payment["payment_date"])
    assert stamped.utcoffset().total_seconds() == 0
    assert "stripe_payment_intent_id" not in payment


@pytest.mark.asyncio
async def test_update_status_refunded_keeps_intent_id() -> None:
    store = FakeDataStore({"payments": [{"id": "p1", "status": "succeeded"}]})

    payment = await UpdatePaymentStatusUseCase(store).execute(
        "p1", "refunded", stripe_payment_intent_id="pi_9"
    )

    assert payment["status"] == "refunded"
    assert payment["stripe_payment_intent_id"] == "pi_9"
    assert "payment_date" not in payment
