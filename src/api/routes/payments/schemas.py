"""Bodies das rotas de pagamento.

Campos opcionais: a checagem de obrigatórios é feita na rota para
devolver as mensagens esperadas pelo app.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_CONFIG = ConfigDict(extra="ignore", populate_by_name=True)


class PaymentIntentRequest(BaseModel):
    model_config = _CONFIG

    amount: float | None = None
    currency: str | None = None
    metadata: dict[str, Any] | None = None


class PaymentIntentWithFeeRequest(PaymentIntentRequest):
    application_fee_amount: float | None = None
    contractor_account_id: str | None = None


class PaymentIntentActionRequest(BaseModel):
    model_config = _CONFIG

    payment_intent_id: str | None = Field(default=None, alias="paymentIntentId")
    payment_method_id: str | None = Field(default=None, alias="paymentMethodId")


class ConnectAccountRequest(BaseModel):
    model_config = _CONFIG

    email: str | None = None
    business_name: str | None = Field(default=None, alias="businessName")
    contractor_id: str | None = Field(default=None, alias="contractorId")


class AccountLinkRequest(BaseModel):
    model_config = _CONFIG

    account_id: str | None = Field(default=None, alias="accountId")
    return_url: str | None = Field(default=None, alias="returnUrl")
    refresh_url: str | None = Field(default=None, alias="refreshUrl")


class TransferRequest(BaseModel):
    model_config = _CONFIG

    account_id: str | None = Field(default=None, alias="accountId")
    amount: float | None = None
    currency: str | None = None
    metadata: dict[str, Any] | None = None


class CreatePaymentRecordRequest(BaseModel):
    model_config = _CONFIG

    invoice_id: str | None = None
    job_request_id: str | None = None
    contractor_id: str | None = None
    customer_id: str | None = None
    amount: float | None = None
    payment_method: str | None = None


class UpdatePaymentStatusRequest(BaseModel):
    model_config = _CONFIG

    payment_id: str | None = Field(default=None, alias="paymentId")
    status: str | None = None
    stripe_payment_intent_id: str | None = None
