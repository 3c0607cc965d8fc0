"""Regras de negócio de pagamentos.

A taxa da plataforma é regra fixa (2,9% + 0,30), não configurável. A
ordem das operações em ponto flutuante faz parte da regra: o valor
gravado tem que bater com o que o app calcula.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass

PLATFORM_FEE_RATE = 0.029
PLATFORM_FEE_FIXED = 0.30

DEFAULT_PAYMENT_METHOD = "stripe"
INITIAL_PAYMENT_STATUS = "pending"
PAYMENT_CURRENCY = "usd"
SUCCEEDED_STATUS = "succeeded"


@dataclass(frozen=True, slots=True)
class FeeBreakdown:
    """Divisão do valor entre taxa da plataforma e repasse."""

    platform_fee: float
    contractor_payout: float


def compute_fee_breakdown(amount: float) -> FeeBreakdown:
    """Calcula taxa da plataforma e repasse ao prestador.

    Args:
        amount: Valor bruto do pagamento (unidade monetária, não centavos).

    Returns:
        FeeBreakdown com `amount * 0.029 + 0.30` e `amount - fee`.
    """
    platform_fee = (amount * PLATFORM_FEE_RATE) + PLATFORM_FEE_FIXED
    contractor_payout = amount - platform_fee
    return FeeBreakdown(platform_fee=platform_fee, contractor_payout=contractor_payout)


def to_minor_units(amount: float) -> int:
    """Arredonda para inteiro (centavos) com meio para cima.

    `round()` do Python arredonda meio para par; o app envia valores já em
    centavos e espera o arredondamento comercial.
    """
    return int(math.floor(amount + 0.5))


def generate_payment_number(now_ms: int | None = None) -> str:
    """Gera número legível do pagamento (`PAY-<epoch ms>`)."""
    timestamp = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"PAY-{timestamp}"
