"""Adapter do processador de pagamentos (Stripe)."""

from .stripe_gateway import StripePaymentsGateway

__all__ = ["StripePaymentsGateway"]
