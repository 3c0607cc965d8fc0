"""Rotas de pagamentos: payment intents, Stripe Connect e registros."""
