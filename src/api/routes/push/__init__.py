"""Rotas de push notification."""
