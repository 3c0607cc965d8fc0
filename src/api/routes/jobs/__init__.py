"""Rotas de job requests."""
