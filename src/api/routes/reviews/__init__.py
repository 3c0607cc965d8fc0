"""Rotas de avaliações."""
