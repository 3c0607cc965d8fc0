"""Rotas de perfis de cliente e prestador."""
