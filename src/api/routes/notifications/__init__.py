"""Rotas de notificações in-app."""
