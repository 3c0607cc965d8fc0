"""Rotas de onboarding."""
