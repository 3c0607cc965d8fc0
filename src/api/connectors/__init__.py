"""Conectores HTTP para APIs externas."""
