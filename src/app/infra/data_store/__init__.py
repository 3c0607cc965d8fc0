"""Adapter do data store (Supabase)."""

from .supabase_data_store import SupabaseDataStore

__all__ = ["SupabaseDataStore"]
