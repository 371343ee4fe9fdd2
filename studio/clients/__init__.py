"""API clients for external services."""

from .supabase import SupabaseClient, SupabaseError

__all__ = ["SupabaseClient", "SupabaseError"]
