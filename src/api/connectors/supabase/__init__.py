"""Conector Supabase (PostgREST)."""

from api.connectors.supabase.client import SupabaseClient
from api.connectors.supabase.errors import build_supabase_sanitizer, parse_postgrest_error

__all__ = ["SupabaseClient", "build_supabase_sanitizer", "parse_postgrest_error"]
