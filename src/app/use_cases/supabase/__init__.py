"""Use cases do proxy Supabase."""

from app.use_cases.supabase.actions import SUPABASE_ACTIONS

__all__ = ["SUPABASE_ACTIONS"]
