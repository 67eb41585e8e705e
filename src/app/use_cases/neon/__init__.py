"""Use cases do proxy Neon."""

from app.use_cases.neon.actions import build_neon_actions

__all__ = ["build_neon_actions"]
