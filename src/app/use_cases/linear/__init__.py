"""Use cases do proxy Linear."""

from app.use_cases.linear.actions import LINEAR_ACTIONS

__all__ = ["LINEAR_ACTIONS"]
