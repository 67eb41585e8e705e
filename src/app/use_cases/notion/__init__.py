"""Use cases do proxy Notion."""

from app.use_cases.notion.actions import NOTION_ACTIONS

__all__ = ["NOTION_ACTIONS"]
