"""Conector Notion (REST v1)."""

from api.connectors.notion.client import NOTION_VERSION, NotionClient
from api.connectors.notion.errors import build_notion_sanitizer, parse_notion_error

__all__ = ["NOTION_VERSION", "NotionClient", "build_notion_sanitizer", "parse_notion_error"]
