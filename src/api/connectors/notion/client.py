"""Cliente da API REST do Notion.

O conteúdo das páginas é renderizado percorrendo os filhos de cada bloco
recursivamente, seguindo todos os cursores de paginação.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.http_base import HttpClientConfig, VendorHttpClient, response_payload
from api.connectors.notion.errors import VENDOR, parse_notion_error
from api.connectors.notion.rendering import (
    block_to_text,
    database_title,
    extract_title,
    paragraph_blocks,
    rich_text_to_string,
)

if TYPE_CHECKING:
    from config.settings import NotionSettings
    from utils.errors import VendorApiError

NOTION_VERSION = "2022-06-28"
_CHILDREN_PAGE_SIZE = 100
_INDENT = "  "


class NotionClient(VendorHttpClient):
    """Operações do Notion usadas pelo proxy."""

    vendor = VENDOR

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.notion.com/v1",
        api_version: str = NOTION_VERSION,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        config = HttpClientConfig(
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            default_headers={
                "Authorization": f"Bearer {api_key}",
                "Notion-Version": api_version,
                "Content-Type": "application/json",
            },
        )
        super().__init__(config, transport=transport)

    @classmethod
    def from_settings(cls, settings: NotionSettings) -> NotionClient:
        return cls(
            api_key=settings.api_key,
            base_url=settings.api_base_url,
            api_version=settings.api_version,
            timeout_seconds=settings.request_timeout_seconds,
        )

    def error_from_response(self, response: httpx.Response) -> VendorApiError:
        return parse_notion_error(response.status_code, response_payload(response))

    # --- blocos ---

    async def _walk_children(self, block_id: str, depth: int = 0) -> list[dict[str, Any]]:
        """Percorre filhos (e netos) do bloco, em ordem de documento."""
        rendered: list[dict[str, Any]] = []
        cursor: str | None = None
        while True:
            params: dict[str, Any] = {"page_size": _CHILDREN_PAGE_SIZE}
            if cursor:
                params["start_cursor"] = cursor
            page = await self.request_json("GET", f"/blocks/{block_id}/children", params=params)
            for block in page.get("results") or []:
                text = block_to_text(block)
                if text:
                    rendered.append(
                        {
                            "id": block.get("id"),
                            "type": block.get("type"),
                            "content": text,
                            "depth": depth,
                        }
                    )
                if block.get("has_children"):
                    rendered.extend(await self._walk_children(block["id"], depth + 1))
            cursor = page.get("next_cursor") if page.get("has_more") else None
            if not cursor:
                return rendered

    async def render_text(self, block_id: str) -> str:
        blocks = await self._walk_children(block_id)
        return "\n".join(f"{_INDENT * block['depth']}{block['content']}" for block in blocks)

    async def get_blocks(self, block_id: str) -> list[dict[str, Any]]:
        return await self._walk_children(block_id)

    async def append_blocks(self, block_id: str, content: str) -> dict[str, Any]:
        children = paragraph_blocks(content)
        await self.request_json(
            "PATCH", f"/blocks/{block_id}/children", json={"children": children}
        )
        return {"blocksAdded": len(children)}

    # --- search ---

    async def search(
        self,
        query: str,
        object_filter: str | None = None,
        page_size: int = 20,
    ) -> list[dict[str, Any]]:
        body: dict[str, Any] = {"query": query, "page_size": page_size}
        if object_filter:
            body["filter"] = {"property": "object", "value": object_filter}
        response = await self.request_json("POST", "/search", json=body)

        results = []
        for item in response.get("results") or []:
            if item.get("object") == "database":
                title = database_title(item.get("title"))
            else:
                title = extract_title(item.get("properties"))
            results.append(
                {
                    "id": item.get("id"),
                    "type": item.get("object"),
                    "title": title,
                    "url": item.get("url"),
                    "lastEdited": item.get("last_edited_time"),
                }
            )
        return results

    # --- pages ---

    async def get_page(self, page_id: str) -> dict[str, Any]:
        page = await self.request_json("GET", f"/pages/{page_id}")
        return {
            "id": page.get("id"),
            "title": extract_title(page.get("properties")),
            "properties": page.get("properties") or {},
            "content": await self.render_text(page_id),
            "url": page.get("url"),
        }

    async def create_page(
        self,
        parent_id: str,
        title: str,
        content: str | None = None,
        properties: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        body = {
            "parent": {"page_id": parent_id},
            "properties": {
                "title": {"title": [{"text": {"content": title}}]},
                **(properties or {}),
            },
            "children": paragraph_blocks(content) if content else [],
        }
        page = await self.request_json("POST", "/pages", json=body)
        return {"id": page.get("id"), "url": page.get("url")}

    async def update_page(self, page_id: str, properties: dict[str, Any]) -> dict[str, Any]:
        page = await self.request_json(
            "PATCH", f"/pages/{page_id}", json={"properties": properties}
        )
        return {"id": page.get("id"), "url": page.get("url")}

    async def archive_page(self, page_id: str) -> dict[str, Any]:
        page = await self.request_json("PATCH", f"/pages/{page_id}", json={"archived": True})
        return {"id": page.get("id"), "archived": bool(page.get("archived"))}

    # --- databases ---

    async def get_database(self, database_id: str) -> dict[str, Any]:
        database = await self.request_json("GET", f"/databases/{database_id}")
        return {
            "id": database.get("id"),
            "title": database_title(database.get("title")),
            "properties": database.get("properties") or {},
            "url": database.get("url"),
        }

    async def query_database(
        self,
        database_id: str,
        *,
        query_filter: dict[str, Any] | None = None,
        sorts: list[dict[str, Any]] | None = None,
        page_size: int = 100,
        start_cursor: str | None = None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"page_size": page_size}
        if query_filter:
            body["filter"] = query_filter
        if sorts:
            body["sorts"] = sorts
        if start_cursor:
            body["start_cursor"] = start_cursor
        response = await self.request_json("POST", f"/databases/{database_id}/query", json=body)
        return {
            "id": database_id,
            "hasMore": bool(response.get("has_more")),
            "nextCursor": response.get("next_cursor"),
            "results": [
                {
                    "id": row.get("id"),
                    "properties": row.get("properties") or {},
                    "url": row.get("url"),
                }
                for row in response.get("results") or []
            ],
        }

    async def create_database_entry(
        self, database_id: str, properties: dict[str, Any]
    ) -> dict[str, Any]:
        body = {"parent": {"database_id": database_id}, "properties": properties}
        page = await self.request_json("POST", "/pages", json=body)
        return {"id": page.get("id"), "url": page.get("url")}

    # --- comments ---

    async def list_comments(self, page_id: str) -> list[dict[str, Any]]:
        response = await self.request_json("GET", "/comments", params={"block_id": page_id})
        return [
            {
                "id": comment.get("id"),
                "author": (comment.get("created_by") or {}).get("id"),
                "content": rich_text_to_string(comment.get("rich_text")),
                "createdTime": comment.get("created_time"),
            }
            for comment in response.get("results") or []
        ]

    async def create_comment(self, page_id: str, content: str) -> dict[str, Any]:
        body = {
            "parent": {"page_id": page_id},
            "rich_text": [{"type": "text", "text": {"content": content}}],
        }
        comment = await self.request_json("POST", "/comments", json=body)
        return {"id": comment.get("id")}
