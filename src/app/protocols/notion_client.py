"""Contrato do cliente Notion usado pelos handlers de ação."""

from __future__ import annotations

from typing import Any, Protocol


class NotionClientProtocol(Protocol):
    async def search(
        self, query: str, object_filter: str | None = None, page_size: int = 20
    ) -> list[dict[str, Any]]: ...

    async def get_page(self, page_id: str) -> dict[str, Any]: ...

    async def create_page(
        self,
        parent_id: str,
        title: str,
        content: str | None = None,
        properties: dict[str, Any] | None = None,
    ) -> dict[str, Any]: ...

    async def update_page(self, page_id: str, properties: dict[str, Any]) -> dict[str, Any]: ...

    async def archive_page(self, page_id: str) -> dict[str, Any]: ...

    async def get_database(self, database_id: str) -> dict[str, Any]: ...

    async def query_database(
        self,
        database_id: str,
        *,
        query_filter: dict[str, Any] | None = None,
        sorts: list[dict[str, Any]] | None = None,
        page_size: int = 100,
        start_cursor: str | None = None,
    ) -> dict[str, Any]: ...

    async def create_database_entry(
        self, database_id: str, properties: dict[str, Any]
    ) -> dict[str, Any]: ...

    async def get_blocks(self, block_id: str) -> list[dict[str, Any]]: ...

    async def append_blocks(self, block_id: str, content: str) -> dict[str, Any]: ...

    async def list_comments(self, page_id: str) -> list[dict[str, Any]]: ...

    async def create_comment(self, page_id: str, content: str) -> dict[str, Any]: ...
