"""Tabela de ações do proxy Notion."""

from __future__ import annotations

from typing import Any

from api.validators import notion as schemas
from app.dispatch import ActionSpec, ActionTable
from app.protocols import NotionClientProtocol


async def search(client: NotionClientProtocol, params: schemas.SearchQueryParams) -> Any:
    return await client.search(
        params.query, object_filter=params.filter, page_size=params.page_size
    )


# --- pages ---


async def get_page(client: NotionClientProtocol, params: schemas.PageRef) -> Any:
    return await client.get_page(params.page_id)


async def create_page(client: NotionClientProtocol, params: schemas.PagesCreateParams) -> Any:
    return await client.create_page(
        params.parent_id,
        params.title,
        content=params.content,
        properties=params.properties,
    )


async def update_page(client: NotionClientProtocol, params: schemas.PagesUpdateParams) -> Any:
    return await client.update_page(params.page_id, params.properties)


async def archive_page(client: NotionClientProtocol, params: schemas.PageRef) -> Any:
    return await client.archive_page(params.page_id)


# --- databases ---


async def get_database(client: NotionClientProtocol, params: schemas.DatabaseRef) -> Any:
    return await client.get_database(params.database_id)


async def query_database(
    client: NotionClientProtocol, params: schemas.DatabasesQueryParams
) -> Any:
    sorts = None
    if params.sorts:
        sorts = [{"property": sort.property, "direction": sort.direction} for sort in params.sorts]
    return await client.query_database(
        params.database_id,
        query_filter=params.filter,
        sorts=sorts,
        page_size=params.page_size,
        start_cursor=params.start_cursor,
    )


async def create_database_entry(
    client: NotionClientProtocol, params: schemas.DatabasesCreateEntryParams
) -> Any:
    return await client.create_database_entry(params.database_id, params.properties)


# --- blocks / comments ---


async def get_blocks(client: NotionClientProtocol, params: schemas.BlockRef) -> Any:
    return await client.get_blocks(params.block_id)


async def append_blocks(client: NotionClientProtocol, params: schemas.BlocksAppendParams) -> Any:
    return await client.append_blocks(params.block_id, params.content)


async def list_comments(client: NotionClientProtocol, params: schemas.PageRef) -> Any:
    return await client.list_comments(params.page_id)


async def create_comment(
    client: NotionClientProtocol, params: schemas.CommentsCreateParams
) -> Any:
    return await client.create_comment(params.page_id, params.content)


NOTION_ACTIONS: ActionTable = {
    "search": {
        "query": ActionSpec(schemas.SearchQueryParams, search),
    },
    "pages": {
        "get": ActionSpec(schemas.PageRef, get_page),
        "create": ActionSpec(schemas.PagesCreateParams, create_page),
        "update": ActionSpec(schemas.PagesUpdateParams, update_page),
        "archive": ActionSpec(schemas.PageRef, archive_page),
    },
    "databases": {
        "get": ActionSpec(schemas.DatabaseRef, get_database),
        "query": ActionSpec(schemas.DatabasesQueryParams, query_database),
        "create_entry": ActionSpec(schemas.DatabasesCreateEntryParams, create_database_entry),
    },
    "blocks": {
        "get": ActionSpec(schemas.BlockRef, get_blocks),
        "append": ActionSpec(schemas.BlocksAppendParams, append_blocks),
    },
    "comments": {
        "list": ActionSpec(schemas.PageRef, list_comments),
        "create": ActionSpec(schemas.CommentsCreateParams, create_comment),
    },
}
