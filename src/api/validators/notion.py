"""Schemas de parâmetros do skill Notion.

IDs aceitam UUID com hífens, hex cru de 32 caracteres ou URL do Notion
(notion.so / notion.site) contendo o hex. A forma canônica é o UUID com
hífens em minúsculas.
"""

from __future__ import annotations

import re
from typing import Annotated, Any, Literal

from pydantic import AfterValidator, Field, StrictStr

from api.validators.common import NestedParams, ParamsModel

_UUID = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$")
_RAW_ID = re.compile(r"^[0-9a-f]{32}$")
_UUID_IN_URL = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}")
_RAW_ID_IN_URL = re.compile(r"(?<![0-9a-f])[0-9a-f]{32}(?![0-9a-f])")
_NOTION_HOSTS = ("notion.so", "notion.site")


def _dashed(raw: str) -> str:
    return f"{raw[:8]}-{raw[8:12]}-{raw[12:16]}-{raw[16:20]}-{raw[20:]}"


def normalize_notion_id(value: str) -> str:
    """Converte qualquer forma aceita de ID Notion para UUID com hífens.

    Raises:
        ValueError: Formato não reconhecido ou URL sem ID.
    """
    candidate = value.strip().lower()
    if any(host in candidate for host in _NOTION_HOSTS):
        path = candidate.split("?", 1)[0].split("#", 1)[0]
        dashed = _UUID_IN_URL.search(path)
        if dashed is not None:
            return dashed.group(0)
        # o ID fica no fim do slug: "Titulo-da-Pagina-<32 hex>"
        raw_ids = _RAW_ID_IN_URL.findall(path)
        if not raw_ids:
            raise ValueError("Could not extract Notion ID from URL")
        return _dashed(raw_ids[-1])
    if _UUID.match(candidate):
        return candidate
    if _RAW_ID.match(candidate):
        return _dashed(candidate)
    raise ValueError("Invalid Notion ID format. Must be UUID or 32-char hex string")


NotionId = Annotated[str, AfterValidator(normalize_notion_id)]
PageSize = Annotated[int, Field(ge=1, le=100)]
NonEmptyText = Annotated[str, Field(min_length=1)]


class SearchQueryParams(ParamsModel):
    query: Annotated[str, Field(min_length=1, max_length=200)]
    filter: Literal["page", "database"] | None = None
    page_size: PageSize = 20


class PageRef(ParamsModel):
    page_id: NotionId


class PagesCreateParams(ParamsModel):
    parent_id: NotionId
    title: NonEmptyText
    content: str | None = None
    properties: dict[str, Any] | None = None


class PagesUpdateParams(ParamsModel):
    page_id: NotionId
    properties: dict[str, Any]


class DatabaseRef(ParamsModel):
    database_id: NotionId


class DatabaseSort(NestedParams):
    property: Annotated[StrictStr, Field(min_length=1)]
    direction: Literal["ascending", "descending"] = "ascending"


class DatabasesQueryParams(ParamsModel):
    database_id: NotionId
    filter: dict[str, Any] | None = None
    sorts: list[DatabaseSort] | None = None
    page_size: PageSize = 100
    start_cursor: str | None = None


class DatabasesCreateEntryParams(ParamsModel):
    database_id: NotionId
    properties: dict[str, Any]


class BlockRef(ParamsModel):
    block_id: NotionId


class BlocksAppendParams(ParamsModel):
    block_id: NotionId
    content: NonEmptyText


class CommentsCreateParams(ParamsModel):
    page_id: NotionId
    content: NonEmptyText
