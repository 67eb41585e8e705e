"""Testes do NotionClient: renderização recursiva e paginação de blocos."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.notion import NOTION_VERSION, NotionClient
from utils.errors import VendorApiError


def _paragraph(block_id: str, text: str, has_children: bool = False) -> dict:
    return {
        "id": block_id,
        "type": "paragraph",
        "has_children": has_children,
        "paragraph": {"rich_text": [{"plain_text": text}]},
    }


# page-1 → [a, b(+filhos)] na primeira página, [c] após o cursor; b → [b1]
CHILDREN = {
    ("page-1", None): {
        "results": [_paragraph("a", "First"), _paragraph("b", "Parent", has_children=True)],
        "has_more": True,
        "next_cursor": "cur-2",
    },
    ("page-1", "cur-2"): {
        "results": [_paragraph("c", "Last")],
        "has_more": False,
        "next_cursor": None,
    },
    ("b", None): {
        "results": [_paragraph("b1", "Nested")],
        "has_more": False,
        "next_cursor": None,
    },
}


def _handler(request: httpx.Request) -> httpx.Response:
    path = request.url.path
    if path.endswith("/children"):
        block_id = path.split("/")[-2]
        cursor = request.url.params.get("start_cursor")
        return httpx.Response(200, json=CHILDREN[(block_id, cursor)])
    if path.endswith("/pages/page-1"):
        return httpx.Response(
            200,
            json={
                "id": "page-1",
                "url": "https://notion.so/page-1",
                "properties": {
                    "Name": {"type": "title", "title": [{"plain_text": "Roadmap"}]},
                },
            },
        )
    return httpx.Response(404, json={"code": "object_not_found", "message": "Not found"})


def _client(handler=_handler) -> NotionClient:
    return NotionClient(api_key="ntn_test", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_blocks_follow_cursors_and_children_in_order() -> None:
    client = _client()
    blocks = await client.get_blocks("page-1")
    await client.aclose()

    assert [(block["id"], block["depth"]) for block in blocks] == [
        ("a", 0),
        ("b", 0),
        ("b1", 1),
        ("c", 0),
    ]


@pytest.mark.asyncio
async def test_page_content_is_indented_text() -> None:
    client = _client()
    page = await client.get_page("page-1")
    await client.aclose()

    assert page["title"] == "Roadmap"
    assert page["content"] == "First\nParent\n  Nested\nLast"


@pytest.mark.asyncio
async def test_version_header_is_sent() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"results": []})

    client = _client(handler)
    await client.search("roadmap")
    await client.aclose()

    assert seen[0].headers["Notion-Version"] == NOTION_VERSION
    assert json.loads(seen[0].content) == {"query": "roadmap", "page_size": 20}


@pytest.mark.asyncio
async def test_error_payload_becomes_vendor_error() -> None:
    client = _client()
    with pytest.raises(VendorApiError) as exc_info:
        await client.get_database("missing")
    await client.aclose()

    assert exc_info.value.status_code == 404
    assert exc_info.value.code == "object_not_found"
