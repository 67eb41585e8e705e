"""Testes do SupabaseClient sobre httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.supabase import SupabaseClient
from api.connectors.supabase.errors import INTROSPECTION_UNAVAILABLE
from utils.errors import VendorApiError

REST_URL = "https://abc.supabase.co/rest/v1"


def _client(handler) -> SupabaseClient:
    return SupabaseClient(
        rest_url=REST_URL, service_key="eyJ.test.key", transport=httpx.MockTransport(handler)
    )


@pytest.mark.asyncio
async def test_select_encodes_filters_order_and_schema() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"id": 1}])

    client = _client(handler)
    rows = await client.select(
        "audit.events",
        columns="id,kind",
        filters=[("kind", "eq", "login"), ("id", "in", [1, 2])],
        order=("created_at", False, None),
        limit=10,
    )
    await client.aclose()

    request = seen[0]
    assert rows == [{"id": 1}]
    assert request.url.path == "/rest/v1/events"
    assert request.headers["Accept-Profile"] == "audit"
    assert request.headers["apikey"] == "eyJ.test.key"
    assert request.url.params.multi_items() == [
        ("select", "id,kind"),
        ("kind", "eq.login"),
        ("id", "in.(1,2)"),
        ("order", "created_at.desc"),
        ("limit", "10"),
    ]


@pytest.mark.asyncio
async def test_insert_without_returning_prefers_minimal() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201)

    client = _client(handler)
    result = await client.insert("tasks", {"title": "x"})
    await client.aclose()

    assert result is None
    assert seen[0].headers["Prefer"] == "return=minimal"
    assert "select" not in seen[0].url.params


@pytest.mark.asyncio
async def test_upsert_with_returning_merges_duplicates() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json=[{"id": 1}])

    client = _client(handler)
    await client.upsert("tasks", [{"id": 1}], on_conflict="id", returning="*")
    await client.aclose()

    assert seen[0].headers["Prefer"] == "resolution=merge-duplicates,return=representation"
    assert seen[0].url.params["on_conflict"] == "id"
    assert seen[0].url.params["select"] == "*"


@pytest.mark.asyncio
async def test_delete_requires_filters() -> None:
    client = _client(lambda request: httpx.Response(204))
    with pytest.raises(ValueError, match="at least one filter"):
        await client.delete("tasks", [])
    await client.aclose()


@pytest.mark.asyncio
async def test_list_tables_falls_back_to_information_schema() -> None:
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        if request.url.path.endswith("/rpc/get_tables_info"):
            return httpx.Response(404, json={"code": "PGRST202", "message": "function not found"})
        return httpx.Response(200, json=[{"table_name": "tasks"}])

    client = _client(handler)
    tables = await client.list_tables()
    await client.aclose()

    assert tables == [{"table_name": "tasks"}]
    assert paths == ["/rest/v1/rpc/get_tables_info", "/rest/v1/tables"]


@pytest.mark.asyncio
async def test_list_tables_reports_unavailable_introspection() -> None:
    client = _client(
        lambda request: httpx.Response(404, json={"code": "PGRST202", "message": "missing"})
    )
    with pytest.raises(VendorApiError) as exc_info:
        await client.list_tables()
    await client.aclose()

    assert exc_info.value.code == INTROSPECTION_UNAVAILABLE


@pytest.mark.asyncio
async def test_postgrest_error_keeps_code() -> None:
    client = _client(
        lambda request: httpx.Response(409, json={"code": "23505", "message": "duplicate key"})
    )
    with pytest.raises(VendorApiError) as exc_info:
        await client.insert("tasks", {"id": 1})
    await client.aclose()

    assert (exc_info.value.status_code, exc_info.value.code) == (409, "23505")
