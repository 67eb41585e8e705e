"""Testes da tabela Supabase (conversão de filtros e ordenação)."""

from __future__ import annotations

from typing import Any

import pytest

from app.dispatch import ActionRouter
from app.use_cases.supabase import SUPABASE_ACTIONS


class RecordingClient:
    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []

    async def select(self, table: str, **kwargs: Any) -> Any:
        self.calls.append(("select", (table,), kwargs))
        return [{"id": 1}]

    async def update(self, table: str, data: Any, filters: Any, returning: Any = None) -> Any:
        self.calls.append(("update", (table, data, filters), {"returning": returning}))
        return None


@pytest.mark.asyncio
async def test_select_converts_models_to_tuples() -> None:
    client = RecordingClient()
    router = ActionRouter("supabase", SUPABASE_ACTIONS, client)

    await router.dispatch(
        "data",
        "select",
        {
            "table": "tasks",
            "filter": [{"column": "status", "op": "eq", "value": "open"}],
            "order": {"column": "created_at", "ascending": False},
            "limit": 10,
        },
    )

    _, args, kwargs = client.calls[0]
    assert args == ("tasks",)
    assert kwargs["filters"] == [("status", "eq", "open")]
    assert kwargs["order"] == ("created_at", False, None)
    assert kwargs["limit"] == 10
    assert kwargs["columns"] == "*"


@pytest.mark.asyncio
async def test_update_without_returning_yields_null() -> None:
    client = RecordingClient()
    router = ActionRouter("supabase", SUPABASE_ACTIONS, client)

    data = await router.dispatch(
        "data",
        "update",
        {
            "table": "tasks",
            "data": {"done": True},
            "filter": [{"column": "id", "op": "eq", "value": 3}],
        },
    )

    assert data is None
    assert client.calls[0][1] == ("tasks", {"done": True}, [("id", "eq", 3)])
