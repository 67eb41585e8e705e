"""Testes da codificação de filtros e ordenação do PostgREST."""

from __future__ import annotations

import pytest

from api.connectors.supabase.postgrest import encode_filter, encode_order, split_table


@pytest.mark.parametrize(
    ("column", "op", "value", "expected"),
    [
        ("status", "eq", "open", ("status", "eq.open")),
        ("deleted_at", "is", None, ("deleted_at", "is.null")),
        ("done", "eq", True, ("done", "eq.true")),
        ("id", "in", [1, 2, 3], ("id", "in.(1,2,3)")),
        ("name", "in", ["a,b", "c"], ("name", 'in.("a,b",c)')),
        ("tags", "contains", ["x", "y"], ("tags", "cs.{x,y}")),
        ("meta", "contains", {"k": 1}, ("meta", 'cs.{"k":1}')),
        ("title", "ilike", "%plan%", ("title", "ilike.%plan%")),
    ],
)
def test_encode_filter(column: str, op: str, value: object, expected: tuple[str, str]) -> None:
    assert encode_filter(column, op, value) == expected


def test_unknown_operator_raises() -> None:
    with pytest.raises(ValueError, match="Unknown filter operator"):
        encode_filter("id", "between", 1)


def test_encode_order() -> None:
    assert encode_order("created_at") == "created_at.asc"
    assert encode_order("created_at", False, False) == "created_at.desc.nullslast"


def test_split_table() -> None:
    assert split_table("tasks") == (None, "tasks")
    assert split_table("audit.events") == ("audit", "events")
