"""Testes dos schemas Supabase."""

from __future__ import annotations

import pytest

from api.validators import ParseFailure, ParseSuccess, parse_params
from api.validators.supabase import (
    DataDeleteParams,
    DataSelectParams,
    DataUpdateParams,
)


@pytest.mark.parametrize("table", ["users", "public.users", "_audit$log"])
def test_identifier_shape_accepted(table: str) -> None:
    assert isinstance(parse_params(DataSelectParams, {"table": table}), ParseSuccess)


@pytest.mark.parametrize("table", ["1users", "users; drop", "a.b.c", "user-table", ""])
def test_identifier_shape_rejected(table: str) -> None:
    assert isinstance(parse_params(DataSelectParams, {"table": table}), ParseFailure)


def test_filters_and_order_parse_from_objects() -> None:
    result = parse_params(
        DataSelectParams,
        {
            "table": "tasks",
            "filter": [{"column": "status", "op": "in", "value": ["open", "done"]}],
            "order": {"column": "created_at", "ascending": False, "nullsFirst": True},
        },
    )
    assert isinstance(result, ParseSuccess)
    assert result.value.filter[0].op == "in"
    assert result.value.order.ascending is False
    assert result.value.order.nulls_first is True


def test_unknown_operator_rejected() -> None:
    result = parse_params(
        DataSelectParams, {"table": "tasks", "filter": [{"column": "x", "op": "regex", "value": 1}]}
    )
    assert isinstance(result, ParseFailure)


def test_order_ascending_is_strict_bool() -> None:
    result = parse_params(
        DataSelectParams, {"table": "tasks", "order": {"column": "x", "ascending": "no"}}
    )
    assert isinstance(result, ParseFailure)


@pytest.mark.parametrize(("field", "value"), [("limit", 0), ("offset", -1)])
def test_pagination_ranges(field: str, value: int) -> None:
    assert isinstance(parse_params(DataSelectParams, {"table": "t", field: value}), ParseFailure)


def test_update_requires_filter() -> None:
    result = parse_params(DataUpdateParams, {"table": "t", "data": {"a": 1}, "filter": []})
    assert isinstance(result, ParseFailure)


def test_delete_requires_filter() -> None:
    assert isinstance(parse_params(DataDeleteParams, {"table": "t"}), ParseFailure)
