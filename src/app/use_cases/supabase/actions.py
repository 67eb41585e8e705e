"""Tabela de ações do proxy Supabase.

Escritas sem `returning` devolvem `null` (Prefer: return=minimal).
"""

from __future__ import annotations

from typing import Any

from api.validators import supabase as schemas
from app.dispatch import ActionSpec, ActionTable
from app.protocols import FilterTuple, SupabaseClientProtocol


def _filters(conditions: list[schemas.FilterCondition] | None) -> list[FilterTuple]:
    return [(condition.column, condition.op, condition.value) for condition in conditions or ()]


# --- data ---


async def select_rows(client: SupabaseClientProtocol, params: schemas.DataSelectParams) -> Any:
    order = None
    if params.order is not None:
        order = (params.order.column, params.order.ascending, params.order.nulls_first)
    return await client.select(
        params.table,
        columns=params.columns,
        filters=_filters(params.filter),
        order=order,
        limit=params.limit,
        offset=params.offset,
        single=params.single,
    )


async def insert_rows(client: SupabaseClientProtocol, params: schemas.DataInsertParams) -> Any:
    return await client.insert(params.table, params.data, returning=params.returning)


async def update_rows(client: SupabaseClientProtocol, params: schemas.DataUpdateParams) -> Any:
    return await client.update(
        params.table, params.data, _filters(params.filter), returning=params.returning
    )


async def upsert_rows(client: SupabaseClientProtocol, params: schemas.DataUpsertParams) -> Any:
    return await client.upsert(
        params.table, params.data, on_conflict=params.on_conflict, returning=params.returning
    )


async def delete_rows(client: SupabaseClientProtocol, params: schemas.DataDeleteParams) -> Any:
    return await client.delete(params.table, _filters(params.filter), returning=params.returning)


# --- rpc / introspecção ---


async def call_rpc(client: SupabaseClientProtocol, params: schemas.RpcCallParams) -> Any:
    return await client.rpc(params.function, params.args)


async def list_tables(client: SupabaseClientProtocol, params: schemas.SchemaParams) -> Any:
    return await client.list_tables(schema=params.schema_name)


async def describe_table(
    client: SupabaseClientProtocol, params: schemas.TablesDescribeParams
) -> Any:
    return await client.describe_table(params.table, schema=params.schema_name)


async def list_functions(client: SupabaseClientProtocol, params: schemas.SchemaParams) -> Any:
    return await client.list_functions(schema=params.schema_name)


SUPABASE_ACTIONS: ActionTable = {
    "data": {
        "select": ActionSpec(schemas.DataSelectParams, select_rows),
        "insert": ActionSpec(schemas.DataInsertParams, insert_rows),
        "update": ActionSpec(schemas.DataUpdateParams, update_rows),
        "upsert": ActionSpec(schemas.DataUpsertParams, upsert_rows),
        "delete": ActionSpec(schemas.DataDeleteParams, delete_rows),
    },
    "rpc": {
        "call": ActionSpec(schemas.RpcCallParams, call_rpc),
    },
    "tables": {
        "list": ActionSpec(schemas.SchemaParams, list_tables),
        "describe": ActionSpec(schemas.TablesDescribeParams, describe_table),
    },
    "functions": {
        "list": ActionSpec(schemas.SchemaParams, list_functions),
    },
}
