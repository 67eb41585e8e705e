"""Schemas de parâmetros do skill Supabase (PostgREST).

Nomes de tabela, coluna e função têm formato de identificador SQL, com
prefixo de schema opcional (`schema.tabela`).
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Field, StrictBool, StrictStr

from api.validators.common import NestedParams, ParamsModel

IDENTIFIER_PATTERN = r"^[A-Za-z_][A-Za-z0-9_$]*(\.[A-Za-z_][A-Za-z0-9_$]*)?$"

Identifier = Annotated[str, Field(min_length=1, max_length=127, pattern=IDENTIFIER_PATTERN)]
NestedIdentifier = Annotated[
    StrictStr, Field(min_length=1, max_length=127, pattern=IDENTIFIER_PATTERN)
]
SchemaName = Annotated[str, Field(min_length=1, max_length=63, pattern=IDENTIFIER_PATTERN)]
Row = dict[str, Any]

FilterOperator = Literal[
    "eq",
    "neq",
    "gt",
    "gte",
    "lt",
    "lte",
    "like",
    "ilike",
    "is",
    "in",
    "contains",
    "containedBy",
    "overlaps",
]


class FilterCondition(NestedParams):
    column: NestedIdentifier
    op: FilterOperator
    value: Any = None


class OrderConfig(NestedParams):
    column: NestedIdentifier
    ascending: StrictBool = True
    nulls_first: StrictBool | None = None


# --- data ---


class DataSelectParams(ParamsModel):
    table: Identifier
    columns: Annotated[str, Field(min_length=1)] = "*"
    filter: list[FilterCondition] | None = None
    order: OrderConfig | None = None
    limit: Annotated[int, Field(ge=1)] | None = None
    offset: Annotated[int, Field(ge=0)] | None = None
    single: bool = False


class DataInsertParams(ParamsModel):
    table: Identifier
    data: Row | list[Row]
    returning: str | None = None


class DataUpdateParams(ParamsModel):
    table: Identifier
    data: Row
    filter: Annotated[list[FilterCondition], Field(min_length=1)]
    returning: str | None = None


class DataUpsertParams(ParamsModel):
    table: Identifier
    data: Row | list[Row]
    on_conflict: str | None = None
    returning: str | None = None


class DataDeleteParams(ParamsModel):
    table: Identifier
    filter: Annotated[list[FilterCondition], Field(min_length=1)]
    returning: str | None = None


# --- rpc / introspecção ---


class RpcCallParams(ParamsModel):
    function: Identifier
    args: Row | None = None


class SchemaParams(ParamsModel):
    schema_name: SchemaName = Field(default="public", alias="schema")


class TablesDescribeParams(SchemaParams):
    table: Identifier
