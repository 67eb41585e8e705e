"""Schemas de parâmetros do skill Neon."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field

from api.validators.common import ParamsModel

NeonId = Annotated[str, Field(pattern=r"^[a-z0-9-]+$")]
SqlName = Annotated[str, Field(min_length=1, max_length=63)]
ResourceName = Annotated[str, Field(min_length=1, max_length=100)]
Query = Annotated[str, Field(min_length=1, max_length=100_000)]

DEFAULT_REGION = "aws-us-east-1"
DEFAULT_DATABASE = "neondb"
DEFAULT_ROLE = "neondb_owner"
DEFAULT_SCHEMA = "public"


# --- projects ---


class ProjectRef(ParamsModel):
    project_id: NeonId


class ProjectsCreateParams(ParamsModel):
    name: ResourceName
    region_id: Annotated[str, Field(min_length=1, max_length=50)] = DEFAULT_REGION


# --- branches ---


class BranchRef(ParamsModel):
    project_id: NeonId
    branch_id: NeonId


class BranchesCreateParams(ParamsModel):
    project_id: NeonId
    name: ResourceName
    parent_id: NeonId | None = None


# --- conexão (connection/sql/tables compartilham o alvo) ---


class ConnectionTarget(ParamsModel):
    project_id: NeonId
    branch_id: NeonId | None = None
    database_name: SqlName | None = None
    role_name: SqlName | None = None


class SqlRunParams(ConnectionTarget):
    query: Query
    params: list[Any] = Field(default_factory=list)


class SqlExplainParams(ConnectionTarget):
    query: Query


class TablesListParams(ConnectionTarget):
    schema_name: SqlName = Field(default=DEFAULT_SCHEMA, alias="schema")


class TablesDescribeParams(TablesListParams):
    table_name: SqlName
