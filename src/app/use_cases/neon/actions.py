"""Tabela de ações do proxy Neon.

Ações SQL resolvem a connection URI pela Management API a cada chamada; a
URI nunca sai do processo, exceto em `connection.get_uri` com
ALLOW_CONNECTION_URI=true.
"""

from __future__ import annotations

from typing import Any

from api.validators import EmptyParams, is_select_query
from api.validators import neon as schemas
from app.dispatch import ActionSpec, ActionTable
from app.protocols import NeonClientProtocol
from utils.errors import ActionValidationError

EXPLAIN_SELECT_ONLY = "Only SELECT queries can be explained"
READ_ONLY_SELECT_ONLY = "Only SELECT queries are allowed (NEON_SQL_READ_ONLY=true)"


async def _uri(client: NeonClientProtocol, target: schemas.ConnectionTarget) -> str:
    return await client.connection_uri(
        target.project_id,
        branch_id=target.branch_id,
        database_name=target.database_name,
        role_name=target.role_name,
    )


# --- projects / branches / databases ---


async def list_projects(client: NeonClientProtocol, params: EmptyParams) -> Any:
    return await client.list_projects()


async def get_project(client: NeonClientProtocol, params: schemas.ProjectRef) -> Any:
    return await client.get_project(params.project_id)


async def create_project(client: NeonClientProtocol, params: schemas.ProjectsCreateParams) -> Any:
    return await client.create_project(params.name, region_id=params.region_id)


async def delete_project(client: NeonClientProtocol, params: schemas.ProjectRef) -> Any:
    return await client.delete_project(params.project_id)


async def list_branches(client: NeonClientProtocol, params: schemas.ProjectRef) -> Any:
    return await client.list_branches(params.project_id)


async def get_branch(client: NeonClientProtocol, params: schemas.BranchRef) -> Any:
    return await client.get_branch(params.project_id, params.branch_id)


async def create_branch(client: NeonClientProtocol, params: schemas.BranchesCreateParams) -> Any:
    return await client.create_branch(params.project_id, params.name, parent_id=params.parent_id)


async def delete_branch(client: NeonClientProtocol, params: schemas.BranchRef) -> Any:
    return await client.delete_branch(params.project_id, params.branch_id)


async def list_databases(client: NeonClientProtocol, params: schemas.BranchRef) -> Any:
    return await client.list_databases(params.project_id, params.branch_id)


# --- sql / tables ---


async def explain_query(client: NeonClientProtocol, params: schemas.SqlExplainParams) -> Any:
    if not is_select_query(params.query):
        raise ActionValidationError(EXPLAIN_SELECT_ONLY)
    plan = await client.sql.explain(await _uri(client, params), params.query)
    return {"plan": plan}


async def list_tables(client: NeonClientProtocol, params: schemas.TablesListParams) -> Any:
    return await client.sql.list_tables(await _uri(client, params), schema=params.schema_name)


async def describe_table(client: NeonClientProtocol, params: schemas.TablesDescribeParams) -> Any:
    return await client.sql.describe_table(
        await _uri(client, params), params.table_name, schema=params.schema_name
    )


def build_neon_actions(*, allow_connection_uri: bool, sql_read_only: bool) -> ActionTable:
    """Monta a tabela aplicando as políticas de conexão e de SQL configuradas."""

    async def get_connection(client: NeonClientProtocol, params: schemas.ConnectionTarget) -> Any:
        if allow_connection_uri:
            return {"uri": await _uri(client, params)}
        return await client.connection_info(
            params.project_id,
            database_name=params.database_name,
            role_name=params.role_name,
        )

    async def run_query(client: NeonClientProtocol, params: schemas.SqlRunParams) -> Any:
        if sql_read_only and not is_select_query(params.query):
            raise ActionValidationError(READ_ONLY_SELECT_ONLY)
        return await client.sql.run(await _uri(client, params), params.query, params.params)

    return {
        "projects": {
            "list": ActionSpec(EmptyParams, list_projects),
            "get": ActionSpec(schemas.ProjectRef, get_project),
            "create": ActionSpec(schemas.ProjectsCreateParams, create_project),
            "delete": ActionSpec(schemas.ProjectRef, delete_project),
        },
        "branches": {
            "list": ActionSpec(schemas.ProjectRef, list_branches),
            "get": ActionSpec(schemas.BranchRef, get_branch),
            "create": ActionSpec(schemas.BranchesCreateParams, create_branch),
            "delete": ActionSpec(schemas.BranchRef, delete_branch),
        },
        "databases": {
            "list": ActionSpec(schemas.BranchRef, list_databases),
        },
        "connection": {
            "get_uri": ActionSpec(schemas.ConnectionTarget, get_connection),
        },
        "sql": {
            "run": ActionSpec(schemas.SqlRunParams, run_query),
            "explain": ActionSpec(schemas.SqlExplainParams, explain_query),
        },
        "tables": {
            "list": ActionSpec(schemas.TablesListParams, list_tables),
            "describe": ActionSpec(schemas.TablesDescribeParams, describe_table),
        },
    }
