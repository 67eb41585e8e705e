"""Contrato do cliente Neon usado pelos handlers de ação."""

from __future__ import annotations

from typing import Any, Protocol


class SqlRunnerProtocol(Protocol):
    async def run(
        self, uri: str, query: str, params: list[Any] | None = None
    ) -> dict[str, Any]: ...

    async def explain(self, uri: str, query: str) -> str: ...

    async def list_tables(self, uri: str, schema: str = "public") -> list[dict[str, Any]]: ...

    async def describe_table(
        self, uri: str, table_name: str, schema: str = "public"
    ) -> list[dict[str, Any]]: ...


class NeonClientProtocol(Protocol):
    sql: SqlRunnerProtocol

    async def list_projects(self) -> list[dict[str, Any]]: ...

    async def get_project(self, project_id: str) -> dict[str, Any]: ...

    async def create_project(self, name: str, region_id: str = ...) -> dict[str, Any]: ...

    async def delete_project(self, project_id: str) -> dict[str, Any]: ...

    async def list_branches(self, project_id: str) -> list[dict[str, Any]]: ...

    async def get_branch(self, project_id: str, branch_id: str) -> dict[str, Any]: ...

    async def create_branch(
        self, project_id: str, name: str, parent_id: str | None = None
    ) -> dict[str, Any]: ...

    async def delete_branch(self, project_id: str, branch_id: str) -> dict[str, Any]: ...

    async def list_databases(self, project_id: str, branch_id: str) -> list[dict[str, Any]]: ...

    async def connection_uri(
        self,
        project_id: str,
        branch_id: str | None = None,
        database_name: str | None = None,
        role_name: str | None = None,
    ) -> str: ...

    async def connection_info(
        self,
        project_id: str,
        database_name: str | None = None,
        role_name: str | None = None,
    ) -> dict[str, Any]: ...
