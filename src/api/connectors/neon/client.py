"""Cliente da Neon Management API (infraestrutura) + SqlRunner (consultas)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.http_base import HttpClientConfig, VendorHttpClient, response_payload
from api.connectors.neon.errors import VENDOR, parse_neon_error
from api.connectors.neon.sql import SqlRunner
from utils.errors import VendorApiError

if TYPE_CHECKING:
    from config.settings import NeonSettings

DEFAULT_REGION = "aws-us-east-1"
DEFAULT_DATABASE = "neondb"
DEFAULT_ROLE = "neondb_owner"
POSTGRES_PORT = 5432


class NeonClient(VendorHttpClient):
    """Operações da Neon usadas pelo proxy.

    Args:
        api_key: Organization API key (napi_...).
        sql: Executor SQL; injetável para testes.
    """

    vendor = VENDOR

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://console.neon.tech/api/v2",
        timeout_seconds: float = 30.0,
        sql: SqlRunner | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        config = HttpClientConfig(
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            default_headers={
                "Authorization": f"Bearer {api_key}",
                "Accept": "application/json",
            },
        )
        super().__init__(config, transport=transport)
        self.sql = sql or SqlRunner(timeout_seconds=timeout_seconds)

    @classmethod
    def from_settings(cls, settings: NeonSettings) -> NeonClient:
        return cls(
            api_key=settings.api_key,
            base_url=settings.api_base_url,
            timeout_seconds=settings.request_timeout_seconds,
        )

    def error_from_response(self, response: httpx.Response) -> VendorApiError:
        return parse_neon_error(response.status_code, response_payload(response))

    # --- projects ---

    async def list_projects(self) -> list[dict[str, Any]]:
        return (await self.request_json("GET", "/projects")).get("projects") or []

    async def get_project(self, project_id: str) -> dict[str, Any]:
        return (await self.request_json("GET", f"/projects/{project_id}")).get("project") or {}

    async def create_project(self, name: str, region_id: str = DEFAULT_REGION) -> dict[str, Any]:
        body = {"project": {"name": name, "region_id": region_id}}
        project = (await self.request_json("POST", "/projects", json=body)).get("project") or {}
        return {"id": project.get("id"), "name": project.get("name")}

    async def delete_project(self, project_id: str) -> dict[str, Any]:
        await self.request_json("DELETE", f"/projects/{project_id}")
        return {"success": True}

    # --- branches ---

    async def list_branches(self, project_id: str) -> list[dict[str, Any]]:
        response = await self.request_json("GET", f"/projects/{project_id}/branches")
        return response.get("branches") or []

    async def get_branch(self, project_id: str, branch_id: str) -> dict[str, Any]:
        response = await self.request_json("GET", f"/projects/{project_id}/branches/{branch_id}")
        return response.get("branch") or {}

    async def create_branch(
        self, project_id: str, name: str, parent_id: str | None = None
    ) -> dict[str, Any]:
        branch: dict[str, Any] = {"name": name}
        if parent_id:
            branch["parent_id"] = parent_id
        response = await self.request_json(
            "POST", f"/projects/{project_id}/branches", json={"branch": branch}
        )
        created = response.get("branch") or {}
        return {"id": created.get("id"), "name": created.get("name")}

    async def delete_branch(self, project_id: str, branch_id: str) -> dict[str, Any]:
        await self.request_json("DELETE", f"/projects/{project_id}/branches/{branch_id}")
        return {"success": True}

    # --- databases / endpoints ---

    async def list_databases(self, project_id: str, branch_id: str) -> list[dict[str, Any]]:
        response = await self.request_json(
            "GET", f"/projects/{project_id}/branches/{branch_id}/databases"
        )
        return response.get("databases") or []

    async def list_endpoints(self, project_id: str) -> list[dict[str, Any]]:
        response = await self.request_json("GET", f"/projects/{project_id}/endpoints")
        return response.get("endpoints") or []

    # --- connection ---

    async def connection_uri(
        self,
        project_id: str,
        branch_id: str | None = None,
        database_name: str | None = None,
        role_name: str | None = None,
    ) -> str:
        """Connection URI completa (contém senha; nunca logar)."""
        params = {
            "database_name": database_name or DEFAULT_DATABASE,
            "role_name": role_name or DEFAULT_ROLE,
        }
        if branch_id:
            params["branch_id"] = branch_id
        response = await self.request_json(
            "GET", f"/projects/{project_id}/connection_uri", params=params
        )
        uri = response.get("uri")
        if not uri:
            raise VendorApiError(VENDOR, "Connection URI not returned", status_code=404)
        return str(uri)

    async def connection_info(
        self,
        project_id: str,
        database_name: str | None = None,
        role_name: str | None = None,
    ) -> dict[str, Any]:
        """Dados de conexão sem credenciais (host do primeiro endpoint)."""
        endpoints = await self.list_endpoints(project_id)
        if not endpoints:
            raise VendorApiError(VENDOR, "No endpoint found for project", status_code=404)
        return {
            "host": endpoints[0].get("host"),
            "port": POSTGRES_PORT,
            "database": database_name or DEFAULT_DATABASE,
            "role": role_name or DEFAULT_ROLE,
            "note": (
                "Full connection URI disabled. Enable with ALLOW_CONNECTION_URI=true in config."
            ),
        }
