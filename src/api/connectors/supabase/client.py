"""Cliente PostgREST do Supabase (CRUD, RPC e introspecção).

Autenticação com a service key nos headers `apikey` e `Authorization`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.http_base import HttpClientConfig, VendorHttpClient, response_payload
from api.connectors.supabase.errors import (
    INTROSPECTION_UNAVAILABLE,
    VENDOR,
    parse_postgrest_error,
)
from api.connectors.supabase.postgrest import encode_filter, encode_order, split_table
from utils.errors import VendorApiError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from config.settings import SupabaseSettings

logger = logging.getLogger(__name__)

SINGLE_OBJECT_MEDIA_TYPE = "application/vnd.pgrst.object+json"


class SupabaseClient(VendorHttpClient):
    """Operações do PostgREST usadas pelo proxy.

    Filtros chegam como tuplas (coluna, operador, valor) já validadas.
    """

    vendor = VENDOR

    def __init__(
        self,
        rest_url: str,
        service_key: str,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        config = HttpClientConfig(
            base_url=rest_url,
            timeout_seconds=timeout_seconds,
            default_headers={
                "apikey": service_key,
                "Authorization": f"Bearer {service_key}",
            },
        )
        super().__init__(config, transport=transport)

    @classmethod
    def from_settings(cls, settings: SupabaseSettings) -> SupabaseClient:
        return cls(
            rest_url=settings.rest_url,
            service_key=settings.service_key,
            timeout_seconds=settings.request_timeout_seconds,
        )

    def error_from_response(self, response: httpx.Response) -> VendorApiError:
        return parse_postgrest_error(response.status_code, response_payload(response))

    @staticmethod
    def _target(table: str, *, write: bool = False) -> tuple[str, dict[str, str]]:
        schema, name = split_table(table)
        headers: dict[str, str] = {}
        if schema:
            headers["Content-Profile" if write else "Accept-Profile"] = schema
        return f"/{name}", headers

    @staticmethod
    def _filter_params(filters: Sequence[tuple[str, str, Any]] | None) -> list[tuple[str, str]]:
        return [encode_filter(column, op, value) for column, op, value in filters or ()]

    @staticmethod
    def _returning(returning: str | None, prefer: list[str]) -> tuple[list[tuple[str, str]], str]:
        params: list[tuple[str, str]] = []
        if returning:
            params.append(("select", returning))
            prefer.append("return=representation")
        else:
            prefer.append("return=minimal")
        return params, ",".join(prefer)

    # --- data ---

    async def select(
        self,
        table: str,
        *,
        columns: str = "*",
        filters: Sequence[tuple[str, str, Any]] | None = None,
        order: tuple[str, bool, bool | None] | None = None,
        limit: int | None = None,
        offset: int | None = None,
        single: bool = False,
    ) -> Any:
        path, headers = self._target(table)
        params = [("select", columns), *self._filter_params(filters)]
        if order is not None:
            params.append(("order", encode_order(*order)))
        if limit is not None:
            params.append(("limit", str(limit)))
        if offset is not None:
            params.append(("offset", str(offset)))
        if single:
            headers["Accept"] = SINGLE_OBJECT_MEDIA_TYPE
        return await self.request_json("GET", path, params=params, headers=headers)

    async def insert(
        self,
        table: str,
        data: dict[str, Any] | list[dict[str, Any]],
        returning: str | None = None,
    ) -> Any:
        path, headers = self._target(table, write=True)
        params, prefer = self._returning(returning, [])
        headers["Prefer"] = prefer
        return await self.request_json("POST", path, params=params, json=data, headers=headers)

    async def upsert(
        self,
        table: str,
        data: dict[str, Any] | list[dict[str, Any]],
        on_conflict: str | None = None,
        returning: str | None = None,
    ) -> Any:
        path, headers = self._target(table, write=True)
        params, prefer = self._returning(returning, ["resolution=merge-duplicates"])
        headers["Prefer"] = prefer
        if on_conflict:
            params.append(("on_conflict", on_conflict))
        return await self.request_json("POST", path, params=params, json=data, headers=headers)

    async def update(
        self,
        table: str,
        data: dict[str, Any],
        filters: Sequence[tuple[str, str, Any]],
        returning: str | None = None,
    ) -> Any:
        if not filters:
            raise ValueError("update requires at least one filter")
        path, headers = self._target(table, write=True)
        params, prefer = self._returning(returning, [])
        headers["Prefer"] = prefer
        params = [*self._filter_params(filters), *params]
        return await self.request_json("PATCH", path, params=params, json=data, headers=headers)

    async def delete(
        self,
        table: str,
        filters: Sequence[tuple[str, str, Any]],
        returning: str | None = None,
    ) -> Any:
        if not filters:
            raise ValueError("delete requires at least one filter")
        path, headers = self._target(table, write=True)
        params, prefer = self._returning(returning, [])
        headers["Prefer"] = prefer
        params = [*self._filter_params(filters), *params]
        return await self.request_json("DELETE", path, params=params, headers=headers)

    # --- rpc ---

    async def rpc(self, function: str, args: dict[str, Any] | None = None) -> Any:
        schema, name = split_table(function)
        headers = {"Content-Profile": schema} if schema else None
        return await self.request_json("POST", f"/rpc/{name}", json=args or {}, headers=headers)

    # --- introspecção ---

    async def list_tables(self, schema: str = "public") -> list[dict[str, Any]]:
        """Tabelas do schema: RPC auxiliar → information_schema → pg_catalog.

        Raises:
            VendorApiError: Nenhuma das estratégias disponível
                (code=INTROSPECTION_UNAVAILABLE).
        """
        try:
            return await self.rpc("get_tables_info", {"target_schema": schema})
        except VendorApiError as exc:
            logger.info(
                "introspection_fallback",
                extra={"step": "get_tables_info", "error_code": exc.code},
            )

        try:
            return await self.select(
                "information_schema.tables",
                columns="table_name,table_schema,table_type",
                filters=[("table_schema", "eq", schema)],
            )
        except VendorApiError as exc:
            logger.info(
                "introspection_fallback",
                extra={"step": "information_schema", "error_code": exc.code},
            )

        try:
            return await self.rpc("pg_catalog_tables", {"schema_name": schema})
        except VendorApiError as exc:
            raise VendorApiError(
                VENDOR,
                "Unable to list tables. Consider creating a helper RPC function.",
                code=INTROSPECTION_UNAVAILABLE,
            ) from exc

    async def describe_table(self, table: str, schema: str = "public") -> list[dict[str, Any]]:
        try:
            return await self.rpc(
                "get_table_columns", {"target_table": table, "target_schema": schema}
            )
        except VendorApiError as exc:
            logger.info(
                "introspection_fallback",
                extra={"step": "get_table_columns", "error_code": exc.code},
            )

        try:
            return await self.select(
                "information_schema.columns",
                columns="column_name,data_type,is_nullable,column_default",
                filters=[("table_name", "eq", table), ("table_schema", "eq", schema)],
                order=("ordinal_position", True, None),
            )
        except VendorApiError as exc:
            raise VendorApiError(
                VENDOR,
                "Unable to describe table. Consider creating a helper RPC function.",
                code=INTROSPECTION_UNAVAILABLE,
            ) from exc

    async def list_functions(self, schema: str = "public") -> list[dict[str, Any]]:
        try:
            return await self.rpc("get_functions_info", {"target_schema": schema})
        except VendorApiError as exc:
            raise VendorApiError(
                VENDOR,
                "Unable to list functions. Consider creating a helper RPC function.",
                code=INTROSPECTION_UNAVAILABLE,
            ) from exc
