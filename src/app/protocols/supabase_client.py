"""Contrato do cliente Supabase usado pelos handlers de ação."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

FilterTuple = tuple[str, str, Any]


class SupabaseClientProtocol(Protocol):
    async def select(
        self,
        table: str,
        *,
        columns: str = "*",
        filters: Sequence[FilterTuple] | None = None,
        order: tuple[str, bool, bool | None] | None = None,
        limit: int | None = None,
        offset: int | None = None,
        single: bool = False,
    ) -> Any: ...

    async def insert(
        self,
        table: str,
        data: dict[str, Any] | list[dict[str, Any]],
        returning: str | None = None,
    ) -> Any: ...

    async def upsert(
        self,
        table: str,
        data: dict[str, Any] | list[dict[str, Any]],
        on_conflict: str | None = None,
        returning: str | None = None,
    ) -> Any: ...

    async def update(
        self,
        table: str,
        data: dict[str, Any],
        filters: Sequence[FilterTuple],
        returning: str | None = None,
    ) -> Any: ...

    async def delete(
        self,
        table: str,
        filters: Sequence[FilterTuple],
        returning: str | None = None,
    ) -> Any: ...

    async def rpc(self, function: str, args: dict[str, Any] | None = None) -> Any: ...

    async def list_tables(self, schema: str = "public") -> list[dict[str, Any]]: ...

    async def describe_table(self, table: str, schema: str = "public") -> list[dict[str, Any]]: ...

    async def list_functions(self, schema: str = "public") -> list[dict[str, Any]]: ...
