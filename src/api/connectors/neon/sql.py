"""Execução de SQL na Neon via asyncpg.

Uma conexão por chamada, fechada ao final; nenhum pool é mantido entre
requisições.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

import asyncpg

from api.connectors.neon.errors import from_postgres_error

logger = logging.getLogger(__name__)

Connect = Callable[..., Awaitable[Any]]

EXPLAIN_TEMPLATE = "EXPLAIN (ANALYZE, FORMAT TEXT) SELECT * FROM ({query}) AS _explain_subq"

LIST_TABLES_SQL = """
SELECT table_name, table_schema, table_type
FROM information_schema.tables
WHERE table_schema = $1
ORDER BY table_name
"""

DESCRIBE_TABLE_SQL = """
SELECT column_name, data_type, is_nullable, column_default
FROM information_schema.columns
WHERE table_schema = $1 AND table_name = $2
ORDER BY ordinal_position
"""


def _row_count(status: str | None, fetched: int) -> int:
    """Extrai a contagem do status do comando ("INSERT 0 3" → 3)."""
    if status:
        last = status.rsplit(" ", 1)[-1]
        if last.isdigit():
            return int(last)
    return fetched


class SqlRunner:
    """Executa consultas parametrizadas ($1, $2…) numa connection URI.

    Args:
        connect: Fábrica de conexão (padrão: asyncpg.connect).
        timeout_seconds: Timeout de conexão.
    """

    def __init__(self, connect: Connect | None = None, timeout_seconds: float = 30.0) -> None:
        self._connect = connect or asyncpg.connect
        self._timeout_seconds = timeout_seconds

    async def run(self, uri: str, query: str, params: list[Any] | None = None) -> dict[str, Any]:
        """Executa a consulta e devolve `{rows, rowCount, fields}`.

        Raises:
            VendorApiError: Erro reportado pelo Postgres (SQLSTATE em `code`).
        """
        connection = await self._connect(dsn=uri, timeout=self._timeout_seconds)
        try:
            statement = await connection.prepare(query)
            records = await statement.fetch(*(params or []))
            fields = [
                {"name": attribute.name, "dataTypeID": attribute.type.oid}
                for attribute in statement.get_attributes()
            ]
            status = statement.get_statusmsg()
        except asyncpg.PostgresError as exc:
            logger.warning(
                "sql_statement_failed", extra={"sqlstate": getattr(exc, "sqlstate", None)}
            )
            raise from_postgres_error(exc) from exc
        finally:
            await connection.close()

        rows = [dict(record) for record in records]
        return {"rows": rows, "rowCount": _row_count(status, len(rows)), "fields": fields}

    async def explain(self, uri: str, query: str) -> str:
        result = await self.run(uri, EXPLAIN_TEMPLATE.format(query=query))
        return "\n".join(str(next(iter(row.values()), "")) for row in result["rows"])

    async def list_tables(self, uri: str, schema: str = "public") -> list[dict[str, Any]]:
        return (await self.run(uri, LIST_TABLES_SQL, [schema]))["rows"]

    async def describe_table(
        self, uri: str, table_name: str, schema: str = "public"
    ) -> list[dict[str, Any]]:
        return (await self.run(uri, DESCRIBE_TABLE_SQL, [schema, table_name]))["rows"]
