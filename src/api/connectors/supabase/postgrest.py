"""Codificação de filtros, ordenação e perfis no formato do PostgREST.

Exemplos:
    >>> encode_filter("status", "eq", "open")
    ('status', 'eq.open')
    >>> encode_filter("id", "in", [1, 2])
    ('id', 'in.(1,2)')
"""

from __future__ import annotations

import json
from typing import Any

_OPERATORS = {
    "eq": "eq",
    "neq": "neq",
    "gt": "gt",
    "gte": "gte",
    "lt": "lt",
    "lte": "lte",
    "like": "like",
    "ilike": "ilike",
    "is": "is",
    "in": "in",
    "contains": "cs",
    "containedBy": "cd",
    "overlaps": "ov",
}

# caracteres reservados dentro de listas PostgREST
_RESERVED = set(',()"{}:')


def _scalar(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _list_item(value: Any) -> str:
    text = _scalar(value)
    if any(char in _RESERVED for char in text) or text != text.strip():
        escaped = text.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return text


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def encode_filter(column: str, op: str, value: Any) -> tuple[str, str]:
    """Converte uma condição em par de query string (coluna, operador.valor).

    Raises:
        ValueError: Operador desconhecido.
    """
    operator = _OPERATORS.get(op)
    if operator is None:
        raise ValueError(f"Unknown filter operator: {op}")

    if op == "in":
        items = ",".join(_list_item(item) for item in _as_list(value))
        return column, f"in.({items})"
    if op in ("contains", "containedBy", "overlaps"):
        if isinstance(value, dict):
            return column, f"{operator}.{json.dumps(value, separators=(',', ':'))}"
        if isinstance(value, (list, tuple)):
            items = ",".join(_list_item(item) for item in value)
            return column, f"{operator}.{{{items}}}"
        return column, f"{operator}.{_scalar(value)}"
    return column, f"{operator}.{_scalar(value)}"


def encode_order(column: str, ascending: bool = True, nulls_first: bool | None = None) -> str:
    """Valor do parâmetro `order` (ex: `created_at.desc.nullslast`)."""
    parts = [column, "asc" if ascending else "desc"]
    if nulls_first is not None:
        parts.append("nullsfirst" if nulls_first else "nullslast")
    return ".".join(parts)


def split_table(table: str) -> tuple[str | None, str]:
    """`schema.tabela` → (schema, tabela); sem prefixo → (None, tabela)."""
    if "." in table:
        schema, name = table.split(".", 1)
        return schema, name
    return None, table
