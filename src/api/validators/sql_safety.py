"""Classificador heurístico de consultas somente leitura.

ATENÇÃO: não é um parser SQL nem uma fronteira de segurança. É uma
triagem best-effort por palavras-chave:

- rejeita SELECTs benignos que citem, por exemplo, uma coluna `update`
  ou a palavra "delete" dentro de um literal;
- pode, em princípio, aceitar entradas construídas para contorná-lo.

Permissões reais devem vir do papel (role) do banco.
"""

from __future__ import annotations

import re

MUTATION_KEYWORDS: tuple[str, ...] = (
    "INSERT",
    "UPDATE",
    "DELETE",
    "DROP",
    "TRUNCATE",
    "ALTER",
    "CREATE",
    "GRANT",
    "REVOKE",
    "EXECUTE",
)

_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_LINE_COMMENT = re.compile(r"--[^\n\r]*")
_MUTATION_PATTERN = re.compile(
    r"\b(?:" + "|".join(MUTATION_KEYWORDS) + r")\b",
    re.IGNORECASE,
)


def strip_sql_comments(query: str) -> str:
    """Remove comentários `/* … */` e `-- …`."""
    without_blocks = _BLOCK_COMMENT.sub(" ", query)
    return _LINE_COMMENT.sub(" ", without_blocks)


def is_select_query(query: str) -> bool:
    """Retorna True se a consulta parece um SELECT/WITH único e sem mutação."""
    stripped = strip_sql_comments(query)
    normalized = stripped.strip().upper()

    if not normalized.startswith(("SELECT", "WITH")):
        return False

    # bloqueia empilhamento de comandos
    if ";" in stripped:
        return False

    return _MUTATION_PATTERN.search(stripped) is None
