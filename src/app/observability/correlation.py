"""Correlation ID por requisição.

O correlation_id vem do header `X-Correlation-Id` (ou é gerado), fica em
um ContextVar durante a requisição e é injetado em todos os logs pelo
CorrelationIdFilter. A resposta devolve o mesmo header.
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from starlette.requests import Request
    from starlette.responses import Response

CORRELATION_HEADER = "X-Correlation-Id"

# Aceita apenas IDs curtos e seguros para log
_VALID_CORRELATION_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Valores ausentes ou fora do formato são substituídos por um UUID novo.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    if correlation_id and _VALID_CORRELATION_ID.match(correlation_id):
        value = correlation_id
    else:
        value = str(uuid.uuid4())
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


async def correlation_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Middleware HTTP: define correlation_id durante a requisição."""
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)
