"""Observabilidade — correlation_id por requisição.

Uso:
    from app.observability import get_correlation_id, correlation_middleware
"""

from app.observability.correlation import (
    CORRELATION_HEADER,
    correlation_middleware,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

__all__ = [
    "CORRELATION_HEADER",
    "correlation_middleware",
    "get_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]
