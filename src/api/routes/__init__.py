"""Rotas HTTP do proxy.

- health/: GET /, GET /health, GET /categories (sem dependência do fornecedor)
- action/: POST /action (envelope → dispatch → resposta normalizada)
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
