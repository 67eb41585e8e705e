"""Agregador de rotas do proxy.

Todos os proxies expõem a mesma superfície; o que muda entre skills é o
estado em `app.state` (settings, action_router, sanitizer).
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.action.router import router as action_router
from api.routes.health.router import router as health_router

# (router, tag) na ordem de registro
_ROUTERS = (
    (health_router, "health"),
    (action_router, "action"),
)


def create_api_router() -> APIRouter:
    """Router principal: GET /, /health, /categories e POST /action."""
    api_router = APIRouter()
    for router, tag in _ROUTERS:
        api_router.include_router(router, tags=[tag])
    return api_router
