"""Endpoints de informação e health check do proxy."""

from __future__ import annotations

from fastapi import APIRouter, Request

from app import __version__

router = APIRouter()

ENDPOINTS = ["GET /", "GET /health", "GET /categories", "POST /action"]


@router.get("/")
async def service_info(request: Request) -> dict[str, object]:
    """Nome, versão e endpoints do proxy."""
    return {
        "name": f"{request.app.state.skill}-skill",
        "version": __version__,
        "status": "running",
        "endpoints": ENDPOINTS,
    }


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness do processo: sem dependências externas, sempre idempotente."""
    return {"status": "ok"}


@router.get("/categories")
async def list_categories(request: Request) -> dict[str, object]:
    """Categorias e ações aceitas pelo POST /action."""
    return {"categories": request.app.state.action_router.catalog()}
