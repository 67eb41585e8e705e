"""Endpoint POST /action — envelope genérico de ação.

Fluxo:
1. Limite de tamanho do corpo (413)
2. JSON válido e envelope `{category, action, params}` (400)
3. Dispatch: categoria/ação conhecidas e params válidos (400)
4. Chamada ao fornecedor; erro → sanitizer (status e mensagem seguros)

Nenhum parâmetro ou payload do fornecedor é logado.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from api.validators import parse_envelope
from utils.errors import MalformedRequestError

logger = logging.getLogger(__name__)

router = APIRouter()


def success_response(data: Any) -> JSONResponse:
    return JSONResponse(
        content=jsonable_encoder({"success": True, "data": data}),
        status_code=status.HTTP_200_OK,
    )


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        content={"success": False, "error": message},
        status_code=status_code,
    )


async def read_json_body(request: Request, max_body_bytes: int) -> Any:
    """Lê e decodifica o corpo respeitando o limite configurado.

    Raises:
        MalformedRequestError: Corpo grande demais (413) ou JSON inválido (400).
    """
    too_large = MalformedRequestError(
        f"Request body exceeds {max_body_bytes} bytes",
        status_code=status.HTTP_413_CONTENT_TOO_LARGE,
    )
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > max_body_bytes:
        raise too_large

    # Sem Content-Length (chunked): interrompe a leitura ao passar do limite
    raw_body = bytearray()
    async for chunk in request.stream():
        raw_body.extend(chunk)
        if len(raw_body) > max_body_bytes:
            raise too_large
    if not raw_body:
        raise MalformedRequestError("Request body is empty")

    try:
        return json.loads(raw_body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedRequestError("Request body is not valid JSON") from exc


@router.post("/action", response_model=None)
async def run_action(request: Request) -> JSONResponse:
    """Executa uma ação no fornecedor.

    Returns:
        200 `{success: true, data}` ou 4xx/5xx `{success: false, error}`.
    """
    state = request.app.state
    started_at = time.perf_counter()
    category: str | None = None
    action: str | None = None

    try:
        body = await read_json_body(request, state.settings.max_body_bytes)
        envelope = parse_envelope(body)
        category, action = envelope.category, envelope.action
        data = await state.action_router.dispatch(category, action, envelope.params)
        # jsonable_encoder também pode falhar (ex: bytes que não são UTF-8)
        response = success_response(data)
    except Exception as exc:
        sanitized = state.sanitizer.sanitize(exc)
        logger.warning(
            "action_failed",
            extra={
                "skill": state.skill,
                "category": category,
                "action": action,
                "status_code": sanitized.status,
                "error_type": type(exc).__name__,
                "latency_ms": round((time.perf_counter() - started_at) * 1000, 2),
            },
        )
        return error_response(sanitized.message, sanitized.status)

    logger.info(
        "action_completed",
        extra={
            "skill": state.skill,
            "category": category,
            "action": action,
            "latency_ms": round((time.perf_counter() - started_at) * 1000, 2),
        },
    )
    return response
