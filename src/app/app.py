"""Entrypoint dos proxies de skill.

Cada proxy é um app FastAPI que escuta apenas em 127.0.0.1 e traduz o
envelope `{category, action, params}` em chamadas a um fornecedor.

Uso:
    linear-skill                 # console script por skill
    skill-proxy notion           # launcher genérico
    PORT=9300 slack-skill        # porta alternativa
"""

from __future__ import annotations

import argparse
import sys
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI

from api.routes import create_api_router
from app import __version__
from app.bootstrap import (
    SKILLS,
    create_action_router,
    get_skill,
    initialize_app,
    load_validated_settings,
)
from app.observability import correlation_middleware
from config.logging import get_logger
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Sequence

    from config.settings import SkillSettings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida do proxy.

    Shutdown fecha o cliente do fornecedor (pool HTTP).
    """
    logger.info("app_starting", extra={"skill": app.state.skill, "port": app.state.settings.port})

    yield

    logger.info("app_shutting_down", extra={"skill": app.state.skill})
    close = getattr(app.state.action_router.client, "aclose", None)
    if callable(close):
        await close()


def create_app(
    skill: str,
    settings: SkillSettings | None = None,
    client: Any | None = None,
) -> FastAPI:
    """Cria e configura o app FastAPI de um skill.

    Args:
        skill: Nome do skill (linear, notion, slack, neon, supabase).
        settings: Settings já validadas (default: carregadas do .env).
        client: Cliente do fornecedor injetado (default: criado das settings).

    Raises:
        ConfigurationError: Settings ausentes ou inválidas.
    """
    definition = get_skill(skill)
    if settings is None:
        settings = load_validated_settings(skill)

    fastapi_app = FastAPI(
        title=settings.service_name,
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    fastapi_app.state.skill = skill
    fastapi_app.state.settings = settings
    fastapi_app.state.action_router = create_action_router(definition, settings, client)
    fastapi_app.state.sanitizer = definition.build_sanitizer()

    fastapi_app.middleware("http")(correlation_middleware)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"skill": skill})
    return fastapi_app


def run(skill: str) -> int:
    """Valida configuração e sobe o servidor; devolve o exit code."""
    import uvicorn

    try:
        settings = load_validated_settings(skill)
    except ConfigurationError as exc:
        print(f"{skill}-skill: configuration error: {exc}", file=sys.stderr)
        for step in exc.remediation:
            print(step, file=sys.stderr)
        return 1

    initialize_app(settings)
    uvicorn.run(
        create_app(skill, settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Launcher genérico: `skill-proxy <skill>`."""
    parser = argparse.ArgumentParser(prog="skill-proxy", description="Local SaaS skill proxy")
    parser.add_argument("skill", choices=sorted(SKILLS))
    args = parser.parse_args(argv)
    sys.exit(run(args.skill))


def linear_main() -> None:
    sys.exit(run("linear"))


def notion_main() -> None:
    sys.exit(run("notion"))


def slack_main() -> None:
    sys.exit(run("slack"))


def neon_main() -> None:
    sys.exit(run("neon"))


def supabase_main() -> None:
    sys.exit(run("supabase"))


if __name__ == "__main__":
    main()
