"""Bootstrap dos proxies — inicialização e wiring.

Este módulo é o composition root: carrega e valida settings, configura
logging e conecta o cliente do fornecedor à tabela de ações.

Uso:
    from app.bootstrap import initialize_app, load_validated_settings

    settings = load_validated_settings("linear")
    initialize_app(settings)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from app.bootstrap.skills import SKILLS, SkillDefinition, get_skill
from app.dispatch import ActionRouter
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import SkillSettings, load_skill_env
from utils.errors import ConfigurationError

logger = logging.getLogger(__name__)


def initialize_app(settings: SkillSettings, log_level: str | None = None) -> None:
    """Configura logging JSON com correlation_id para o proxy.

    Deve ser chamada uma vez, antes de subir o servidor.
    """
    configure_logging(
        level=log_level or settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def load_validated_settings(
    skill: str, environ: Mapping[str, str] | None = None
) -> SkillSettings:
    """Carrega settings do skill e falha rápido se inválidas.

    Args:
        skill: Nome do skill.
        environ: Ambiente alternativo (default: os.environ).

    Raises:
        ConfigurationError: Chave obrigatória ausente ou malformada; carrega
            os passos de criação do arquivo de configuração.
    """
    definition = get_skill(skill)
    settings = definition.load_settings(load_skill_env(skill, environ))
    errors = settings.validate()
    if not errors:
        logger.info("settings_validated", extra={"component": "bootstrap", "skill": skill})
        return settings

    logger.warning(
        "settings_validation_failed",
        extra={"component": "bootstrap", "skill": skill, "error_count": len(errors)},
    )
    raise ConfigurationError("; ".join(errors), remediation=settings.setup_steps())


def create_action_router(
    definition: SkillDefinition,
    settings: SkillSettings,
    client: Any | None = None,
) -> ActionRouter[Any]:
    """Monta o router com o cliente injetado (ou criado a partir das settings)."""
    if client is None:
        client = definition.create_client(settings)
    return ActionRouter(definition.name, definition.build_actions(settings), client)


__all__ = [
    "SKILLS",
    "SkillDefinition",
    "create_action_router",
    "get_skill",
    "initialize_app",
    "load_validated_settings",
]
