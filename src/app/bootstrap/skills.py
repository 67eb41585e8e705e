"""Registro dos skills — wiring de settings, cliente, ações e sanitizer.

Composition root: único ponto do app que conhece os connectors concretos.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from api.connectors.linear import LinearClient, build_linear_sanitizer
from api.connectors.neon import NeonClient, build_neon_sanitizer
from api.connectors.notion import NotionClient, build_notion_sanitizer
from api.connectors.slack import SlackClient, build_slack_sanitizer
from api.connectors.supabase import SupabaseClient, build_supabase_sanitizer
from api.errors import ErrorSanitizer
from app.dispatch import ActionTable
from app.use_cases.linear import LINEAR_ACTIONS
from app.use_cases.neon import build_neon_actions
from app.use_cases.notion import NOTION_ACTIONS
from app.use_cases.slack import SLACK_ACTIONS
from app.use_cases.supabase import SUPABASE_ACTIONS
from config.settings import (
    NeonSettings,
    SkillSettings,
    load_linear_settings,
    load_neon_settings,
    load_notion_settings,
    load_slack_settings,
    load_supabase_settings,
)


@dataclass(frozen=True, slots=True)
class SkillDefinition:
    """Peças que compõem um proxy.

    Attributes:
        name: Nome do skill (usado no .env, nos logs e no nome do serviço).
        load_settings: Monta settings a partir do mapping chave→valor.
        create_client: Constrói o cliente de vida longa do fornecedor.
        build_actions: Monta a tabela de ações (pode depender das settings).
        build_sanitizer: Constrói o sanitizer de erros do fornecedor.
    """

    name: str
    load_settings: Callable[[Mapping[str, str]], SkillSettings]
    create_client: Callable[[Any], Any]
    build_actions: Callable[[Any], ActionTable]
    build_sanitizer: Callable[[], ErrorSanitizer]


def _neon_actions(settings: NeonSettings) -> ActionTable:
    return build_neon_actions(
        allow_connection_uri=settings.allow_connection_uri,
        sql_read_only=settings.sql_read_only,
    )


SKILLS: dict[str, SkillDefinition] = {
    "linear": SkillDefinition(
        name="linear",
        load_settings=load_linear_settings,
        create_client=LinearClient.from_settings,
        build_actions=lambda _settings: LINEAR_ACTIONS,
        build_sanitizer=build_linear_sanitizer,
    ),
    "notion": SkillDefinition(
        name="notion",
        load_settings=load_notion_settings,
        create_client=NotionClient.from_settings,
        build_actions=lambda _settings: NOTION_ACTIONS,
        build_sanitizer=build_notion_sanitizer,
    ),
    "slack": SkillDefinition(
        name="slack",
        load_settings=load_slack_settings,
        create_client=SlackClient.from_settings,
        build_actions=lambda _settings: SLACK_ACTIONS,
        build_sanitizer=build_slack_sanitizer,
    ),
    "neon": SkillDefinition(
        name="neon",
        load_settings=load_neon_settings,
        create_client=NeonClient.from_settings,
        build_actions=_neon_actions,
        build_sanitizer=build_neon_sanitizer,
    ),
    "supabase": SkillDefinition(
        name="supabase",
        load_settings=load_supabase_settings,
        create_client=SupabaseClient.from_settings,
        build_actions=lambda _settings: SUPABASE_ACTIONS,
        build_sanitizer=build_supabase_sanitizer,
    ),
}


def get_skill(name: str) -> SkillDefinition:
    """Retorna a definição do skill.

    Raises:
        KeyError: Skill não registrado.
    """
    try:
        return SKILLS[name]
    except KeyError:
        raise KeyError(f"Unknown skill: {name}. Available: {', '.join(SKILLS)}") from None
