"""Agregador de settings dos proxies.

Re-exporta settings base e de cada skill.
Um arquivo por fornecedor para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.base import (
    LOOPBACK_HOST,
    SkillSettings,
    env_file_for,
    load_skill_env,
)
from config.settings.linear import LinearSettings, load_linear_settings
from config.settings.neon import NeonSettings, load_neon_settings
from config.settings.notion import NotionSettings, load_notion_settings
from config.settings.slack import SlackSettings, load_slack_settings
from config.settings.supabase import SupabaseSettings, load_supabase_settings

__all__ = [
    "LOOPBACK_HOST",
    "LinearSettings",
    "NeonSettings",
    "NotionSettings",
    "SkillSettings",
    "SlackSettings",
    "SupabaseSettings",
    "env_file_for",
    "load_linear_settings",
    "load_neon_settings",
    "load_notion_settings",
    "load_skill_env",
    "load_slack_settings",
    "load_supabase_settings",
]
