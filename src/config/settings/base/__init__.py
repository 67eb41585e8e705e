"""Agregador de settings base.

Re-exporta settings comuns, helpers de parsing e leitura do .env.
"""

from __future__ import annotations

from config.settings.base.core import (
    DEFAULT_MAX_BODY_BYTES,
    DEFAULT_LOG_LEVEL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    LOOPBACK_HOST,
    SkillSettings,
    parse_bool,
    parse_float,
    parse_int,
    parse_log_level,
)
from config.settings.base.env_file import config_dir_for, env_file_for, load_skill_env

__all__ = [
    "DEFAULT_MAX_BODY_BYTES",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
    "LOOPBACK_HOST",
    "SkillSettings",
    "config_dir_for",
    "env_file_for",
    "load_skill_env",
    "parse_bool",
    "parse_float",
    "parse_int",
    "parse_log_level",
]
