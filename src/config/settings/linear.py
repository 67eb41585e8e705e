"""Settings do skill Linear (GraphQL API)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar

from config.settings.base import (
    DEFAULT_MAX_BODY_BYTES,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    SkillSettings,
    env_file_for,
    parse_float,
    parse_int,
    parse_log_level,
)

LINEAR_GRAPHQL_URL: str = "https://api.linear.app/graphql"
LINEAR_API_KEY_PREFIX: str = "lin_api_"


@dataclass(frozen=True)
class LinearSettings(SkillSettings):
    """Configurações do proxy Linear.

    Attributes:
        api_key: Personal API key (prefixo lin_api_)
        api_url: Endpoint GraphQL
    """

    skill: ClassVar[str] = "linear"
    default_port: ClassVar[int] = 9226

    api_key: str = ""
    api_url: str = LINEAR_GRAPHQL_URL

    def validate(self) -> list[str]:
        errors = super().validate()
        if not self.api_key:
            errors.append("LINEAR_API_KEY not found in configuration")
        elif not self.api_key.startswith(LINEAR_API_KEY_PREFIX):
            errors.append("Invalid API key format. Linear API keys start with 'lin_api_'")
        return errors

    def setup_steps(self) -> list[str]:
        env_file = env_file_for(self.skill)
        return [
            f"1. Create config directory: mkdir -p {env_file.parent}",
            "2. Get your API key from Linear: Settings > Account > Security & Access > API",
            f"3. Create config: echo 'LINEAR_API_KEY=lin_api_...' > {env_file}",
        ]


def load_linear_settings(values: Mapping[str, str]) -> LinearSettings:
    """Monta LinearSettings a partir de um mapping chave→valor."""
    return LinearSettings(
        port=parse_int(values, "PORT", LinearSettings.default_port),
        max_body_bytes=parse_int(values, "MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES),
        request_timeout_seconds=parse_float(
            values, "REQUEST_TIMEOUT_SECONDS", DEFAULT_REQUEST_TIMEOUT_SECONDS
        ),
        log_level=parse_log_level(values),
        api_key=values.get("LINEAR_API_KEY", "").strip(),
        api_url=values.get("LINEAR_API_URL", "") or LINEAR_GRAPHQL_URL,
    )
