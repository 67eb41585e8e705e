"""Settings do skill Notion (REST API)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar

from config.settings.base import (
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    SkillSettings,
    env_file_for,
    parse_float,
    parse_int,
    parse_log_level,
)

NOTION_API_BASE_URL: str = "https://api.notion.com/v1"
NOTION_API_VERSION: str = "2022-06-28"
# Tokens internos antigos usam secret_, os emitidos a partir de 2024 usam ntn_
NOTION_TOKEN_PREFIXES: tuple[str, ...] = ("secret_", "ntn_")

NOTION_MAX_BODY_BYTES = 10 * 1024


@dataclass(frozen=True)
class NotionSettings(SkillSettings):
    """Configurações do proxy Notion.

    Attributes:
        api_key: Internal Integration Token
        api_base_url: URL base da API REST
        api_version: Valor do header Notion-Version
    """

    skill: ClassVar[str] = "notion"
    default_port: ClassVar[int] = 9225

    max_body_bytes: int = NOTION_MAX_BODY_BYTES
    api_key: str = ""
    api_base_url: str = NOTION_API_BASE_URL
    api_version: str = NOTION_API_VERSION

    def validate(self) -> list[str]:
        errors = super().validate()
        if not self.api_key:
            errors.append("NOTION_API_KEY not found in configuration")
        elif not self.api_key.startswith(NOTION_TOKEN_PREFIXES):
            errors.append(
                "Invalid API key format. Notion integration tokens start with 'secret_' or 'ntn_'"
            )
        return errors

    def setup_steps(self) -> list[str]:
        env_file = env_file_for(self.skill)
        return [
            f"1. Create config directory: mkdir -p {env_file.parent}",
            "2. Create a Notion integration at: https://www.notion.so/my-integrations",
            "3. Copy the Internal Integration Token",
            f"4. Create config: echo 'NOTION_API_KEY=secret_...' > {env_file}",
            "5. Share pages/databases with your integration in Notion",
        ]


def load_notion_settings(values: Mapping[str, str]) -> NotionSettings:
    """Monta NotionSettings a partir de um mapping chave→valor."""
    return NotionSettings(
        port=parse_int(values, "PORT", NotionSettings.default_port),
        max_body_bytes=parse_int(values, "MAX_BODY_BYTES", NOTION_MAX_BODY_BYTES),
        request_timeout_seconds=parse_float(
            values, "REQUEST_TIMEOUT_SECONDS", DEFAULT_REQUEST_TIMEOUT_SECONDS
        ),
        log_level=parse_log_level(values),
        api_key=values.get("NOTION_API_KEY", "").strip(),
        api_version=values.get("NOTION_API_VERSION", "") or NOTION_API_VERSION,
    )
