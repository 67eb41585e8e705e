"""Settings do skill Neon (Management API + SQL via asyncpg)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar

from config.settings.base import (
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    SkillSettings,
    env_file_for,
    parse_bool,
    parse_float,
    parse_int,
    parse_log_level,
)

NEON_API_BASE_URL: str = "https://console.neon.tech/api/v2"
NEON_API_KEY_PREFIX: str = "napi_"
NEON_MAX_BODY_BYTES = 10 * 1024


@dataclass(frozen=True)
class NeonSettings(SkillSettings):
    """Configurações do proxy Neon.

    Attributes:
        api_key: Organization API key (prefixo napi_)
        api_base_url: URL base da Management API
        allow_connection_uri: Expõe a connection URI completa (com senha)
        sql_read_only: Aplica o classificador SELECT/WITH também em sql.run
    """

    skill: ClassVar[str] = "neon"
    default_port: ClassVar[int] = 9224

    max_body_bytes: int = NEON_MAX_BODY_BYTES
    api_key: str = ""
    api_base_url: str = NEON_API_BASE_URL
    allow_connection_uri: bool = False
    sql_read_only: bool = False

    def validate(self) -> list[str]:
        errors = super().validate()
        if not self.api_key:
            errors.append("NEON_API_KEY not found in configuration")
        elif not self.api_key.startswith(NEON_API_KEY_PREFIX):
            errors.append("Invalid API key format. Must start with 'napi_'")
        return errors

    def setup_steps(self) -> list[str]:
        env_file = env_file_for(self.skill)
        return [
            f"1. Create config directory: mkdir -p {env_file.parent}",
            "2. Get Organization API key from: https://console.neon.tech",
            "   (Organization Settings > API keys > Create new)",
            f"3. Create config: echo 'NEON_API_KEY=your_key' > {env_file}",
        ]


def load_neon_settings(values: Mapping[str, str]) -> NeonSettings:
    """Monta NeonSettings a partir de um mapping chave→valor."""
    return NeonSettings(
        port=parse_int(values, "PORT", NeonSettings.default_port),
        max_body_bytes=parse_int(values, "MAX_BODY_BYTES", NEON_MAX_BODY_BYTES),
        request_timeout_seconds=parse_float(
            values, "REQUEST_TIMEOUT_SECONDS", DEFAULT_REQUEST_TIMEOUT_SECONDS
        ),
        log_level=parse_log_level(values),
        api_key=values.get("NEON_API_KEY", "").strip(),
        allow_connection_uri=parse_bool(values.get("ALLOW_CONNECTION_URI")),
        sql_read_only=parse_bool(values.get("NEON_SQL_READ_ONLY")),
    )
