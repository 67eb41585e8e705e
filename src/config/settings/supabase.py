"""Settings do skill Supabase (PostgREST)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar
from urllib.parse import urlparse

from config.settings.base import (
    DEFAULT_MAX_BODY_BYTES,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    SkillSettings,
    env_file_for,
    parse_float,
    parse_int,
    parse_log_level,
)


@dataclass(frozen=True)
class SupabaseSettings(SkillSettings):
    """Configurações do proxy Supabase.

    Attributes:
        url: URL do projeto (https://xxxxx.supabase.co)
        service_key: Chave service_role (JWT)
    """

    skill: ClassVar[str] = "supabase"
    default_port: ClassVar[int] = 9227

    url: str = ""
    service_key: str = ""

    @property
    def rest_url(self) -> str:
        """URL base do PostgREST."""
        return f"{self.url.rstrip('/')}/rest/v1"

    def validate(self) -> list[str]:
        errors = super().validate()
        if not self.url:
            errors.append("SUPABASE_URL not found in configuration")
        else:
            parsed = urlparse(self.url)
            if parsed.scheme not in ("https", "http") or not parsed.netloc:
                errors.append("SUPABASE_URL must be an absolute http(s) URL")
        if not self.service_key:
            errors.append("SUPABASE_SERVICE_KEY not found in configuration")
        return errors

    def setup_steps(self) -> list[str]:
        env_file = env_file_for(self.skill)
        return [
            f"1. Create config directory: mkdir -p {env_file.parent}",
            "2. Copy the project URL and service_role key from Project Settings > API",
            f"3. Create {env_file} with:",
            "   SUPABASE_URL=https://xxxxx.supabase.co",
            "   SUPABASE_SERVICE_KEY=eyJhbG...",
        ]


def load_supabase_settings(values: Mapping[str, str]) -> SupabaseSettings:
    """Monta SupabaseSettings a partir de um mapping chave→valor."""
    return SupabaseSettings(
        port=parse_int(values, "PORT", SupabaseSettings.default_port),
        max_body_bytes=parse_int(values, "MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES),
        request_timeout_seconds=parse_float(
            values, "REQUEST_TIMEOUT_SECONDS", DEFAULT_REQUEST_TIMEOUT_SECONDS
        ),
        log_level=parse_log_level(values),
        url=values.get("SUPABASE_URL", "").strip(),
        service_key=values.get("SUPABASE_SERVICE_KEY", "").strip(),
    )
