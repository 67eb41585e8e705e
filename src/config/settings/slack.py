"""Settings do skill Slack (Web API)."""

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

SLACK_API_BASE_URL: str = "https://slack.com/api"
# Bot token (xoxb-) ou user token (xoxp-)
SLACK_TOKEN_PREFIXES: tuple[str, ...] = ("xoxb-", "xoxp-")


@dataclass(frozen=True)
class SlackSettings(SkillSettings):
    """Configurações do proxy Slack.

    Attributes:
        bot_token: Token OAuth (xoxb- ou xoxp-)
        api_base_url: URL base da Web API
    """

    skill: ClassVar[str] = "slack"
    default_port: ClassVar[int] = 9228

    bot_token: str = ""
    api_base_url: str = SLACK_API_BASE_URL

    def validate(self) -> list[str]:
        errors = super().validate()
        if not self.bot_token:
            errors.append("SLACK_BOT_TOKEN not found in configuration")
        elif not self.bot_token.startswith(SLACK_TOKEN_PREFIXES):
            errors.append("Invalid token format. Must start with 'xoxb-' or 'xoxp-'")
        return errors

    def setup_steps(self) -> list[str]:
        env_file = env_file_for(self.skill)
        return [
            f"1. Create config directory: mkdir -p {env_file.parent}",
            "2. Create a Slack app at https://api.slack.com/apps",
            "3. Add the required OAuth scopes and install the app to your workspace",
            "4. Copy the OAuth token",
            f"5. Create config: echo 'SLACK_BOT_TOKEN=xoxb-...' > {env_file}",
        ]


def load_slack_settings(values: Mapping[str, str]) -> SlackSettings:
    """Monta SlackSettings a partir de um mapping chave→valor."""
    return SlackSettings(
        port=parse_int(values, "PORT", SlackSettings.default_port),
        max_body_bytes=parse_int(values, "MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES),
        request_timeout_seconds=parse_float(
            values, "REQUEST_TIMEOUT_SECONDS", DEFAULT_REQUEST_TIMEOUT_SECONDS
        ),
        log_level=parse_log_level(values),
        bot_token=values.get("SLACK_BOT_TOKEN", "").strip(),
    )
