"""Testes das settings por skill e da leitura do .env."""

from __future__ import annotations

from pathlib import Path

import pytest

from config.settings import (
    LOOPBACK_HOST,
    env_file_for,
    load_linear_settings,
    load_neon_settings,
    load_notion_settings,
    load_skill_env,
    load_slack_settings,
    load_supabase_settings,
)
from config.settings.base import parse_bool
from utils.errors import ConfigurationError


class TestEnvFile:
    def test_env_file_path_uses_skill_config_dir(self, tmp_path: Path) -> None:
        path = env_file_for("linear", {"SKILL_CONFIG_DIR": str(tmp_path)})
        assert path == tmp_path / "linear-plugin" / ".env"

    def test_reads_file_values(self, tmp_path: Path) -> None:
        env_dir = tmp_path / "notion-plugin"
        env_dir.mkdir()
        (env_dir / ".env").write_text("NOTION_API_KEY=ntn_from_file\nPORT=9300\n")

        values = load_skill_env("notion", {"SKILL_CONFIG_DIR": str(tmp_path)})

        assert values["NOTION_API_KEY"] == "ntn_from_file"
        assert values["PORT"] == "9300"

    def test_process_environment_overrides_file(self, tmp_path: Path) -> None:
        env_dir = tmp_path / "slack-plugin"
        env_dir.mkdir()
        (env_dir / ".env").write_text("SLACK_BOT_TOKEN=xoxb-file\n")

        values = load_skill_env(
            "slack",
            {"SKILL_CONFIG_DIR": str(tmp_path), "SLACK_BOT_TOKEN": "xoxb-env"},
        )

        assert values["SLACK_BOT_TOKEN"] == "xoxb-env"

    def test_missing_file_is_not_an_error(self, tmp_path: Path) -> None:
        values = load_skill_env("neon", {"SKILL_CONFIG_DIR": str(tmp_path)})
        assert "NEON_API_KEY" not in values


class TestLinearSettings:
    def test_defaults(self) -> None:
        settings = load_linear_settings({"LINEAR_API_KEY": "lin_api_abc"})
        assert settings.validate() == []
        assert settings.port == 9226
        assert settings.host == LOOPBACK_HOST
        assert settings.service_name == "linear-skill"
        assert settings.api_url == "https://api.linear.app/graphql"

    def test_missing_key(self) -> None:
        errors = load_linear_settings({}).validate()
        assert errors == ["LINEAR_API_KEY not found in configuration"]

    def test_wrong_prefix(self) -> None:
        errors = load_linear_settings({"LINEAR_API_KEY": "abc"}).validate()
        assert any("lin_api_" in error for error in errors)

    def test_port_override(self) -> None:
        settings = load_linear_settings({"LINEAR_API_KEY": "lin_api_abc", "PORT": "9999"})
        assert settings.port == 9999

    def test_non_numeric_port_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError, match="PORT"):
            load_linear_settings({"PORT": "abc"})

    def test_setup_steps_name_env_file(self) -> None:
        steps = load_linear_settings({}).setup_steps()
        assert any("linear-plugin" in step for step in steps)


class TestNotionSettings:
    @pytest.mark.parametrize("token", ["secret_abc", "ntn_abc"])
    def test_accepts_both_token_prefixes(self, token: str) -> None:
        assert load_notion_settings({"NOTION_API_KEY": token}).validate() == []

    def test_smaller_body_limit(self) -> None:
        settings = load_notion_settings({"NOTION_API_KEY": "ntn_abc"})
        assert settings.max_body_bytes == 10 * 1024
        assert settings.port == 9225


class TestSlackSettings:
    @pytest.mark.parametrize("token", ["xoxb-123", "xoxp-123"])
    def test_accepts_bot_and_user_tokens(self, token: str) -> None:
        assert load_slack_settings({"SLACK_BOT_TOKEN": token}).validate() == []

    def test_rejects_other_tokens(self) -> None:
        errors = load_slack_settings({"SLACK_BOT_TOKEN": "xoxa-123"}).validate()
        assert len(errors) == 1


class TestNeonSettings:
    def test_flags_default_to_false(self) -> None:
        settings = load_neon_settings({"NEON_API_KEY": "napi_abc"})
        assert settings.validate() == []
        assert settings.allow_connection_uri is False
        assert settings.sql_read_only is False

    def test_flags_parse_truthy_values(self) -> None:
        settings = load_neon_settings(
            {"NEON_API_KEY": "napi_abc", "ALLOW_CONNECTION_URI": "true", "NEON_SQL_READ_ONLY": "1"}
        )
        assert settings.allow_connection_uri is True
        assert settings.sql_read_only is True


class TestSupabaseSettings:
    def test_rest_url(self) -> None:
        settings = load_supabase_settings(
            {"SUPABASE_URL": "https://abc.supabase.co/", "SUPABASE_SERVICE_KEY": "eyJ.x.y"}
        )
        assert settings.validate() == []
        assert settings.rest_url == "https://abc.supabase.co/rest/v1"

    def test_reports_every_missing_key(self) -> None:
        errors = load_supabase_settings({}).validate()
        assert "SUPABASE_URL not found in configuration" in errors
        assert "SUPABASE_SERVICE_KEY not found in configuration" in errors

    def test_relative_url_rejected(self) -> None:
        errors = load_supabase_settings(
            {"SUPABASE_URL": "abc.supabase.co", "SUPABASE_SERVICE_KEY": "k"}
        ).validate()
        assert errors == ["SUPABASE_URL must be an absolute http(s) URL"]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), ("YES", True), ("1", True), ("false", False), ("", False), (None, False)],
)
def test_parse_bool(raw: str | None, expected: bool) -> None:
    assert parse_bool(raw) is expected


class TestLogLevel:
    @pytest.mark.parametrize(
        "loader",
        [
            load_linear_settings,
            load_notion_settings,
            load_slack_settings,
            load_neon_settings,
            load_supabase_settings,
        ],
    )
    def test_every_skill_reads_log_level(self, loader) -> None:
        assert loader({"LOG_LEVEL": " debug "}).log_level == "DEBUG"
        assert loader({}).log_level == "INFO"

    def test_invalid_log_level_is_reported_by_validate(self) -> None:
        settings = load_linear_settings({"LINEAR_API_KEY": "lin_api_abc", "LOG_LEVEL": "verbose"})
        errors = settings.validate()
        assert len(errors) == 1
        assert "LOG_LEVEL" in errors[0]
        assert "'VERBOSE'" in errors[0]

    def test_log_level_from_env_file(self, tmp_path: Path) -> None:
        env_dir = tmp_path / "neon-plugin"
        env_dir.mkdir()
        (env_dir / ".env").write_text("NEON_API_KEY=napi_x\nLOG_LEVEL=warning\n")

        values = load_skill_env("neon", {"SKILL_CONFIG_DIR": str(tmp_path)})

        assert load_neon_settings(values).log_level == "WARNING"
