"""Conector Slack (Web API)."""

from api.connectors.slack.client import SlackClient
from api.connectors.slack.errors import SLACK_ERROR_MAP, build_slack_sanitizer, parse_slack_error

__all__ = ["SLACK_ERROR_MAP", "SlackClient", "build_slack_sanitizer", "parse_slack_error"]
