"""Use cases do proxy Slack."""

from app.use_cases.slack.actions import SLACK_ACTIONS

__all__ = ["SLACK_ACTIONS"]
