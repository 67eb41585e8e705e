"""Erros e helpers de parsing para a Slack Web API.

A Web API responde 200 com `{ok: false, error: "<code>"}`; o código é a
fonte principal de classificação.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any

from api.errors import ErrorRule, ErrorSanitizer, standard_rules
from utils.errors import VendorApiError

VENDOR = "slack"

# código Slack → (status, mensagem fixa)
SLACK_ERROR_MAP: dict[str, tuple[int, str]] = {
    "invalid_auth": (401, "Invalid bot token. Check SLACK_BOT_TOKEN."),
    "token_revoked": (401, "Bot token has been revoked."),
    "not_authed": (401, "No authentication token provided."),
    "account_inactive": (401, "Bot account is inactive."),
    "channel_not_found": (404, "Channel not found or bot lacks access."),
    "user_not_found": (404, "User not found."),
    "users_not_found": (404, "User not found."),
    "message_not_found": (404, "Message not found."),
    "thread_not_found": (404, "Message not found."),
    "file_not_found": (404, "File not found."),
    "not_in_channel": (403, "Bot is not a member of this channel."),
    "is_archived": (403, "Channel is archived."),
    "cant_archive_general": (403, "Cannot archive the general channel."),
    "restricted_action": (403, "Action restricted by workspace settings."),
    "missing_scope": (403, "Bot token lacks required scope for this action."),
    "user_is_restricted": (403, "User is restricted from this action."),
    "cant_delete_message": (403, "Cannot delete this message."),
    "edit_window_closed": (403, "Message edit window has closed."),
    "ratelimited": (429, "Rate limited. Try again later."),
    "already_reacted": (400, "Already added this reaction."),
    "no_reaction": (400, "Reaction does not exist on this message."),
    "name_taken": (400, "Channel name already exists."),
    "invalid_name": (400, "Invalid channel name."),
    "invalid_name_maxlength": (400, "Channel name too long (max 80 chars)."),
    "msg_too_long": (400, "Message text too long (max 40,000 chars)."),
    "no_text": (400, "Message text is required."),
    "too_many_attachments": (400, "Too many attachments."),
    "invalid_ts_latest": (400, "Invalid latest timestamp."),
    "invalid_ts_oldest": (400, "Invalid oldest timestamp."),
}


def parse_slack_error(status_code: int | None, payload: dict[str, Any]) -> VendorApiError | None:
    """Extrai o código de erro de uma resposta Slack.

    Returns:
        VendorApiError se `ok` for falso, None se sucesso
    """
    if payload.get("ok") is True:
        return None
    code = payload.get("error") if isinstance(payload.get("error"), str) else None
    if code is None and status_code is not None and status_code < 400:
        return None
    return VendorApiError(
        VENDOR,
        f"Slack API error: {code or 'unknown_error'}",
        status_code=status_code,
        code=code,
    )


def _code_rules() -> tuple[ErrorRule, ...]:
    grouped: dict[tuple[int, str], set[str]] = defaultdict(set)
    for code, outcome in SLACK_ERROR_MAP.items():
        grouped[outcome].add(code)
    return tuple(
        ErrorRule(status=status, message=message, codes=frozenset(codes))
        for (status, message), codes in grouped.items()
    )


def build_slack_sanitizer() -> ErrorSanitizer:
    """Sanitizer: códigos Slack primeiro, depois as regras comuns."""
    rules = (
        *_code_rules(),
        *standard_rules(
            auth_message="Invalid bot token. Check SLACK_BOT_TOKEN.",
            not_found_message="Resource not found.",
            forbidden_message="Access denied. Check your bot token scopes.",
            rate_limit_message="Rate limited. Try again later.",
            connection_message="Connection to Slack failed. Try again later.",
        ),
    )
    return ErrorSanitizer(rules=rules)
