"""Erros e helpers de parsing para a API REST do Notion."""

from __future__ import annotations

from typing import Any

from api.errors import INVALID_PARAMS_MESSAGE, ErrorRule, ErrorSanitizer, standard_rules
from utils.errors import VendorApiError

VENDOR = "notion"


def parse_notion_error(status_code: int, payload: dict[str, Any]) -> VendorApiError:
    """Converte `{object: "error", code, message}` em VendorApiError."""
    code = payload.get("code") if isinstance(payload.get("code"), str) else None
    message = str(payload.get("message") or f"Notion API error ({status_code})")
    return VendorApiError(VENDOR, message, status_code=status_code, code=code)


def build_notion_sanitizer() -> ErrorSanitizer:
    """Sanitizer com as mensagens fixas do skill Notion."""
    rules = (
        ErrorRule(
            status=403,
            message="Access denied. Ensure the page/database is shared with your integration.",
            codes=frozenset({"restricted_resource"}),
            substrings=("restricted",),
        ),
        *standard_rules(
            auth_message="Invalid API key. Check your Notion integration token.",
            not_found_message=(
                "Resource not found. Check the page/database ID or ensure it's shared "
                "with your integration."
            ),
            forbidden_message=(
                "Access denied. Ensure the page/database is shared with your integration."
            ),
            rate_limit_message="Rate limit exceeded. Try again in a few seconds.",
        ),
        ErrorRule(
            status=400,
            message=INVALID_PARAMS_MESSAGE,
            codes=frozenset({"validation_error", "invalid_json", "invalid_request"}),
            substrings=("validation", "invalid"),
        ),
        ErrorRule(
            status=409,
            message="Conflict. The resource may have been modified.",
            codes=frozenset({"conflict_error"}),
            statuses=frozenset({409}),
            substrings=("conflict",),
        ),
    )
    return ErrorSanitizer(rules=rules)
