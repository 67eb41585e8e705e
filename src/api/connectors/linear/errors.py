"""Erros e helpers de parsing para a API GraphQL do Linear."""

from __future__ import annotations

from typing import Any

from api.errors import INVALID_PARAMS_MESSAGE, ErrorRule, ErrorSanitizer, standard_rules
from utils.errors import VendorApiError

VENDOR = "linear"

# extensions.code do GraphQL → status HTTP equivalente
_CODE_STATUS = {
    "AUTHENTICATION_ERROR": 401,
    "FORBIDDEN": 403,
    "RATELIMITED": 429,
}


def parse_linear_error(status_code: int | None, payload: dict[str, Any]) -> VendorApiError | None:
    """Extrai o primeiro erro GraphQL do payload.

    Args:
        status_code: Status HTTP da resposta
        payload: Dict do response JSON

    Returns:
        VendorApiError se houver `errors`, None se sucesso
    """
    errors = payload.get("errors")
    if not errors or not isinstance(errors, list):
        return None

    first = errors[0] if isinstance(errors[0], dict) else {}
    extensions = first.get("extensions") if isinstance(first.get("extensions"), dict) else {}
    code = extensions.get("code") if isinstance(extensions.get("code"), str) else None
    message = str(first.get("message") or "Linear API error")
    status = _CODE_STATUS.get(code or "", status_code)
    if status is None or status < 400:
        status = 404 if "not found" in message.lower() else 400
    return VendorApiError(VENDOR, message, status_code=status, code=code)


def build_linear_sanitizer() -> ErrorSanitizer:
    """Sanitizer com as mensagens fixas do skill Linear."""
    rules = (
        *standard_rules(
            auth_message="Invalid API key. Check your Linear personal API key.",
            not_found_message="Resource not found. Check the issue/project/team ID.",
            forbidden_message="Access denied. Check your API key permissions.",
        ),
        ErrorRule(
            status=400,
            message=INVALID_PARAMS_MESSAGE,
            substrings=("validation", "invalid"),
        ),
    )
    return ErrorSanitizer(rules=rules)
