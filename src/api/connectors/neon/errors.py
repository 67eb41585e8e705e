"""Erros e helpers de parsing para a Neon (Management API e SQL)."""

from __future__ import annotations

from typing import Any

import asyncpg

from api.errors import ErrorRule, ErrorSanitizer, standard_rules
from utils.errors import VendorApiError
from utils.redaction import DEFAULT_SENSITIVE_PATTERNS, redaction_pattern

VENDOR = "neon"

NEON_SENSITIVE_PATTERNS = (
    *DEFAULT_SENSITIVE_PATTERNS,
    redaction_pattern(r"[A-Za-z0-9.-]*\.neon\.tech"),
)


def parse_neon_error(status_code: int, payload: dict[str, Any]) -> VendorApiError:
    """Converte `{code, message}` da Management API em VendorApiError."""
    code = payload.get("code") if isinstance(payload.get("code"), str) else None
    message = str(payload.get("message") or f"Neon API error ({status_code})")
    return VendorApiError(VENDOR, message, status_code=status_code, code=code)


def from_postgres_error(exc: asyncpg.PostgresError) -> VendorApiError:
    """Erro do servidor Postgres → VendorApiError com o SQLSTATE como código."""
    return VendorApiError(VENDOR, str(exc), code=getattr(exc, "sqlstate", None))


def build_neon_sanitizer() -> ErrorSanitizer:
    """Sanitizer com as mensagens fixas do skill Neon."""
    rules = (
        ErrorRule(
            status=401,
            message="Database authentication failed. Check the role name.",
            codes=frozenset({"28P01", "28000"}),
        ),
        ErrorRule(
            status=403,
            message="Access denied. The role lacks privileges for this statement.",
            codes=frozenset({"42501"}),
        ),
        ErrorRule(
            status=404,
            message="Table or column not found. Check the schema and names.",
            codes=frozenset({"42P01", "42703", "3D000"}),
        ),
        ErrorRule(
            status=400,
            message="SQL error. Check your query syntax and parameters.",
            codes=frozenset({"42601", "42804", "22P02", "08P01"}),
        ),
        *standard_rules(
            auth_message="Invalid API key. Check your Neon Organization API key.",
            not_found_message="Resource not found. Check your project/branch ID.",
            forbidden_message="Access denied. Check your API key permissions.",
        ),
        ErrorRule(
            status=503,
            message="Connection error. Try again later.",
            substrings=("connection",),
        ),
    )
    return ErrorSanitizer(rules=rules, redaction_patterns=NEON_SENSITIVE_PATTERNS)
