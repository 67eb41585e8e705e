"""Erros e helpers de parsing para o PostgREST do Supabase."""

from __future__ import annotations

from typing import Any

from api.errors import ErrorRule, ErrorSanitizer, standard_rules
from utils.errors import VendorApiError
from utils.redaction import DEFAULT_SENSITIVE_PATTERNS, redaction_pattern

VENDOR = "supabase"

INTROSPECTION_UNAVAILABLE = "INTROSPECTION_UNAVAILABLE"

SUPABASE_SENSITIVE_PATTERNS = (
    *DEFAULT_SENSITIVE_PATTERNS,
    redaction_pattern(r"[A-Za-z0-9.-]*supabase\.co"),
    redaction_pattern(r"service_role"),
    redaction_pattern(r"\banon\b"),
)


def parse_postgrest_error(status_code: int, payload: dict[str, Any]) -> VendorApiError:
    """Converte `{code, message, details, hint}` do PostgREST em VendorApiError."""
    code = payload.get("code") if isinstance(payload.get("code"), str) else None
    message = str(payload.get("message") or f"Supabase API error ({status_code})")
    return VendorApiError(VENDOR, message, status_code=status_code, code=code)


def build_supabase_sanitizer() -> ErrorSanitizer:
    """Sanitizer: códigos PostgREST/SQLSTATE primeiro, depois as regras comuns."""
    rules = (
        ErrorRule(
            status=404,
            message="No rows found.",
            codes=frozenset({"PGRST116"}),
        ),
        ErrorRule(
            status=404,
            message="Table not found. Check the table name and schema.",
            codes=frozenset({"42P01", "PGRST205"}),
        ),
        ErrorRule(
            status=404,
            message="Function not found. Check the function name and arguments.",
            codes=frozenset({"PGRST202", "42883"}),
        ),
        ErrorRule(
            status=400,
            message="Column not found. Check the column names.",
            codes=frozenset({"PGRST204", "42703"}),
        ),
        ErrorRule(
            status=403,
            message="Permission denied. Check row level security policies.",
            codes=frozenset({"42501"}),
        ),
        ErrorRule(
            status=409,
            message="Duplicate key violates a unique constraint.",
            codes=frozenset({"23505"}),
        ),
        ErrorRule(
            status=409,
            message="Foreign key constraint violation.",
            codes=frozenset({"23503"}),
        ),
        ErrorRule(
            status=400,
            message="Invalid input value for column type.",
            codes=frozenset({"22P02", "23502", "23514"}),
        ),
        ErrorRule(
            status=400,
            message=(
                "Introspection unavailable. Create the helper RPC functions "
                "(get_tables_info, get_table_columns, get_functions_info)."
            ),
            codes=frozenset({INTROSPECTION_UNAVAILABLE}),
        ),
        *standard_rules(
            auth_message="Invalid service key. Check SUPABASE_SERVICE_KEY.",
            not_found_message="Resource not found.",
            forbidden_message="Access denied. Check your service key permissions.",
        ),
    )
    return ErrorSanitizer(rules=rules, redaction_patterns=SUPABASE_SENSITIVE_PATTERNS)
