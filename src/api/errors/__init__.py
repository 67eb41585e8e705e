"""Sanitização de erros — nenhuma mensagem bruta do fornecedor chega ao cliente."""

from api.errors.sanitizer import (
    CONNECTION_MESSAGE,
    FALLBACK_MESSAGE,
    INVALID_PARAMS_MESSAGE,
    UNEXPECTED_MESSAGE,
    ErrorRule,
    ErrorSanitizer,
    SanitizedError,
    standard_rules,
)

__all__ = [
    "CONNECTION_MESSAGE",
    "FALLBACK_MESSAGE",
    "INVALID_PARAMS_MESSAGE",
    "UNEXPECTED_MESSAGE",
    "ErrorRule",
    "ErrorSanitizer",
    "SanitizedError",
    "standard_rules",
]
