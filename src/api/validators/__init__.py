"""Validators por skill — parsing tipado de envelope e parâmetros.

Estrutura:
- common: envelope, ParamsModel base e parse_params (resultado etiquetado)
- linear / notion / slack / neon / supabase: um schema por (category, action)
- sql_safety: classificador heurístico de SELECT (skill Neon)

Cada skill tem seus próprios schemas, garantindo SRP e isolamento de falhas.
"""

from api.validators.common import (
    ActionEnvelope,
    EmptyParams,
    NestedParams,
    ParamsModel,
    ParseFailure,
    ParseSuccess,
    format_validation_error,
    parse_envelope,
    parse_params,
)
from api.validators.sql_safety import is_select_query

__all__ = [
    "ActionEnvelope",
    "EmptyParams",
    "NestedParams",
    "ParamsModel",
    "ParseFailure",
    "ParseSuccess",
    "format_validation_error",
    "is_select_query",
    "parse_envelope",
    "parse_params",
]
