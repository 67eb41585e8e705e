"""Sanitização de erros para resposta ao cliente.

Responsabilidades:
- Converter qualquer erro em (status HTTP, mensagem segura)
- Mapear sinais do fornecedor para mensagens fixas via tabela ordenada
  de regras (primeira que casa vence)
- Mascarar segredos na mensagem final, mesmo em mensagens fixas

O sanitizer é puro (sem I/O) e total: nunca levanta exceção.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from re import Pattern

import httpx
from pydantic import ValidationError

from utils.errors import RequestError
from utils.redaction import DEFAULT_SENSITIVE_PATTERNS, redact

UNEXPECTED_MESSAGE = "An unexpected error occurred"
FALLBACK_MESSAGE = "Request failed. Check your parameters."
INVALID_PARAMS_MESSAGE = "Invalid request parameters."
CONNECTION_MESSAGE = "Connection error. Try again later."
RATE_LIMIT_MESSAGE = "Rate limit exceeded. Try again later."


@dataclass(frozen=True, slots=True)
class SanitizedError:
    """Erro pronto para o envelope de resposta."""

    status: int
    message: str


@dataclass(frozen=True)
class ErrorRule:
    """Regra padrão→resultado.

    Casa se QUALQUER critério preenchido casar:
    - codes: código de erro do fornecedor (atributo `code`)
    - statuses: status HTTP do erro ou número isolado na mensagem
    - substrings: trecho (minúsculo) da mensagem
    - exception_types: classe da exceção
    """

    status: int
    message: str
    codes: frozenset[str] = frozenset()
    statuses: frozenset[int] = frozenset()
    substrings: tuple[str, ...] = ()
    exception_types: tuple[type[BaseException], ...] = ()

    def matches(self, error: BaseException, text: str) -> bool:
        code = getattr(error, "code", None)
        if self.codes and isinstance(code, str) and code in self.codes:
            return True
        if self.statuses and _status_matches(error, text, self.statuses):
            return True
        if self.substrings and any(part in text for part in self.substrings):
            return True
        return bool(self.exception_types) and isinstance(error, self.exception_types)


def _status_matches(error: BaseException, text: str, statuses: frozenset[int]) -> bool:
    status_code = getattr(error, "status_code", None)
    if isinstance(status_code, int) and status_code in statuses:
        return True
    return any(re.search(rf"\b{status}\b", text) for status in statuses)


def standard_rules(
    *,
    auth_message: str,
    not_found_message: str,
    forbidden_message: str,
    rate_limit_message: str = RATE_LIMIT_MESSAGE,
    connection_message: str = CONNECTION_MESSAGE,
) -> tuple[ErrorRule, ...]:
    """Regras comuns a todos os fornecedores, na ordem de avaliação."""
    return (
        ErrorRule(
            status=401,
            message=auth_message,
            statuses=frozenset({401}),
            substrings=("unauthorized", "authentication", "invalid api key"),
        ),
        ErrorRule(
            status=404,
            message=not_found_message,
            statuses=frozenset({404}),
            substrings=("not found", "could not find"),
        ),
        ErrorRule(
            status=403,
            message=forbidden_message,
            statuses=frozenset({403}),
            substrings=("forbidden", "permission"),
        ),
        ErrorRule(
            status=429,
            message=rate_limit_message,
            statuses=frozenset({429}),
            substrings=("rate limit", "ratelimited", "rate_limited"),
        ),
        ErrorRule(
            status=400,
            message=INVALID_PARAMS_MESSAGE,
            exception_types=(ValidationError,),
        ),
        ErrorRule(
            status=503,
            message=connection_message,
            substrings=("network", "timeout", "timed out", "econnrefused", "connection refused"),
            exception_types=(httpx.TimeoutException, httpx.NetworkError, OSError),
        ),
    )


@dataclass(frozen=True)
class ErrorSanitizer:
    """Converte erros em SanitizedError usando regras ordenadas.

    Args:
        rules: Regras avaliadas de cima para baixo.
        redaction_patterns: Padrões de segredo mascarados na mensagem final.
    """

    rules: tuple[ErrorRule, ...]
    redaction_patterns: tuple[Pattern[str], ...] = field(default=DEFAULT_SENSITIVE_PATTERNS)

    def sanitize(self, error: object) -> SanitizedError:
        """Retorna (status, mensagem) seguros para qualquer valor levantado."""
        try:
            result = self._classify(error)
        except Exception:
            # str()/getattr em objetos arbitrários podem levantar
            result = SanitizedError(status=500, message=UNEXPECTED_MESSAGE)
        return SanitizedError(
            status=result.status,
            message=redact(result.message, self.redaction_patterns),
        )

    def _classify(self, error: object) -> SanitizedError:
        if not isinstance(error, BaseException):
            return SanitizedError(status=500, message=UNEXPECTED_MESSAGE)

        if isinstance(error, RequestError):
            return SanitizedError(status=error.status_code, message=str(error))

        text = str(error).lower()
        for rule in self.rules:
            if rule.matches(error, text):
                return SanitizedError(status=rule.status, message=rule.message)

        return SanitizedError(status=400, message=FALLBACK_MESSAGE)
