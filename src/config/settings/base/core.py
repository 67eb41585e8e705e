"""Settings base dos proxies.

Configurações comuns a todos os skills: nível de log e os
limites de transporte herdados por cada SkillSettings.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar

from config.logging.config import VALID_LOG_LEVELS
from utils.errors import ConfigurationError

# Proxies nunca escutam fora da interface de loopback
LOOPBACK_HOST = "127.0.0.1"

DEFAULT_MAX_BODY_BYTES = 1024 * 1024
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0
DEFAULT_LOG_LEVEL = "INFO"

_TRUTHY = ("true", "1", "yes", "on")


@dataclass(frozen=True)
class SkillSettings:
    """Campos comuns de todo proxy de skill.

    Subclasses acrescentam credenciais do fornecedor e sobrescrevem
    `validate()` e `setup_steps()`.
    """

    skill: ClassVar[str] = ""
    default_port: ClassVar[int] = 0

    port: int = 0
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def service_name(self) -> str:
        return f"{self.skill}-skill"

    @property
    def host(self) -> str:
        return LOOPBACK_HOST

    def validate(self) -> list[str]:
        """Valida campos de transporte.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if not 1 <= self.port <= 65535:
            errors.append(f"PORT out of range: {self.port}")
        if self.max_body_bytes < 1:
            errors.append("MAX_BODY_BYTES must be positive")
        if self.request_timeout_seconds <= 0:
            errors.append("REQUEST_TIMEOUT_SECONDS must be positive")
        if self.log_level not in VALID_LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL must be one of {', '.join(sorted(VALID_LOG_LEVELS))}, "
                f"got {self.log_level!r}"
            )
        return errors

    def setup_steps(self) -> list[str]:
        """Passos de remediação impressos quando a configuração falha."""
        return []


def parse_bool(value: str | None, default: bool = False) -> bool:
    """Converte string de env em bool (true/1/yes/on)."""
    if value is None or value == "":
        return default
    return value.strip().lower() in _TRUTHY


def parse_int(values: Mapping[str, str], key: str, default: int) -> int:
    """Lê inteiro de `values`; valor não numérico é erro de configuração."""
    raw = values.get(key, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from exc


def parse_float(values: Mapping[str, str], key: str, default: float) -> float:
    """Lê float de `values`; valor não numérico é erro de configuração."""
    raw = values.get(key, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}") from exc


def parse_log_level(values: Mapping[str, str]) -> str:
    """Lê LOG_LEVEL em maiúsculas; a validade é checada em `validate()`."""
    return values.get("LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
