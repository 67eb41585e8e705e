"""Exceções compartilhadas pelos proxies de skill.

Hierarquia:
- ConfigurationError: fatal no startup, nunca chega à camada HTTP
- RequestError e subclasses: erro do cliente (envelope/parâmetros)
- VendorApiError: falha reportada pela API do fornecedor
"""

from __future__ import annotations

from collections.abc import Sequence


class SkillProxyError(Exception):
    """Base para erros do proxy."""


class ConfigurationError(SkillProxyError):
    """Configuração ausente ou malformada.

    Carrega instruções de remediação para impressão antes do processo sair.
    """

    def __init__(self, message: str, remediation: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.remediation = tuple(remediation)


class RequestError(SkillProxyError):
    """Erro de formato da requisição — mensagem é segura para o cliente."""

    status_code: int = 400


class MalformedRequestError(RequestError):
    """Corpo ausente, JSON inválido ou envelope fora do formato."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


class UnknownCategoryError(RequestError):
    """Categoria fora da enumeração do proxy."""

    def __init__(self, category: str, available: Sequence[str]) -> None:
        super().__init__(f"Unknown category: {category}. Available: {', '.join(available)}")
        self.category = category
        self.available = tuple(available)


class UnknownActionError(RequestError):
    """Ação inexistente dentro de uma categoria conhecida."""

    def __init__(self, category: str, action: str, available: Sequence[str]) -> None:
        super().__init__(
            f"Unknown action: {action}. Available in {category}: {', '.join(available)}"
        )
        self.category = category
        self.action = action
        self.available = tuple(available)


class ActionValidationError(RequestError):
    """Parâmetros rejeitados pelo schema da ação (todos os campos agregados)."""


class VendorApiError(SkillProxyError):
    """Erro devolvido pela API do fornecedor.

    Attributes:
        vendor: Nome do fornecedor (linear, notion, slack, neon, supabase).
        status_code: Status HTTP da resposta do fornecedor, se houver.
        code: Código de erro do fornecedor (ex: "channel_not_found").
    """

    def __init__(
        self,
        vendor: str,
        message: str,
        status_code: int | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.vendor = vendor
        self.status_code = status_code
        self.code = code
