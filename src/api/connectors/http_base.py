"""Cliente HTTP base para conectores de fornecedor.

Um único httpx.AsyncClient de vida longa por processo, criado no startup
e fechado no shutdown (`aclose`). Sem retries locais: a falha do
fornecedor vira VendorApiError imediatamente.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

import httpx

from api.connectors.vendor_logging import log_success, log_vendor_error
from utils.errors import VendorApiError


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    base_url: str
    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class VendorHttpClient:
    """Base dos clientes de fornecedor sobre httpx.

    Subclasses definem `vendor` e sobrescrevem `error_from_response` para
    traduzir o payload de erro do fornecedor.

    Args:
        config: Configuração de transporte.
        transport: Transporte httpx alternativo (ex: MockTransport em testes).
    """

    vendor: ClassVar[str] = "vendor"

    def __init__(
        self,
        config: HttpClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            headers=config.default_headers,
            timeout=config.timeout_seconds,
            verify=config.verify_ssl,
            transport=transport,
        )

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | list[tuple[str, str]] | None = None,
        json: Any = None,
        data: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Executa a requisição e devolve o corpo JSON decodificado.

        Raises:
            VendorApiError: Status HTTP de erro ou corpo fora do esperado.
            httpx.TransportError: Falha de rede/timeout (tratada pelo sanitizer).
        """
        response = await self._client.request(
            method,
            path,
            params=params,
            json=json,
            data=data,
            headers=headers,
        )
        if response.is_error:
            error = self.error_from_response(response)
            log_vendor_error(error, method, path)
            raise error

        log_success(self.vendor, method, path, response.status_code)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise VendorApiError(
                self.vendor,
                "Unexpected non-JSON response",
                status_code=response.status_code,
            ) from exc

    def error_from_response(self, response: httpx.Response) -> VendorApiError:
        """Traduz resposta de erro em VendorApiError (sobrescrever por fornecedor)."""
        return VendorApiError(
            self.vendor,
            f"{self.vendor} API error ({response.status_code})",
            status_code=response.status_code,
        )

    async def aclose(self) -> None:
        """Fecha o pool de conexões."""
        await self._client.aclose()


def response_payload(response: httpx.Response) -> dict[str, Any]:
    """Decodifica o corpo de erro como dict; vazio se não for JSON-objeto."""
    try:
        payload = response.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}
