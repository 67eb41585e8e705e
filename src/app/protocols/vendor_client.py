"""Contrato comum dos clientes de fornecedor.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import Protocol


class VendorClientProtocol(Protocol):
    """Cliente de vida longa, fechado no shutdown."""

    async def aclose(self) -> None: ...
