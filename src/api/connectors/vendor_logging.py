"""Helpers de logging para chamadas a fornecedores (sem payloads)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from utils.errors import VendorApiError

logger = logging.getLogger(__name__)


def log_vendor_error(
    error: VendorApiError,
    method: str,
    endpoint: str,
) -> None:
    """Loga erro do fornecedor sem expor mensagem nem dados sensíveis."""
    logger.warning(
        "vendor_api_error",
        extra={
            "vendor": error.vendor,
            "method": method,
            "endpoint": endpoint,
            "status_code": error.status_code,
            "error_code": error.code,
        },
    )


def log_success(
    vendor: str,
    method: str,
    endpoint: str,
    status_code: int,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "vendor_api_success",
        extra={
            "vendor": vendor,
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
