"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ActionValidationError,
    ConfigurationError,
    MalformedRequestError,
    RequestError,
    SkillProxyError,
    UnknownActionError,
    UnknownCategoryError,
    VendorApiError,
)

__all__ = [
    "ActionValidationError",
    "ConfigurationError",
    "MalformedRequestError",
    "RequestError",
    "SkillProxyError",
    "UnknownActionError",
    "UnknownCategoryError",
    "VendorApiError",
]
