"""Conector Linear (GraphQL)."""

from api.connectors.linear.client import LinearClient
from api.connectors.linear.errors import build_linear_sanitizer, parse_linear_error

__all__ = ["LinearClient", "build_linear_sanitizer", "parse_linear_error"]
