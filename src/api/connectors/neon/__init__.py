"""Conector Neon (Management API + SQL via asyncpg)."""

from api.connectors.neon.client import NeonClient
from api.connectors.neon.errors import build_neon_sanitizer, parse_neon_error
from api.connectors.neon.sql import SqlRunner

__all__ = ["NeonClient", "SqlRunner", "build_neon_sanitizer", "parse_neon_error"]
