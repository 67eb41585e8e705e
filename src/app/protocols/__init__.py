"""Protocolos dos clientes de fornecedor usados pelos use cases."""

from .linear_client import LinearClientProtocol
from .neon_client import NeonClientProtocol, SqlRunnerProtocol
from .notion_client import NotionClientProtocol
from .slack_client import SlackClientProtocol
from .supabase_client import FilterTuple, SupabaseClientProtocol
from .vendor_client import VendorClientProtocol

__all__ = [
    "FilterTuple",
    "LinearClientProtocol",
    "NeonClientProtocol",
    "NotionClientProtocol",
    "SlackClientProtocol",
    "SqlRunnerProtocol",
    "SupabaseClientProtocol",
    "VendorClientProtocol",
]
