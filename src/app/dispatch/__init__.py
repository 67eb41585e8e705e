"""Dispatch de ações — tabela de comandos e router."""

from app.dispatch.router import ActionRouter, ActionSpec, ActionTable, check_table

__all__ = ["ActionRouter", "ActionSpec", "ActionTable", "check_table"]
