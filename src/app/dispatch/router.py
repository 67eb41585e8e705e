"""Roteamento (category, action) → handler.

A tabela de comandos é declarada por fornecedor em `app.use_cases.<skill>`.
O router valida a tabela na construção; erros de tabela aparecem no startup
e nunca numa requisição.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from api.validators import ParseFailure, parse_params
from utils.errors import ActionValidationError, UnknownActionError, UnknownCategoryError

logger = logging.getLogger(__name__)

ClientT = TypeVar("ClientT")

Handler = Callable[[Any, Any], Awaitable[Any]]


@dataclass(frozen=True, slots=True)
class ActionSpec:
    """Schema de parâmetros e handler assíncrono de uma ação."""

    params_model: type[BaseModel]
    handler: Handler


ActionTable = Mapping[str, Mapping[str, ActionSpec]]


def check_table(skill: str, table: ActionTable) -> None:
    """Verifica exaustividade da tabela de comandos.

    Raises:
        ValueError: Categoria vazia, ação sem schema ou handler não assíncrono.
    """
    if not table:
        raise ValueError(f"{skill}: action table declares no categories")
    for category, actions in table.items():
        if not actions:
            raise ValueError(f"{skill}: category '{category}' declares no actions")
        for action, spec in actions.items():
            where = f"{skill}: {category}.{action}"
            if not isinstance(spec, ActionSpec):
                raise ValueError(f"{where} is not an ActionSpec")
            model = spec.params_model
            if not (isinstance(model, type) and issubclass(model, BaseModel)):
                raise ValueError(f"{where} has no params model")
            if not inspect.iscoroutinefunction(spec.handler):
                raise ValueError(f"{where} handler must be async")


class ActionRouter(Generic[ClientT]):
    """Despacha ações para o cliente do fornecedor.

    Args:
        skill: Nome do proxy (linear, notion, ...).
        table: Tabela category → action → ActionSpec.
        client: Cliente do fornecedor, construído explicitamente no startup.
    """

    def __init__(self, skill: str, table: ActionTable, client: ClientT) -> None:
        check_table(skill, table)
        self.skill = skill
        self.client = client
        self._table = table

    def catalog(self) -> dict[str, list[str]]:
        """Categorias e ações disponíveis, na ordem declarada."""
        return {category: list(actions) for category, actions in self._table.items()}

    def resolve(self, category: str, action: str) -> ActionSpec:
        """Localiza a ação na tabela.

        Raises:
            UnknownCategoryError: Categoria fora da enumeração.
            UnknownActionError: Ação inexistente na categoria.
        """
        actions = self._table.get(category)
        if actions is None:
            raise UnknownCategoryError(category, list(self._table))
        spec = actions.get(action)
        if spec is None:
            raise UnknownActionError(category, action, list(actions))
        return spec

    async def dispatch(self, category: str, action: str, params: Any) -> Any:
        """Valida os parâmetros e executa o handler.

        Nenhuma chamada ao fornecedor acontece antes da validação.

        Raises:
            UnknownCategoryError: Categoria desconhecida.
            UnknownActionError: Ação desconhecida.
            ActionValidationError: Parâmetros rejeitados pelo schema.
            VendorApiError: Falha reportada pelo fornecedor.
        """
        spec = self.resolve(category, action)
        result = parse_params(spec.params_model, params)
        if isinstance(result, ParseFailure):
            raise ActionValidationError(result.message)

        logger.debug(
            "action_dispatching",
            extra={"skill": self.skill, "category": category, "action": action},
        )
        return await spec.handler(self.client, result.value)
