"""Parsing tipado do envelope e dos parâmetros de ação.

Cada par (category, action) declara um ParamsModel. `parse_params` devolve
um resultado etiquetado em vez de propagar ValidationError do pydantic, e a
falha agrega todos os erros de campo numa única mensagem.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from utils.errors import MalformedRequestError

MAX_ACTION_LENGTH = 50

ModelT = TypeVar("ModelT", bound=BaseModel)


class ParamsModel(BaseModel):
    """Base dos schemas de parâmetros.

    Nomes camelCase no fio, snake_case no Python. Chaves desconhecidas são
    ignoradas e não há coerção de tipos (string "5" não vira int).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        strict=True,
        frozen=True,
    )


class EmptyParams(ParamsModel):
    """Ação sem parâmetros."""


class NestedParams(ParamsModel):
    """Objeto aninhado dentro dos parâmetros (ex: filtro, ordenação).

    Chega como dict dentro de `params`; a rigidez fica nos tipos dos campos
    (StrictBool, StrictStr...).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        strict=False,
        frozen=True,
    )


class ActionEnvelope(BaseModel):
    """Envelope `{category, action, params}` do POST /action."""

    model_config = ConfigDict(extra="ignore", strict=True, frozen=True)

    category: Annotated[str, Field(min_length=1)]
    action: Annotated[str, Field(min_length=1, max_length=MAX_ACTION_LENGTH)]
    params: dict[str, Any] = Field(default_factory=dict)


@dataclass(frozen=True)
class ParseSuccess(Generic[ModelT]):
    value: ModelT
    ok: bool = True


@dataclass(frozen=True)
class ParseFailure:
    message: str
    ok: bool = False


ParseResult = ParseSuccess[ModelT] | ParseFailure


def format_validation_error(exc: ValidationError) -> str:
    """Agrega todos os erros de campo: 'Validation error: teamId: ...; first: ...'."""
    parts: list[str] = []
    for error in exc.errors(include_url=False, include_input=False):
        location = ".".join(str(part) for part in error["loc"]) or "params"
        message = error["msg"].removeprefix("Value error, ")
        parts.append(f"{location}: {message}")
    return "Validation error: " + "; ".join(parts)


def parse_params(model: type[ModelT], raw: Any) -> ParseSuccess[ModelT] | ParseFailure:
    """Valida `raw` contra `model` sem levantar exceção.

    Returns:
        ParseSuccess com o modelo populado ou ParseFailure com a mensagem
        agregada.
    """
    if not isinstance(raw, dict):
        return ParseFailure(message="Validation error: params: Input should be an object")
    try:
        return ParseSuccess(value=model.model_validate(raw))
    except ValidationError as exc:
        return ParseFailure(message=format_validation_error(exc))


def parse_envelope(body: Any) -> ActionEnvelope:
    """Valida o envelope da requisição.

    Raises:
        MalformedRequestError: Corpo não é objeto ou campos fora do formato.
    """
    if not isinstance(body, dict):
        raise MalformedRequestError("Request body must be a JSON object")
    if not body.get("category") or not body.get("action"):
        raise MalformedRequestError("Missing category or action in request body")
    if body.get("params") is None:
        body = {**body, "params": {}}
    try:
        return ActionEnvelope.model_validate(body)
    except ValidationError as exc:
        raise MalformedRequestError(format_validation_error(exc)) from exc
