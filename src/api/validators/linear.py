"""Schemas de parâmetros do skill Linear.

IDs aceitam duas formas: UUID (normalizado para minúsculas) ou chave de
issue no formato `ENG-123` (normalizada para maiúsculas).
"""

from __future__ import annotations

import re
from typing import Annotated, Literal

from pydantic import AfterValidator, Field

from api.validators.common import ParamsModel

_UUID = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)
_ISSUE_IDENTIFIER = re.compile(r"^[A-Z]+-\d+$", re.IGNORECASE)

PRIORITY_LABELS: dict[int, str] = {
    0: "No priority",
    1: "Urgent",
    2: "High",
    3: "Medium",
    4: "Low",
}


def is_uuid(value: str) -> bool:
    return bool(_UUID.match(value))


def is_issue_identifier(value: str) -> bool:
    return bool(_ISSUE_IDENTIFIER.match(value))


def normalize_linear_id(value: str) -> str:
    """Converte UUID ou chave de issue para a forma canônica.

    Raises:
        ValueError: Valor não é UUID nem chave de issue.
    """
    candidate = value.strip()
    if is_uuid(candidate):
        return candidate.lower()
    if is_issue_identifier(candidate):
        return candidate.upper()
    raise ValueError("Invalid Linear ID format. Use UUID or issue identifier (e.g., ENG-123)")


LinearId = Annotated[str, AfterValidator(normalize_linear_id)]
TeamKey = Annotated[str, Field(pattern=r"^[A-Z]+$")]
PageSize = Annotated[int, Field(ge=1, le=100)]
Priority = Annotated[int, Field(ge=0, le=4)]
NonEmptyText = Annotated[str, Field(min_length=1)]
ProjectHealth = Literal["onTrack", "atRisk", "offTrack"]

DEFAULT_PAGE_SIZE = 50


# --- issues ---


class IssuesListParams(ParamsModel):
    team_id: LinearId | None = None
    team_key: TeamKey | None = None
    assignee_id: LinearId | None = None
    state_id: LinearId | None = None
    first: PageSize = DEFAULT_PAGE_SIZE


class IssuesSearchParams(ParamsModel):
    query: Annotated[str, Field(min_length=1, max_length=500)]
    first: PageSize = DEFAULT_PAGE_SIZE


class IssueRef(ParamsModel):
    issue_id: LinearId


class IssuesCreateParams(ParamsModel):
    team_id: LinearId
    title: NonEmptyText
    description: str | None = None
    priority: Priority | None = None
    state_id: LinearId | None = None
    assignee_id: LinearId | None = None
    cycle_id: LinearId | None = None
    label_ids: list[LinearId] | None = None


class IssuesUpdateParams(ParamsModel):
    issue_id: LinearId
    title: NonEmptyText | None = None
    description: str | None = None
    priority: Priority | None = None
    state_id: LinearId | None = None
    assignee_id: LinearId | None = None


class IssuesAssignParams(ParamsModel):
    issue_id: LinearId
    assignee_id: LinearId


class IssuesAddLabelParams(ParamsModel):
    issue_id: LinearId
    label_id: LinearId


class IssuesSetCycleParams(ParamsModel):
    issue_id: LinearId
    cycle_id: LinearId


# --- projects ---


class ProjectsListParams(ParamsModel):
    first: PageSize = DEFAULT_PAGE_SIZE


class ProjectRef(ParamsModel):
    project_id: LinearId


class ProjectsCreateUpdateParams(ParamsModel):
    project_id: LinearId
    body: NonEmptyText
    health: ProjectHealth


# --- teams / users / cycles / labels / comments ---


class TeamRef(ParamsModel):
    team_id: LinearId


class OptionalTeamParams(ParamsModel):
    team_id: LinearId | None = None


class CycleRef(ParamsModel):
    cycle_id: LinearId


class CommentsCreateParams(ParamsModel):
    issue_id: LinearId
    body: NonEmptyText
