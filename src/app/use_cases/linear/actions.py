"""Tabela de ações do proxy Linear.

Handlers recebem o cliente e os parâmetros já validados; leituras devolvem
registros resolvidos, escritas apenas os campos de identificação.
"""

from __future__ import annotations

from typing import Any

from api.validators import EmptyParams
from api.validators import linear as schemas
from app.dispatch import ActionSpec, ActionTable
from app.protocols import LinearClientProtocol


# --- issues ---


async def list_issues(client: LinearClientProtocol, params: schemas.IssuesListParams) -> Any:
    return await client.list_issues(
        team_id=params.team_id,
        team_key=params.team_key,
        assignee_id=params.assignee_id,
        state_id=params.state_id,
        first=params.first,
    )


async def search_issues(client: LinearClientProtocol, params: schemas.IssuesSearchParams) -> Any:
    return await client.search_issues(params.query, first=params.first)


async def get_issue(client: LinearClientProtocol, params: schemas.IssueRef) -> Any:
    return await client.get_issue(params.issue_id)


async def create_issue(client: LinearClientProtocol, params: schemas.IssuesCreateParams) -> Any:
    return await client.create_issue(
        team_id=params.team_id,
        title=params.title,
        description=params.description,
        priority=params.priority,
        state_id=params.state_id,
        assignee_id=params.assignee_id,
        cycle_id=params.cycle_id,
        label_ids=params.label_ids,
    )


async def update_issue(client: LinearClientProtocol, params: schemas.IssuesUpdateParams) -> Any:
    changes = params.model_dump(exclude={"issue_id"}, exclude_none=True)
    return await client.update_issue(params.issue_id, **changes)


async def archive_issue(client: LinearClientProtocol, params: schemas.IssueRef) -> Any:
    return await client.archive_issue(params.issue_id)


async def assign_issue(client: LinearClientProtocol, params: schemas.IssuesAssignParams) -> Any:
    return await client.update_issue(params.issue_id, assignee_id=params.assignee_id)


async def add_issue_label(
    client: LinearClientProtocol, params: schemas.IssuesAddLabelParams
) -> Any:
    return await client.add_issue_label(params.issue_id, params.label_id)


async def set_issue_cycle(
    client: LinearClientProtocol, params: schemas.IssuesSetCycleParams
) -> Any:
    return await client.update_issue(params.issue_id, cycle_id=params.cycle_id)


# --- projects ---


async def list_projects(client: LinearClientProtocol, params: schemas.ProjectsListParams) -> Any:
    return await client.list_projects(first=params.first)


async def get_project(client: LinearClientProtocol, params: schemas.ProjectRef) -> Any:
    return await client.get_project(params.project_id)


async def create_project_update(
    client: LinearClientProtocol, params: schemas.ProjectsCreateUpdateParams
) -> Any:
    return await client.create_project_update(params.project_id, params.body, params.health)


# --- teams / comments / users / cycles / labels ---


async def list_teams(client: LinearClientProtocol, params: EmptyParams) -> Any:
    return await client.list_teams()


async def get_team(client: LinearClientProtocol, params: schemas.TeamRef) -> Any:
    return await client.get_team(params.team_id)


async def list_comments(client: LinearClientProtocol, params: schemas.IssueRef) -> Any:
    return await client.list_comments(params.issue_id)


async def create_comment(
    client: LinearClientProtocol, params: schemas.CommentsCreateParams
) -> Any:
    return await client.create_comment(params.issue_id, params.body)


async def get_viewer(client: LinearClientProtocol, params: EmptyParams) -> Any:
    return await client.get_viewer()


async def list_users(client: LinearClientProtocol, params: schemas.OptionalTeamParams) -> Any:
    return await client.list_users(team_id=params.team_id)


async def list_cycles(client: LinearClientProtocol, params: schemas.TeamRef) -> Any:
    return await client.list_cycles(params.team_id)


async def get_cycle(client: LinearClientProtocol, params: schemas.CycleRef) -> Any:
    return await client.get_cycle(params.cycle_id)


async def list_labels(client: LinearClientProtocol, params: schemas.OptionalTeamParams) -> Any:
    return await client.list_labels(team_id=params.team_id)


LINEAR_ACTIONS: ActionTable = {
    "issues": {
        "list": ActionSpec(schemas.IssuesListParams, list_issues),
        "search": ActionSpec(schemas.IssuesSearchParams, search_issues),
        "get": ActionSpec(schemas.IssueRef, get_issue),
        "create": ActionSpec(schemas.IssuesCreateParams, create_issue),
        "update": ActionSpec(schemas.IssuesUpdateParams, update_issue),
        "archive": ActionSpec(schemas.IssueRef, archive_issue),
        "assign": ActionSpec(schemas.IssuesAssignParams, assign_issue),
        "add_label": ActionSpec(schemas.IssuesAddLabelParams, add_issue_label),
        "set_cycle": ActionSpec(schemas.IssuesSetCycleParams, set_issue_cycle),
    },
    "projects": {
        "list": ActionSpec(schemas.ProjectsListParams, list_projects),
        "get": ActionSpec(schemas.ProjectRef, get_project),
        "create_update": ActionSpec(schemas.ProjectsCreateUpdateParams, create_project_update),
    },
    "teams": {
        "list": ActionSpec(EmptyParams, list_teams),
        "get": ActionSpec(schemas.TeamRef, get_team),
    },
    "comments": {
        "list": ActionSpec(schemas.IssueRef, list_comments),
        "create": ActionSpec(schemas.CommentsCreateParams, create_comment),
    },
    "users": {
        "me": ActionSpec(EmptyParams, get_viewer),
        "list": ActionSpec(schemas.OptionalTeamParams, list_users),
    },
    "cycles": {
        "list": ActionSpec(schemas.TeamRef, list_cycles),
        "get": ActionSpec(schemas.CycleRef, get_cycle),
    },
    "labels": {
        "list": ActionSpec(schemas.OptionalTeamParams, list_labels),
    },
}
