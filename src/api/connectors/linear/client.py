"""Cliente da API GraphQL do Linear.

Uso:
    client = LinearClient.from_settings(load_validated_settings("linear"))
    teams = await client.list_teams()
    await client.aclose()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.http_base import HttpClientConfig, VendorHttpClient, response_payload
from api.connectors.linear import queries
from api.connectors.linear.errors import VENDOR, parse_linear_error
from api.connectors.linear.mappers import (
    comment_to_record,
    cycle_to_record,
    issue_to_record,
    label_to_record,
    nodes_of,
    project_to_record,
    team_to_record,
    user_to_record,
)
from utils.errors import VendorApiError

if TYPE_CHECKING:
    from config.settings import LinearSettings


def _compact(values: dict[str, Any]) -> dict[str, Any]:
    """Remove chaves com None (campos opcionais não enviados)."""
    return {key: value for key, value in values.items() if value is not None}


class LinearClient(VendorHttpClient):
    """Operações do Linear usadas pelo proxy."""

    vendor = VENDOR

    def __init__(
        self,
        api_key: str,
        api_url: str = "https://api.linear.app/graphql",
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        # Personal API keys vão sem prefixo "Bearer"
        config = HttpClientConfig(
            base_url=api_url,
            timeout_seconds=timeout_seconds,
            default_headers={"Authorization": api_key, "Content-Type": "application/json"},
        )
        super().__init__(config, transport=transport)
        self._api_url = api_url

    @classmethod
    def from_settings(cls, settings: LinearSettings) -> LinearClient:
        return cls(
            api_key=settings.api_key,
            api_url=settings.api_url,
            timeout_seconds=settings.request_timeout_seconds,
        )

    def error_from_response(self, response: httpx.Response) -> VendorApiError:
        parsed = parse_linear_error(response.status_code, response_payload(response))
        if parsed is not None:
            return parsed
        return super().error_from_response(response)

    async def graphql(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Executa query/mutation e devolve `data`.

        Raises:
            VendorApiError: Resposta com `errors` ou sem `data`.
        """
        payload = await self.request_json(
            "POST", self._api_url, json={"query": query, "variables": variables or {}}
        )
        if not isinstance(payload, dict):
            raise VendorApiError(VENDOR, "Unexpected GraphQL response")
        error = parse_linear_error(200, payload)
        if error is not None:
            raise error
        data = payload.get("data")
        if not isinstance(data, dict):
            raise VendorApiError(VENDOR, "Unexpected GraphQL response")
        return data

    async def _entity(self, query: str, field: str, entity_id: str, label: str) -> dict[str, Any]:
        data = await self.graphql(query, {"id": entity_id})
        entity = data.get(field)
        if not entity:
            raise VendorApiError(VENDOR, f"{label} not found", status_code=404)
        return entity

    # --- issues ---

    async def list_issues(
        self,
        *,
        team_id: str | None = None,
        team_key: str | None = None,
        assignee_id: str | None = None,
        state_id: str | None = None,
        first: int = 50,
    ) -> list[dict[str, Any]]:
        issue_filter: dict[str, Any] = {}
        if team_id:
            issue_filter["team"] = {"id": {"eq": team_id}}
        elif team_key:
            issue_filter["team"] = {"key": {"eq": team_key}}
        if assignee_id:
            issue_filter["assignee"] = {"id": {"eq": assignee_id}}
        if state_id:
            issue_filter["state"] = {"id": {"eq": state_id}}

        data = await self.graphql(
            queries.LIST_ISSUES,
            {"filter": issue_filter or None, "first": first},
        )
        return [issue_to_record(node) for node in nodes_of(data.get("issues"))]

    async def search_issues(self, query: str, first: int = 50) -> list[dict[str, Any]]:
        data = await self.graphql(queries.SEARCH_ISSUES, {"term": query, "first": first})
        return [issue_to_record(node) for node in nodes_of(data.get("searchIssues"))]

    async def get_issue(self, issue_id: str) -> dict[str, Any]:
        return issue_to_record(await self._entity(queries.GET_ISSUE, "issue", issue_id, "Issue"))

    async def create_issue(
        self,
        *,
        team_id: str,
        title: str,
        description: str | None = None,
        priority: int | None = None,
        state_id: str | None = None,
        assignee_id: str | None = None,
        cycle_id: str | None = None,
        label_ids: list[str] | None = None,
    ) -> dict[str, Any]:
        issue_input = _compact(
            {
                "teamId": team_id,
                "title": title,
                "description": description,
                "priority": priority,
                "stateId": state_id,
                "assigneeId": assignee_id,
                "cycleId": cycle_id,
                "labelIds": label_ids,
            }
        )
        data = await self.graphql(queries.CREATE_ISSUE, {"input": issue_input})
        issue = (data.get("issueCreate") or {}).get("issue")
        if not issue:
            raise VendorApiError(VENDOR, "Failed to create issue")
        return {
            "id": issue.get("id"),
            "identifier": issue.get("identifier"),
            "url": issue.get("url"),
        }

    async def update_issue(self, issue_id: str, **changes: Any) -> dict[str, Any]:
        """Atualiza campos da issue (kwargs em snake_case: state_id, cycle_id...)."""
        issue_input = _compact(
            {
                "title": changes.get("title"),
                "description": changes.get("description"),
                "priority": changes.get("priority"),
                "stateId": changes.get("state_id"),
                "assigneeId": changes.get("assignee_id"),
                "cycleId": changes.get("cycle_id"),
            }
        )
        data = await self.graphql(queries.UPDATE_ISSUE, {"id": issue_id, "input": issue_input})
        issue = (data.get("issueUpdate") or {}).get("issue")
        if not issue:
            raise VendorApiError(VENDOR, "Failed to update issue")
        return {"id": issue.get("id"), "identifier": issue.get("identifier")}

    async def archive_issue(self, issue_id: str) -> dict[str, Any]:
        data = await self.graphql(queries.ARCHIVE_ISSUE, {"id": issue_id})
        return {"success": bool((data.get("issueArchive") or {}).get("success"))}

    async def add_issue_label(self, issue_id: str, label_id: str) -> dict[str, Any]:
        data = await self.graphql(queries.ADD_ISSUE_LABEL, {"id": issue_id, "labelId": label_id})
        return {"success": bool((data.get("issueAddLabel") or {}).get("success"))}

    # --- projects ---

    async def list_projects(self, first: int = 50) -> list[dict[str, Any]]:
        data = await self.graphql(queries.LIST_PROJECTS, {"first": first})
        return [project_to_record(node) for node in nodes_of(data.get("projects"))]

    async def get_project(self, project_id: str) -> dict[str, Any]:
        project = await self._entity(queries.GET_PROJECT, "project", project_id, "Project")
        return project_to_record(project)

    async def create_project_update(
        self, project_id: str, body: str, health: str
    ) -> dict[str, Any]:
        data = await self.graphql(
            queries.CREATE_PROJECT_UPDATE,
            {"input": {"projectId": project_id, "body": body, "health": health}},
        )
        update = (data.get("projectUpdateCreate") or {}).get("projectUpdate")
        if not update:
            raise VendorApiError(VENDOR, "Failed to create project update")
        return {"id": update.get("id")}

    # --- teams ---

    async def list_teams(self) -> list[dict[str, Any]]:
        data = await self.graphql(queries.LIST_TEAMS)
        return [team_to_record(node) for node in nodes_of(data.get("teams"))]

    async def get_team(self, team_id: str) -> dict[str, Any]:
        return team_to_record(await self._entity(queries.GET_TEAM, "team", team_id, "Team"))

    # --- comments ---

    async def list_comments(self, issue_id: str) -> list[dict[str, Any]]:
        issue = await self._entity(queries.LIST_COMMENTS, "issue", issue_id, "Issue")
        return [comment_to_record(node) for node in nodes_of(issue.get("comments"))]

    async def create_comment(self, issue_id: str, body: str) -> dict[str, Any]:
        data = await self.graphql(
            queries.CREATE_COMMENT, {"input": {"issueId": issue_id, "body": body}}
        )
        comment = (data.get("commentCreate") or {}).get("comment")
        if not comment:
            raise VendorApiError(VENDOR, "Failed to create comment")
        return {"id": comment.get("id")}

    # --- users ---

    async def get_viewer(self) -> dict[str, Any]:
        data = await self.graphql(queries.VIEWER)
        return user_to_record(data.get("viewer") or {})

    async def list_users(self, team_id: str | None = None) -> list[dict[str, Any]]:
        if team_id:
            team = await self._entity(queries.LIST_TEAM_MEMBERS, "team", team_id, "Team")
            nodes = nodes_of(team.get("members"))
        else:
            nodes = nodes_of((await self.graphql(queries.LIST_USERS)).get("users"))
        return [user_to_record(node) for node in nodes]

    # --- cycles ---

    async def list_cycles(self, team_id: str) -> list[dict[str, Any]]:
        team = await self._entity(queries.LIST_TEAM_CYCLES, "team", team_id, "Team")
        return [cycle_to_record(node) for node in nodes_of(team.get("cycles"))]

    async def get_cycle(self, cycle_id: str) -> dict[str, Any]:
        return cycle_to_record(await self._entity(queries.GET_CYCLE, "cycle", cycle_id, "Cycle"))

    # --- labels ---

    async def list_labels(self, team_id: str | None = None) -> list[dict[str, Any]]:
        if team_id:
            team = await self._entity(queries.LIST_TEAM_LABELS, "team", team_id, "Team")
            nodes = nodes_of(team.get("labels"))
        else:
            nodes = nodes_of((await self.graphql(queries.LIST_LABELS)).get("issueLabels"))
        return [label_to_record(node) for node in nodes]
