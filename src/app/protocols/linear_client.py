"""Contrato do cliente Linear usado pelos handlers de ação."""

from __future__ import annotations

from typing import Any, Protocol


class LinearClientProtocol(Protocol):
    """Operações Linear; leituras devolvem registros já resolvidos."""

    async def list_issues(
        self,
        *,
        team_id: str | None = None,
        team_key: str | None = None,
        assignee_id: str | None = None,
        state_id: str | None = None,
        first: int = 50,
    ) -> list[dict[str, Any]]: ...

    async def search_issues(self, query: str, first: int = 50) -> list[dict[str, Any]]: ...

    async def get_issue(self, issue_id: str) -> dict[str, Any]: ...

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
    ) -> dict[str, Any]: ...

    async def update_issue(self, issue_id: str, **changes: Any) -> dict[str, Any]: ...

    async def archive_issue(self, issue_id: str) -> dict[str, Any]: ...

    async def add_issue_label(self, issue_id: str, label_id: str) -> dict[str, Any]: ...

    async def list_projects(self, first: int = 50) -> list[dict[str, Any]]: ...

    async def get_project(self, project_id: str) -> dict[str, Any]: ...

    async def create_project_update(
        self, project_id: str, body: str, health: str
    ) -> dict[str, Any]: ...

    async def list_teams(self) -> list[dict[str, Any]]: ...

    async def get_team(self, team_id: str) -> dict[str, Any]: ...

    async def list_comments(self, issue_id: str) -> list[dict[str, Any]]: ...

    async def create_comment(self, issue_id: str, body: str) -> dict[str, Any]: ...

    async def get_viewer(self) -> dict[str, Any]: ...

    async def list_users(self, team_id: str | None = None) -> list[dict[str, Any]]: ...

    async def list_cycles(self, team_id: str) -> list[dict[str, Any]]: ...

    async def get_cycle(self, cycle_id: str) -> dict[str, Any]: ...

    async def list_labels(self, team_id: str | None = None) -> list[dict[str, Any]]: ...
