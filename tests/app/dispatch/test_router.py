"""Testes do ActionRouter (tabela de comandos + validação antes do fornecedor)."""

from __future__ import annotations

from typing import Any

import pytest

from api.validators import EmptyParams
from api.validators.linear import TeamRef
from app.dispatch import ActionRouter, ActionSpec
from app.use_cases.linear import LINEAR_ACTIONS
from utils.errors import ActionValidationError, UnknownActionError, UnknownCategoryError


class CountingClient:
    """Cliente stub que conta chamadas."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    async def list_teams(self) -> list[dict[str, Any]]:
        self.calls.append(("list_teams", None))
        return [{"id": "t1"}]

    async def get_team(self, team_id: str) -> dict[str, Any]:
        self.calls.append(("get_team", team_id))
        return {"id": team_id}


async def _list_teams(client: CountingClient, params: EmptyParams) -> Any:
    return await client.list_teams()


async def _get_team(client: CountingClient, params: TeamRef) -> Any:
    return await client.get_team(params.team_id)


TABLE = {
    "teams": {
        "list": ActionSpec(EmptyParams, _list_teams),
        "get": ActionSpec(TeamRef, _get_team),
    },
    "cycles": {
        "list": ActionSpec(TeamRef, _get_team),
    },
}


@pytest.fixture
def client() -> CountingClient:
    return CountingClient()


@pytest.fixture
def router(client: CountingClient) -> ActionRouter[CountingClient]:
    return ActionRouter("linear", TABLE, client)


@pytest.mark.asyncio
async def test_dispatch_calls_handler(router: ActionRouter, client: CountingClient) -> None:
    assert await router.dispatch("teams", "list", {}) == [{"id": "t1"}]
    assert client.calls == [("list_teams", None)]


@pytest.mark.asyncio
async def test_params_reach_handler_in_canonical_form(
    router: ActionRouter, client: CountingClient
) -> None:
    await router.dispatch("teams", "get", {"teamId": "eng-42"})
    assert client.calls == [("get_team", "ENG-42")]


@pytest.mark.asyncio
async def test_unknown_category_never_reaches_client(
    router: ActionRouter, client: CountingClient
) -> None:
    with pytest.raises(UnknownCategoryError) as exc_info:
        await router.dispatch("wiki", "list", {})

    assert str(exc_info.value) == "Unknown category: wiki. Available: teams, cycles"
    assert client.calls == []


@pytest.mark.asyncio
async def test_unknown_action_never_reaches_client(
    router: ActionRouter, client: CountingClient
) -> None:
    with pytest.raises(UnknownActionError) as exc_info:
        await router.dispatch("teams", "delete", {})

    assert str(exc_info.value) == "Unknown action: delete. Available in teams: list, get"
    assert client.calls == []


@pytest.mark.asyncio
async def test_invalid_params_never_reach_client(
    router: ActionRouter, client: CountingClient
) -> None:
    with pytest.raises(ActionValidationError, match="teamId"):
        await router.dispatch("teams", "get", {"teamId": "nope"})
    assert client.calls == []


def test_catalog_preserves_declaration_order(router: ActionRouter) -> None:
    assert router.catalog() == {"teams": ["list", "get"], "cycles": ["list"]}


class TestTableChecks:
    def test_empty_table_rejected(self, client: CountingClient) -> None:
        with pytest.raises(ValueError, match="no categories"):
            ActionRouter("linear", {}, client)

    def test_empty_category_rejected(self, client: CountingClient) -> None:
        with pytest.raises(ValueError, match="'teams' declares no actions"):
            ActionRouter("linear", {"teams": {}}, client)

    def test_sync_handler_rejected(self, client: CountingClient) -> None:
        def sync_handler(client: Any, params: Any) -> Any:
            return None

        table = {"teams": {"list": ActionSpec(EmptyParams, sync_handler)}}
        with pytest.raises(ValueError, match="must be async"):
            ActionRouter("linear", table, client)

    def test_missing_params_model_rejected(self, client: CountingClient) -> None:
        table = {"teams": {"list": ActionSpec(dict, _list_teams)}}
        with pytest.raises(ValueError, match="no params model"):
            ActionRouter("linear", table, client)

    def test_linear_table_is_complete(self, client: CountingClient) -> None:
        router = ActionRouter("linear", LINEAR_ACTIONS, client)
        assert router.catalog() == {
            "issues": [
                "list",
                "search",
                "get",
                "create",
                "update",
                "archive",
                "assign",
                "add_label",
                "set_cycle",
            ],
            "projects": ["list", "get", "create_update"],
            "teams": ["list", "get"],
            "comments": ["list", "create"],
            "users": ["me", "list"],
            "cycles": ["list", "get"],
            "labels": ["list"],
        }
