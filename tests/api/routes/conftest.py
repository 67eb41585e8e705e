"""Fixtures dos testes de rota: app Linear com cliente stub."""

from __future__ import annotations

from typing import Any

import httpx
import pytest
import pytest_asyncio

from app.app import create_app
from config.settings import load_linear_settings

TEAMS = [
    {
        "id": "t1",
        "key": "ENG",
        "name": "Engineering",
        "states": [{"id": "s1", "name": "Todo", "type": "unstarted"}],
    },
    {
        "id": "t2",
        "key": "OPS",
        "name": "Operations",
        "states": [{"id": "s2", "name": "Done", "type": "completed"}],
    },
]


class StubLinearClient:
    """Cliente Linear em memória; registra as chamadas recebidas."""

    teams = TEAMS

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []
        self.closed = False

    async def list_teams(self) -> list[dict[str, Any]]:
        self.calls.append(("list_teams", None))
        return TEAMS

    async def get_team(self, team_id: str) -> dict[str, Any]:
        self.calls.append(("get_team", team_id))
        return TEAMS[0]

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def stub_client() -> StubLinearClient:
    return StubLinearClient()


@pytest.fixture
def linear_app(stub_client: StubLinearClient):
    settings = load_linear_settings({"LINEAR_API_KEY": "lin_api_test", "MAX_BODY_BYTES": "512"})
    return create_app("linear", settings=settings, client=stub_client)


@pytest_asyncio.fixture
async def http_client(linear_app):
    transport = httpx.ASGITransport(app=linear_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://127.0.0.1") as client:
        yield client
