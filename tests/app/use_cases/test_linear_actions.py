"""Testes dos handlers Linear que reaproveitam issueUpdate."""

from __future__ import annotations

from typing import Any

import pytest

from app.dispatch import ActionRouter
from app.use_cases.linear import LINEAR_ACTIONS

UUID = "8f3a1c2e-4b5d-4e6f-9a0b-1c2d3e4f5a6b"


class UpdateRecorder:
    def __init__(self) -> None:
        self.updates: list[tuple[str, dict[str, Any]]] = []

    async def update_issue(self, issue_id: str, **changes: Any) -> dict[str, Any]:
        self.updates.append((issue_id, changes))
        return {"id": UUID, "identifier": issue_id}


@pytest.mark.asyncio
async def test_assign_sets_only_assignee() -> None:
    client = UpdateRecorder()
    router = ActionRouter("linear", LINEAR_ACTIONS, client)

    await router.dispatch("issues", "assign", {"issueId": "eng-7", "assigneeId": UUID.upper()})

    assert client.updates == [("ENG-7", {"assignee_id": UUID})]


@pytest.mark.asyncio
async def test_set_cycle_sets_only_cycle() -> None:
    client = UpdateRecorder()
    router = ActionRouter("linear", LINEAR_ACTIONS, client)

    await router.dispatch("issues", "set_cycle", {"issueId": "ENG-7", "cycleId": UUID})

    assert client.updates == [("ENG-7", {"cycle_id": UUID})]


@pytest.mark.asyncio
async def test_update_sends_only_provided_fields() -> None:
    client = UpdateRecorder()
    router = ActionRouter("linear", LINEAR_ACTIONS, client)

    await router.dispatch("issues", "update", {"issueId": "ENG-7", "title": "New", "priority": 1})

    assert client.updates == [("ENG-7", {"title": "New", "priority": 1})]
