"""Achatamento dos nós GraphQL do Linear em registros estáveis."""

from __future__ import annotations

from typing import Any

from api.validators.linear import PRIORITY_LABELS

Node = dict[str, Any]


def _nodes(connection: Node | None) -> list[Node]:
    if not connection:
        return []
    return [node for node in connection.get("nodes") or [] if isinstance(node, dict)]


def _ref(node: Node | None, *fields: str) -> Node | None:
    if not node:
        return None
    return {name: node.get(name) for name in fields}


def issue_to_record(node: Node) -> Node:
    priority = node.get("priority")
    return {
        "id": node.get("id"),
        "identifier": node.get("identifier"),
        "title": node.get("title"),
        "description": node.get("description"),
        "priority": priority,
        "priorityLabel": PRIORITY_LABELS.get(priority, "Unknown"),
        "state": _ref(node.get("state"), "id", "name", "type"),
        "assignee": _ref(node.get("assignee"), "id", "name", "email"),
        "team": _ref(node.get("team"), "id", "key", "name"),
        "labels": [_ref(label, "id", "name", "color") for label in _nodes(node.get("labels"))],
        "url": node.get("url"),
        "createdAt": node.get("createdAt"),
        "updatedAt": node.get("updatedAt"),
    }


def project_to_record(node: Node) -> Node:
    return {
        "id": node.get("id"),
        "name": node.get("name"),
        "description": node.get("description"),
        "state": node.get("state"),
        "progress": node.get("progress"),
        "targetDate": node.get("targetDate"),
        "url": node.get("url"),
    }


def team_to_record(node: Node) -> Node:
    states = sorted(_nodes(node.get("states")), key=lambda state: state.get("position") or 0)
    return {
        "id": node.get("id"),
        "key": node.get("key"),
        "name": node.get("name"),
        "description": node.get("description"),
        "states": [_ref(state, "id", "name", "type", "color", "position") for state in states],
    }


def user_to_record(node: Node) -> Node:
    return {
        "id": node.get("id"),
        "name": node.get("name"),
        "email": node.get("email"),
        "displayName": node.get("displayName"),
        "avatarUrl": node.get("avatarUrl"),
        "admin": node.get("admin"),
    }


def cycle_to_record(node: Node) -> Node:
    return {
        "id": node.get("id"),
        "name": node.get("name"),
        "number": node.get("number"),
        "startsAt": node.get("startsAt"),
        "endsAt": node.get("endsAt"),
        "progress": node.get("progress"),
        "issueCountHistory": node.get("issueCountHistory") or [],
    }


def label_to_record(node: Node) -> Node:
    return {
        "id": node.get("id"),
        "name": node.get("name"),
        "color": node.get("color"),
        "description": node.get("description"),
    }


def comment_to_record(node: Node) -> Node:
    return {
        "id": node.get("id"),
        "body": node.get("body"),
        "createdAt": node.get("createdAt"),
        "user": _ref(node.get("user"), "id", "name"),
    }


def nodes_of(connection: Node | None) -> list[Node]:
    """Lista `nodes` de uma connection GraphQL (vazia se ausente)."""
    return _nodes(connection)
