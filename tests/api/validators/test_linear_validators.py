"""Testes dos schemas Linear (IDs em duas formas e faixas numéricas)."""

from __future__ import annotations

import pytest

from api.validators import ParseFailure, ParseSuccess, parse_params
from api.validators.linear import (
    IssueRef,
    IssuesCreateParams,
    IssuesListParams,
    ProjectsCreateUpdateParams,
    normalize_linear_id,
)

UUID_UPPER = "8F3A1C2E-4B5D-4E6F-9A0B-1C2D3E4F5A6B"
UUID_LOWER = UUID_UPPER.lower()


class TestNormalizeLinearId:
    def test_uuid_lowercased(self) -> None:
        assert normalize_linear_id(UUID_UPPER) == UUID_LOWER

    @pytest.mark.parametrize("raw", ["eng-123", "ENG-123", "Eng-123"])
    def test_issue_key_uppercased(self, raw: str) -> None:
        assert normalize_linear_id(raw) == "ENG-123"

    @pytest.mark.parametrize("raw", ["123", "ENG123", "ENG-", "not a uuid"])
    def test_invalid_formats(self, raw: str) -> None:
        with pytest.raises(ValueError, match="Invalid Linear ID format"):
            normalize_linear_id(raw)


def test_both_id_forms_reach_same_canonical_value() -> None:
    upper = parse_params(IssueRef, {"issueId": UUID_UPPER})
    lower = parse_params(IssueRef, {"issueId": UUID_LOWER})

    assert isinstance(upper, ParseSuccess)
    assert isinstance(lower, ParseSuccess)
    assert upper.value.issue_id == lower.value.issue_id == UUID_LOWER


class TestRanges:
    @pytest.mark.parametrize("first", [0, 101, -1])
    def test_page_size_rejected_not_clamped(self, first: int) -> None:
        assert isinstance(parse_params(IssuesListParams, {"first": first}), ParseFailure)

    def test_page_size_default(self) -> None:
        result = parse_params(IssuesListParams, {})
        assert isinstance(result, ParseSuccess)
        assert result.value.first == 50

    @pytest.mark.parametrize("priority", [-1, 5])
    def test_priority_out_of_range(self, priority: int) -> None:
        result = parse_params(
            IssuesCreateParams, {"teamId": UUID_LOWER, "title": "x", "priority": priority}
        )
        assert isinstance(result, ParseFailure)
        assert "priority" in result.message


def test_camel_case_wire_names() -> None:
    result = parse_params(
        IssuesCreateParams,
        {"teamId": UUID_LOWER, "title": "Bug", "labelIds": [UUID_UPPER], "assigneeId": "ENG-1"},
    )
    assert isinstance(result, ParseSuccess)
    assert result.value.label_ids == [UUID_LOWER]


def test_project_health_enum() -> None:
    params = {"projectId": UUID_LOWER, "body": "ok", "health": "sideways"}
    assert isinstance(parse_params(ProjectsCreateUpdateParams, params), ParseFailure)
