"""Testes dos schemas Slack."""

from __future__ import annotations

import pytest

from api.validators import ParseFailure, ParseSuccess, parse_params
from api.validators.slack import (
    ChannelsCreateParams,
    MessagesHistoryParams,
    ReactionParams,
    UsersLookupParams,
    normalize_channel,
    normalize_emoji,
    normalize_user_id,
)


class TestChannel:
    def test_id_uppercased(self) -> None:
        assert normalize_channel("c0123abcd") == "C0123ABCD"

    def test_channel_name_accepted(self) -> None:
        assert normalize_channel("#General") == "#general"

    @pytest.mark.parametrize("raw", ["general", "#", "C1", "#bad name"])
    def test_invalid(self, raw: str) -> None:
        with pytest.raises(ValueError, match="Invalid channel ID"):
            normalize_channel(raw)


def test_user_id() -> None:
    assert normalize_user_id("u0123abcd") == "U0123ABCD"
    with pytest.raises(ValueError):
        normalize_user_id("bob")


@pytest.mark.parametrize("raw", [":Thumbsup:", "thumbsup", "THUMBSUP"])
def test_emoji_normalized(raw: str) -> None:
    assert normalize_emoji(raw) == "thumbsup"


@pytest.mark.parametrize("limit", [0, 1001])
def test_limit_rejected_not_clamped(limit: int) -> None:
    result = parse_params(MessagesHistoryParams, {"channel": "C0123ABCD", "limit": limit})
    assert isinstance(result, ParseFailure)


def test_timestamp_format() -> None:
    ok = parse_params(
        ReactionParams, {"channel": "C0123ABCD", "timestamp": "1700000000.000100", "name": "tada"}
    )
    bad = parse_params(
        ReactionParams, {"channel": "C0123ABCD", "timestamp": "yesterday", "name": "tada"}
    )
    assert isinstance(ok, ParseSuccess)
    assert isinstance(bad, ParseFailure)
    assert "timestamp" in bad.message


def test_channel_name_rules() -> None:
    assert isinstance(parse_params(ChannelsCreateParams, {"name": "team-eng"}), ParseSuccess)
    assert isinstance(parse_params(ChannelsCreateParams, {"name": "Team Eng"}), ParseFailure)


def test_email_lookup() -> None:
    assert isinstance(parse_params(UsersLookupParams, {"email": "a@b.co"}), ParseSuccess)
    assert isinstance(parse_params(UsersLookupParams, {"email": "not-an-email"}), ParseFailure)
