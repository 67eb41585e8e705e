"""Testes do SlackClient: `ok: false` vira VendorApiError com o código."""

from __future__ import annotations

from urllib.parse import parse_qs

import httpx
import pytest

from api.connectors.slack import SlackClient, build_slack_sanitizer
from utils.errors import VendorApiError


def _client(handler) -> SlackClient:
    return SlackClient(bot_token="xoxb-test", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_ok_false_raises_with_code() -> None:
    client = _client(
        lambda request: httpx.Response(200, json={"ok": False, "error": "channel_not_found"})
    )
    with pytest.raises(VendorApiError) as exc_info:
        await client.channel_info("C404")
    await client.aclose()

    error = exc_info.value
    assert error.code == "channel_not_found"
    sanitized = build_slack_sanitizer().sanitize(error)
    assert sanitized.status == 404
    assert sanitized.message == "Channel not found or bot lacks access."


@pytest.mark.asyncio
async def test_post_message_form_omits_none_fields() -> None:
    forms: list[dict[str, list[str]]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        forms.append(parse_qs(request.content.decode()))
        return httpx.Response(200, json={"ok": True, "ts": "1.0", "channel": "C1"})

    client = _client(handler)
    result = await client.post_message("C1", "hello", blocks=[{"type": "divider"}])
    await client.aclose()

    assert result == {"ts": "1.0", "channel": "C1"}
    assert forms[0]["channel"] == ["C1"]
    assert forms[0]["blocks"] == ['[{"type": "divider"}]']
    assert "thread_ts" not in forms[0]


@pytest.mark.asyncio
async def test_list_users_skips_deleted_members() -> None:
    members = [
        {"id": "U1", "name": "ana", "profile": {"email": "ana@example.com"}},
        {"id": "U2", "name": "old", "deleted": True},
    ]
    client = _client(lambda request: httpx.Response(200, json={"ok": True, "members": members}))
    users = await client.list_users()
    await client.aclose()

    assert [user["id"] for user in users] == ["U1"]
    assert users[0]["email"] == "ana@example.com"


@pytest.mark.asyncio
async def test_me_resolves_auth_user() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("auth.test"):
            return httpx.Response(200, json={"ok": True, "user_id": "U9"})
        assert parse_qs(request.content.decode())["user"] == ["U9"]
        return httpx.Response(200, json={"ok": True, "user": {"id": "U9", "name": "bot"}})

    client = _client(handler)
    me = await client.me()
    await client.aclose()

    assert me["id"] == "U9"


@pytest.mark.asyncio
async def test_http_rate_limit_keeps_status() -> None:
    client = _client(
        lambda request: httpx.Response(429, json={"ok": False, "error": "ratelimited"})
    )
    with pytest.raises(VendorApiError) as exc_info:
        await client.list_channels()
    await client.aclose()

    assert exc_info.value.status_code == 429
