"""Cliente da Slack Web API (métodos `conversations.*`, `chat.*`, etc.)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.http_base import HttpClientConfig, VendorHttpClient, response_payload
from api.connectors.slack.errors import VENDOR, parse_slack_error
from utils.errors import VendorApiError

if TYPE_CHECKING:
    from config.settings import SlackSettings

DEFAULT_CHANNEL_TYPES = ("public_channel", "private_channel")


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, dict)):
        return json.dumps(value)
    return str(value)


def map_channel(channel: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": channel.get("id"),
        "name": channel.get("name"),
        "isPrivate": bool(channel.get("is_private")),
        "isArchived": bool(channel.get("is_archived")),
        "isMember": bool(channel.get("is_member")),
        "numMembers": channel.get("num_members"),
        "topic": (channel.get("topic") or {}).get("value"),
        "purpose": (channel.get("purpose") or {}).get("value"),
        "created": channel.get("created"),
    }


def map_message(message: dict[str, Any]) -> dict[str, Any]:
    return {
        "ts": message.get("ts"),
        "text": message.get("text"),
        "userId": message.get("user"),
        "threadTs": message.get("thread_ts"),
        "replyCount": message.get("reply_count"),
        "reactions": message.get("reactions") or [],
    }


def map_user(user: dict[str, Any]) -> dict[str, Any]:
    profile = user.get("profile") or {}
    return {
        "id": user.get("id"),
        "name": user.get("name"),
        "realName": user.get("real_name") or profile.get("real_name") or "",
        "displayName": profile.get("display_name") or user.get("name") or "",
        "email": profile.get("email"),
        "isBot": bool(user.get("is_bot")),
        "isAdmin": bool(user.get("is_admin")),
        "timezone": user.get("tz"),
        "avatarUrl": profile.get("image_72"),
    }


def map_file(file: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": file.get("id"),
        "name": file.get("name"),
        "title": file.get("title"),
        "mimetype": file.get("mimetype"),
        "size": file.get("size"),
        "urlPrivate": file.get("url_private"),
        "created": file.get("created"),
        "userId": file.get("user"),
    }


class SlackClient(VendorHttpClient):
    """Operações da Slack Web API usadas pelo proxy."""

    vendor = VENDOR

    def __init__(
        self,
        bot_token: str,
        base_url: str = "https://slack.com/api",
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        config = HttpClientConfig(
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            default_headers={"Authorization": f"Bearer {bot_token}"},
        )
        super().__init__(config, transport=transport)

    @classmethod
    def from_settings(cls, settings: SlackSettings) -> SlackClient:
        return cls(
            bot_token=settings.bot_token,
            base_url=settings.api_base_url,
            timeout_seconds=settings.request_timeout_seconds,
        )

    def error_from_response(self, response: httpx.Response) -> VendorApiError:
        parsed = parse_slack_error(response.status_code, response_payload(response))
        if parsed is not None:
            return parsed
        return super().error_from_response(response)

    async def call(self, method: str, **fields: Any) -> dict[str, Any]:
        """Chama um método da Web API (form-encoded) e valida `ok`.

        Campos None são omitidos; listas/dicts vão como JSON.

        Raises:
            VendorApiError: Resposta com `ok: false`.
        """
        form = {key: _form_value(value) for key, value in fields.items() if value is not None}
        payload = await self.request_json("POST", f"/{method}", data=form)
        if not isinstance(payload, dict):
            raise VendorApiError(VENDOR, "Unexpected Slack response")
        error = parse_slack_error(200, payload)
        if error is not None:
            raise error
        return payload

    # --- channels ---

    async def list_channels(
        self, types: list[str] | None = None, limit: int | None = None
    ) -> list[dict[str, Any]]:
        result = await self.call(
            "conversations.list",
            types=",".join(types or DEFAULT_CHANNEL_TYPES),
            limit=limit or 100,
            exclude_archived=True,
        )
        return [map_channel(channel) for channel in result.get("channels") or []]

    async def channel_info(self, channel_id: str) -> dict[str, Any]:
        result = await self.call("conversations.info", channel=channel_id)
        return map_channel(result.get("channel") or {})

    async def channel_members(self, channel_id: str, limit: int | None = None) -> list[str]:
        result = await self.call("conversations.members", channel=channel_id, limit=limit or 100)
        return list(result.get("members") or [])

    async def create_channel(self, name: str, is_private: bool = False) -> dict[str, Any]:
        result = await self.call("conversations.create", name=name, is_private=is_private)
        return map_channel(result.get("channel") or {})

    async def archive_channel(self, channel_id: str) -> dict[str, Any]:
        await self.call("conversations.archive", channel=channel_id)
        return {"success": True}

    async def join_channel(self, channel_id: str) -> dict[str, Any]:
        result = await self.call("conversations.join", channel=channel_id)
        return map_channel(result.get("channel") or {})

    # --- messages ---

    async def post_message(
        self,
        channel: str,
        text: str,
        blocks: list[Any] | None = None,
        thread_ts: str | None = None,
    ) -> dict[str, Any]:
        result = await self.call(
            "chat.postMessage", channel=channel, text=text, blocks=blocks, thread_ts=thread_ts
        )
        return {"ts": result.get("ts"), "channel": result.get("channel")}

    async def update_message(
        self, channel: str, ts: str, text: str, blocks: list[Any] | None = None
    ) -> dict[str, Any]:
        result = await self.call("chat.update", channel=channel, ts=ts, text=text, blocks=blocks)
        return {"ts": result.get("ts"), "channel": result.get("channel")}

    async def delete_message(self, channel: str, ts: str) -> dict[str, Any]:
        await self.call("chat.delete", channel=channel, ts=ts)
        return {"success": True}

    async def history(
        self,
        channel: str,
        limit: int | None = None,
        oldest: str | None = None,
        latest: str | None = None,
    ) -> list[dict[str, Any]]:
        result = await self.call(
            "conversations.history",
            channel=channel,
            limit=limit or 50,
            oldest=oldest,
            latest=latest,
        )
        return [map_message(message) for message in result.get("messages") or []]

    async def replies(
        self,
        channel: str,
        ts: str,
        limit: int | None = None,
        oldest: str | None = None,
        latest: str | None = None,
    ) -> list[dict[str, Any]]:
        result = await self.call(
            "conversations.replies",
            channel=channel,
            ts=ts,
            limit=limit or 50,
            oldest=oldest,
            latest=latest,
        )
        return [map_message(message) for message in result.get("messages") or []]

    # --- users ---

    async def list_users(self, limit: int | None = None) -> list[dict[str, Any]]:
        result = await self.call("users.list", limit=limit or 100)
        return [map_user(user) for user in result.get("members") or [] if not user.get("deleted")]

    async def user_info(self, user_id: str) -> dict[str, Any]:
        result = await self.call("users.info", user=user_id)
        return map_user(result.get("user") or {})

    async def lookup_user_by_email(self, email: str) -> dict[str, Any]:
        result = await self.call("users.lookupByEmail", email=email)
        return map_user(result.get("user") or {})

    async def me(self) -> dict[str, Any]:
        auth = await self.call("auth.test")
        return await self.user_info(str(auth.get("user_id")))

    # --- reactions ---

    async def add_reaction(self, channel: str, timestamp: str, name: str) -> dict[str, Any]:
        await self.call("reactions.add", channel=channel, timestamp=timestamp, name=name)
        return {"success": True}

    async def remove_reaction(self, channel: str, timestamp: str, name: str) -> dict[str, Any]:
        await self.call("reactions.remove", channel=channel, timestamp=timestamp, name=name)
        return {"success": True}

    async def get_reactions(self, channel: str, timestamp: str) -> list[dict[str, Any]]:
        result = await self.call("reactions.get", channel=channel, timestamp=timestamp, full=True)
        return list((result.get("message") or {}).get("reactions") or [])

    # --- files ---

    async def list_files(
        self, channel: str | None = None, limit: int | None = None
    ) -> list[dict[str, Any]]:
        result = await self.call("files.list", channel=channel, count=limit or 50)
        return [map_file(file) for file in result.get("files") or []]

    async def file_info(self, file_id: str) -> dict[str, Any]:
        result = await self.call("files.info", file=file_id)
        return map_file(result.get("file") or {})
