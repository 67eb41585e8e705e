"""Contrato do cliente Slack usado pelos handlers de ação."""

from __future__ import annotations

from typing import Any, Protocol


class SlackClientProtocol(Protocol):
    async def list_channels(
        self, types: list[str] | None = None, limit: int | None = None
    ) -> list[dict[str, Any]]: ...

    async def channel_info(self, channel_id: str) -> dict[str, Any]: ...

    async def channel_members(self, channel_id: str, limit: int | None = None) -> list[str]: ...

    async def create_channel(self, name: str, is_private: bool = False) -> dict[str, Any]: ...

    async def archive_channel(self, channel_id: str) -> dict[str, Any]: ...

    async def join_channel(self, channel_id: str) -> dict[str, Any]: ...

    async def post_message(
        self,
        channel: str,
        text: str,
        blocks: list[Any] | None = None,
        thread_ts: str | None = None,
    ) -> dict[str, Any]: ...

    async def update_message(
        self, channel: str, ts: str, text: str, blocks: list[Any] | None = None
    ) -> dict[str, Any]: ...

    async def delete_message(self, channel: str, ts: str) -> dict[str, Any]: ...

    async def history(
        self,
        channel: str,
        limit: int | None = None,
        oldest: str | None = None,
        latest: str | None = None,
    ) -> list[dict[str, Any]]: ...

    async def replies(
        self,
        channel: str,
        ts: str,
        limit: int | None = None,
        oldest: str | None = None,
        latest: str | None = None,
    ) -> list[dict[str, Any]]: ...

    async def list_users(self, limit: int | None = None) -> list[dict[str, Any]]: ...

    async def user_info(self, user_id: str) -> dict[str, Any]: ...

    async def lookup_user_by_email(self, email: str) -> dict[str, Any]: ...

    async def me(self) -> dict[str, Any]: ...

    async def add_reaction(self, channel: str, timestamp: str, name: str) -> dict[str, Any]: ...

    async def remove_reaction(self, channel: str, timestamp: str, name: str) -> dict[str, Any]: ...

    async def get_reactions(self, channel: str, timestamp: str) -> list[dict[str, Any]]: ...

    async def list_files(
        self, channel: str | None = None, limit: int | None = None
    ) -> list[dict[str, Any]]: ...

    async def file_info(self, file_id: str) -> dict[str, Any]: ...
