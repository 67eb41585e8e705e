"""Tabela de ações do proxy Slack."""

from __future__ import annotations

from typing import Any

from api.validators import EmptyParams
from api.validators import slack as schemas
from app.dispatch import ActionSpec, ActionTable
from app.protocols import SlackClientProtocol


# --- channels ---


async def list_channels(client: SlackClientProtocol, params: schemas.ChannelsListParams) -> Any:
    return await client.list_channels(types=params.types, limit=params.limit)


async def channel_info(client: SlackClientProtocol, params: schemas.ChannelRef) -> Any:
    return await client.channel_info(params.channel_id)


async def channel_members(
    client: SlackClientProtocol, params: schemas.ChannelsMembersParams
) -> Any:
    return await client.channel_members(params.channel_id, limit=params.limit)


async def create_channel(client: SlackClientProtocol, params: schemas.ChannelsCreateParams) -> Any:
    return await client.create_channel(params.name, is_private=bool(params.is_private))


async def archive_channel(client: SlackClientProtocol, params: schemas.ChannelRef) -> Any:
    return await client.archive_channel(params.channel_id)


async def join_channel(client: SlackClientProtocol, params: schemas.ChannelRef) -> Any:
    return await client.join_channel(params.channel_id)


# --- messages ---


async def post_message(client: SlackClientProtocol, params: schemas.MessagesPostParams) -> Any:
    return await client.post_message(
        params.channel, params.text, blocks=params.blocks, thread_ts=params.thread_ts
    )


async def update_message(client: SlackClientProtocol, params: schemas.MessagesUpdateParams) -> Any:
    return await client.update_message(params.channel, params.ts, params.text, blocks=params.blocks)


async def delete_message(client: SlackClientProtocol, params: schemas.MessagesDeleteParams) -> Any:
    return await client.delete_message(params.channel, params.ts)


async def message_history(
    client: SlackClientProtocol, params: schemas.MessagesHistoryParams
) -> Any:
    return await client.history(
        params.channel, limit=params.limit, oldest=params.oldest, latest=params.latest
    )


async def message_replies(
    client: SlackClientProtocol, params: schemas.MessagesRepliesParams
) -> Any:
    return await client.replies(
        params.channel,
        params.ts,
        limit=params.limit,
        oldest=params.oldest,
        latest=params.latest,
    )


# --- users ---


async def list_users(client: SlackClientProtocol, params: schemas.UsersListParams) -> Any:
    return await client.list_users(limit=params.limit)


async def user_info(client: SlackClientProtocol, params: schemas.UserRef) -> Any:
    return await client.user_info(params.user_id)


async def lookup_user(client: SlackClientProtocol, params: schemas.UsersLookupParams) -> Any:
    return await client.lookup_user_by_email(params.email)


async def me(client: SlackClientProtocol, params: EmptyParams) -> Any:
    return await client.me()


# --- reactions / files ---


async def add_reaction(client: SlackClientProtocol, params: schemas.ReactionParams) -> Any:
    return await client.add_reaction(params.channel, params.timestamp, params.name)


async def remove_reaction(client: SlackClientProtocol, params: schemas.ReactionParams) -> Any:
    return await client.remove_reaction(params.channel, params.timestamp, params.name)


async def get_reactions(client: SlackClientProtocol, params: schemas.ReactionTarget) -> Any:
    return await client.get_reactions(params.channel, params.timestamp)


async def list_files(client: SlackClientProtocol, params: schemas.FilesListParams) -> Any:
    return await client.list_files(channel=params.channel, limit=params.limit)


async def file_info(client: SlackClientProtocol, params: schemas.FileRef) -> Any:
    return await client.file_info(params.file_id)


SLACK_ACTIONS: ActionTable = {
    "channels": {
        "list": ActionSpec(schemas.ChannelsListParams, list_channels),
        "info": ActionSpec(schemas.ChannelRef, channel_info),
        "members": ActionSpec(schemas.ChannelsMembersParams, channel_members),
        "create": ActionSpec(schemas.ChannelsCreateParams, create_channel),
        "archive": ActionSpec(schemas.ChannelRef, archive_channel),
        "join": ActionSpec(schemas.ChannelRef, join_channel),
    },
    "messages": {
        "post": ActionSpec(schemas.MessagesPostParams, post_message),
        "update": ActionSpec(schemas.MessagesUpdateParams, update_message),
        "delete": ActionSpec(schemas.MessagesDeleteParams, delete_message),
        "history": ActionSpec(schemas.MessagesHistoryParams, message_history),
        "replies": ActionSpec(schemas.MessagesRepliesParams, message_replies),
    },
    "users": {
        "list": ActionSpec(schemas.UsersListParams, list_users),
        "info": ActionSpec(schemas.UserRef, user_info),
        "lookup_by_email": ActionSpec(schemas.UsersLookupParams, lookup_user),
        "me": ActionSpec(EmptyParams, me),
    },
    "reactions": {
        "add": ActionSpec(schemas.ReactionParams, add_reaction),
        "remove": ActionSpec(schemas.ReactionParams, remove_reaction),
        "get": ActionSpec(schemas.ReactionTarget, get_reactions),
    },
    "files": {
        "list": ActionSpec(schemas.FilesListParams, list_files),
        "info": ActionSpec(schemas.FileRef, file_info),
    },
}
