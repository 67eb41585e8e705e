"""Schemas de parâmetros do skill Slack."""

from __future__ import annotations

import re
from typing import Annotated, Any, Literal

from pydantic import AfterValidator, Field

from api.validators.common import ParamsModel

_SLACK_ID = re.compile(r"^[A-Z][A-Z0-9]{8,}$")
_TIMESTAMP = re.compile(r"^\d+\.\d+$")
_EMOJI = re.compile(r"^[a-z0-9_+-]+$")
_CHANNEL_NAME = re.compile(r"^[a-z0-9_-]{1,80}$")
_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

MAX_MESSAGE_LENGTH = 40000


def normalize_channel(value: str) -> str:
    """Aceita ID de canal (C…/G…/D…) ou `#nome-do-canal`."""
    candidate = value.strip()
    if _SLACK_ID.match(candidate.upper()):
        return candidate.upper()
    if candidate.startswith("#") and _CHANNEL_NAME.match(candidate[1:].lower()):
        return "#" + candidate[1:].lower()
    raise ValueError("Invalid channel ID. Use C/G prefix ID or #channel-name")


def normalize_user_id(value: str) -> str:
    candidate = value.strip().upper()
    if not _SLACK_ID.match(candidate):
        raise ValueError("Invalid user ID format. Must start with U/W and be 9+ chars")
    return candidate


def check_timestamp(value: str) -> str:
    if not _TIMESTAMP.match(value):
        raise ValueError("Invalid message timestamp. Format: 1234567890.123456")
    return value


def normalize_emoji(value: str) -> str:
    candidate = value.strip().strip(":").lower()
    if not _EMOJI.match(candidate):
        raise ValueError("Invalid emoji name. Use lowercase, numbers, underscores")
    return candidate


def check_channel_name(value: str) -> str:
    if not _CHANNEL_NAME.match(value):
        raise ValueError(
            "Invalid channel name. Use lowercase, numbers, hyphens, underscores (max 80 chars)"
        )
    return value


def check_email(value: str) -> str:
    if not _EMAIL.match(value):
        raise ValueError("Invalid email address")
    return value


ChannelId = Annotated[str, AfterValidator(normalize_channel)]
UserId = Annotated[str, AfterValidator(normalize_user_id)]
Timestamp = Annotated[str, AfterValidator(check_timestamp)]
EmojiName = Annotated[str, AfterValidator(normalize_emoji)]
ChannelName = Annotated[str, AfterValidator(check_channel_name)]
Email = Annotated[str, AfterValidator(check_email)]
Limit = Annotated[int, Field(ge=1, le=1000)]
MessageText = Annotated[str, Field(min_length=1, max_length=MAX_MESSAGE_LENGTH)]
ChannelType = Literal["public_channel", "private_channel", "mpim", "im"]


# --- channels ---


class ChannelsListParams(ParamsModel):
    types: list[ChannelType] | None = None
    limit: Limit | None = None


class ChannelRef(ParamsModel):
    channel_id: ChannelId


class ChannelsMembersParams(ParamsModel):
    channel_id: ChannelId
    limit: Limit | None = None


class ChannelsCreateParams(ParamsModel):
    name: ChannelName
    is_private: bool | None = None


# --- messages ---


class MessagesPostParams(ParamsModel):
    channel: ChannelId
    text: MessageText
    blocks: list[Any] | None = None
    thread_ts: Timestamp | None = None


class MessagesUpdateParams(ParamsModel):
    channel: ChannelId
    ts: Timestamp
    text: MessageText
    blocks: list[Any] | None = None


class MessagesDeleteParams(ParamsModel):
    channel: ChannelId
    ts: Timestamp


class MessagesHistoryParams(ParamsModel):
    channel: ChannelId
    limit: Limit | None = None
    oldest: Timestamp | None = None
    latest: Timestamp | None = None


class MessagesRepliesParams(MessagesHistoryParams):
    ts: Timestamp


# --- users ---


class UsersListParams(ParamsModel):
    limit: Limit | None = None


class UserRef(ParamsModel):
    user_id: UserId


class UsersLookupParams(ParamsModel):
    email: Email


# --- reactions ---


class ReactionTarget(ParamsModel):
    channel: ChannelId
    timestamp: Timestamp


class ReactionParams(ReactionTarget):
    name: EmojiName


# --- files ---


class FilesListParams(ParamsModel):
    channel: ChannelId | None = None
    limit: Limit | None = None


class FileRef(ParamsModel):
    file_id: Annotated[str, Field(min_length=1)]
