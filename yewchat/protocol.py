"""Wire format of the chat protocol spoken over the websocket."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

AVATAR_URL_TEMPLATE = "https://avatars.dicebear.com/api/adventurer-neutral/{}.svg"


class MsgType(str, Enum):
    """Kinds of message exchanged with the chat server."""

    USERS = "users"
    REGISTER = "register"
    MESSAGE = "message"


@dataclass(frozen=True)
class WebSocketMessage:
    """A protocol envelope: a type plus an optional list or string payload."""

    message_type: MsgType
    data_array: list[str] | None = None
    data: str | None = None


@dataclass(frozen=True)
class MessageData:
    """A chat line: who sent it and what it says."""

    sender: str
    message: str


@dataclass(frozen=True)
class UserProfile:
    """A connected user as shown in the user list."""

    name: str
    avatar: str

    @classmethod
    def from_name(cls, name: str) -> UserProfile:
        """Build a profile whose avatar is derived from the user name."""
        return cls(name=name, avatar=avatar_url(name))


def avatar_url(name: str) -> str:
    """Return the avatar image URL for a user name."""
    return AVATAR_URL_TEMPLATE.format(name)


def encode_message(message: WebSocketMessage) -> str:
    """Serialise an envelope to compact JSON with camelCase keys."""
    payload = {
        "messageType": MsgType(message.message_type).value,
        "dataArray": None if message.data_array is None else list(message.data_array),
        "data": message.data,
    }
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def _load_object(text: str | bytes) -> dict[str, Any]:
    value = json.loads(text)
    if not isinstance(value, dict):
        raise ValueError(f"expected a JSON object, got {type(value).__name__}")
    return value


def _optional_str(obj: dict[str, Any], key: str) -> str | None:
    value = obj.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string or null")
    return value


def _required_str(obj: dict[str, Any], key: str) -> str:
    if key not in obj:
        raise ValueError(f"missing field {key!r}")
    value = obj[key]
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def decode_message(text: str | bytes) -> WebSocketMessage:
    """Parse an envelope from JSON; raise ValueError if it is malformed."""
    obj = _load_object(text)
    raw_type = _required_str(obj, "messageType")
    try:
        message_type = MsgType(raw_type)
    except ValueError:
        raise ValueError(f"unknown message type {raw_type!r}") from None

    data_array = obj.get("dataArray")
    if data_array is not None:
        if not isinstance(data_array, list) or not all(isinstance(item, str) for item in data_array):
            raise ValueError("field 'dataArray' must be a list of strings or null")

    return WebSocketMessage(
        message_type=message_type,
        data_array=data_array,
        data=_optional_str(obj, "data"),
    )


def decode_message_data(text: str | bytes) -> MessageData:
    """Parse a chat line payload; raise ValueError if it is malformed."""
    obj = _load_object(text)
    return MessageData(sender=_required_str(obj, "from"), message=_required_str(obj, "message"))