"""The chat screen: user list, message history and the message box."""

from __future__ import annotations

import asyncio
import html
import logging
from typing import Protocol

from yewchat.event_bus import EventBus
from yewchat.protocol import (
    MessageData,
    MsgType,
    UserProfile,
    WebSocketMessage,
    decode_message,
    decode_message_data,
    encode_message,
)

logger = logging.getLogger(__name__)


class _HasUsername(Protocol):
    username: str


class _Sender(Protocol):
    def try_send(self, text: str) -> None: ...


_SEND_ERRORS = (RuntimeError, asyncio.QueueFull)


class Chat:
    """Keeps the users and messages the server announces and sends new messages."""

    def __init__(self, user: _HasUsername, service: _Sender, event_bus: EventBus) -> None:
        self.user = user
        self.users: list[UserProfile] = []
        self.messages: list[MessageData] = []
        self._service = service
        self._event_bus = event_bus

        register = WebSocketMessage(message_type=MsgType.REGISTER, data=user.username)
        try:
            service.try_send(encode_message(register))
        except _SEND_ERRORS as exc:
            logger.debug("could not register: %r", exc)
        else:
            logger.debug("message sent successfully")

        self._handler_id: int | None = event_bus.connect(self.handle_message)

    def handle_message(self, raw: str) -> bool:
        """Apply a message from the server; return True when the view changed.

        Raises ValueError if the message is malformed.
        """
        message = decode_message(raw)
        if message.message_type is MsgType.USERS:
            self.users = [UserProfile.from_name(name) for name in message.data_array or []]
            return True
        if message.message_type is MsgType.MESSAGE:
            if message.data is None:
                raise ValueError("message without data")
            self.messages.append(decode_message_data(message.data))
            return True
        return False

    def submit_message(self, text: str) -> bool:
        """Send a chat line to the server; return whether it was queued."""
        message = WebSocketMessage(message_type=MsgType.MESSAGE, data=text)
        try:
            self._service.try_send(encode_message(message))
        except _SEND_ERRORS as exc:
            logger.debug("error sending to channel: %r", exc)
            return False
        return True

    def _profile_of(self, name: str) -> UserProfile:
        for profile in self.users:
            if profile.name == name:
                return profile
        raise LookupError(f"message from unknown user {name!r}")

    def _render_user(self, profile: UserProfile) -> str:
        return (
            '<div class="flex m-3 bg-white rounded-lg p-2">'
            f'<div><img class="w-12 h-12 rounded-full" src="{html.escape(profile.avatar)}" alt="avatar"/></div>'
            '<div class="flex-grow p-3">'
            f'<div class="flex text-xs justify-between"><div>{html.escape(profile.name)}</div></div>'
            '<div class="text-xs text-gray-400">Hi there!</div>'
            "</div></div>"
        )

    def _render_message(self, message: MessageData) -> str:
        profile = self._profile_of(message.sender)
        if message.message.endswith(".gif"):
            body = f'<img class="mt-3" src="{html.escape(message.message)}"/>'
        else:
            body = html.escape(message.message)
        return (
            '<div class="flex items-end w-3/6 bg-purple-100 m-8 rounded-tl-lg rounded-tr-lg rounded-br-lg ">'
            f'<img class="w-8 h-8 rounded-full m-3" src="{html.escape(profile.avatar)}" alt="avatar"/>'
            '<div class="p-3">'
            f'<div class="text-sm">{html.escape(message.sender)}</div>'
            f'<div class="text-xs text-gray-500">{body}</div>'
            "</div></div>"
        )

    def render(self) -> str:
        """Return the chat screen as HTML.

        Raises LookupError if a message comes from a user not in the list.
        """
        users = "".join(self._render_user(profile) for profile in self.users)
        messages = "".join(self._render_message(message) for message in self.messages)
        return (
            '<div class="flex w-screen">'
            '<div class="flex-none w-56 h-screen bg-purple-100">'
            '<div class="text-xl p-3 text-purple-700">Users</div>'
            f"{users}</div>"
            '<div class="grow h-screen flex flex-col">'
            '<div class="w-full h-14 border-b-2 border-purple-300">'
            '<div class="text-xl p-3 text-purple-700">💬 Chat!</div></div>'
            f'<div class="w-full grow overflow-auto border-b-2 border-purple-300">{messages}</div>'
            '<div class="w-full h-14 flex px-3 items-center">'
            '<input type="text" placeholder="Message" name="message" required/>'
            "<button>Send</button>"
            "</div></div></div>"
        )

    def close(self) -> None:
        """Stop listening to the event bus."""
        if self._handler_id is not None:
            self._event_bus.disconnect(self._handler_id)
            self._handler_id = None