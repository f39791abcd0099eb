"""Application shell: routes, the shared user, the login form and the command."""

from __future__ import annotations

import argparse
import asyncio
import sys
import threading
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from yewchat.chat import Chat
from yewchat.event_bus import EventBus
from yewchat.websocket import DEFAULT_URL, WebsocketService


class Route(str, Enum):
    """Pages of the application, keyed by path."""

    LOGIN = "/"
    CHAT = "/chat"
    NOT_FOUND = "/404"


def route_for_path(path: str) -> Route:
    """Return the route for a path; unknown paths map to NOT_FOUND."""
    try:
        return Route(path)
    except ValueError:
        return Route.NOT_FOUND


@dataclass
class User:
    """The user shared by every page."""

    username: str = "initial"


class Login:
    """The login form: collects a user name and stores it on the shared user."""

    def __init__(self, user: User) -> None:
        self.user = user
        self.username = ""

    def set_username(self, value: str) -> None:
        """Update the name typed into the form."""
        self.username = value

    def can_submit(self) -> bool:
        """Whether the start button is enabled."""
        return len(self.username) >= 1

    def submit(self) -> Route:
        """Store the name on the user and return the route to go to next."""
        if not self.can_submit():
            raise ValueError("a username is required")
        self.user.username = self.username
        return Route.CHAT


def _announcer(chat: Chat, out: TextIO):
    seen = 0
    shown_users: list[str] = []

    def on_event(_raw: str) -> None:
        nonlocal seen, shown_users
        names = [profile.name for profile in chat.users]
        if names != shown_users:
            shown_users = names
            print("Users: " + ", ".join(names), file=out, flush=True)
        for message in chat.messages[seen:]:
            print(f"{message.sender}: {message.message}", file=out, flush=True)
        seen = len(chat.messages)

    return on_event


def _read_input(loop: asyncio.AbstractEventLoop, chat: Chat, service: WebsocketService) -> None:
    try:
        for line in sys.stdin:
            text = line.rstrip("\n")
            if text:
                loop.call_soon_threadsafe(chat.submit_message, text)
    except (OSError, ValueError):
        pass
    try:
        loop.call_soon_threadsafe(service.close)
    except RuntimeError:
        pass


async def _run_chat(user: User, url: str) -> None:
    bus = EventBus()
    service = WebsocketService(bus, url)
    chat = Chat(user, service, bus)
    bus.connect(_announcer(chat, sys.stdout))
    loop = asyncio.get_running_loop()
    reader = threading.Thread(target=_read_input, args=(loop, chat, service), daemon=True)
    reader.start()
    try:
        await service.run()
    finally:
        chat.close()


def main(argv: list[str] | None = None) -> int:
    """Log in and chat from the terminal."""
    parser = argparse.ArgumentParser(prog="yewchat", description="Terminal chat client.")
    parser.add_argument("--username", help="name to chat under; asked for if omitted")
    parser.add_argument("--url", default=DEFAULT_URL, help="chat server address")
    args = parser.parse_args(argv)

    user = User()
    login = Login(user)
    name = args.username
    if name is None:
        try:
            name = input("Choose a username: ")
        except EOFError:
            print("no username given", file=sys.stderr)
            return 1
    login.set_username(name.strip())
    if not login.can_submit():
        parser.error("a username is required")
    route = login.submit()
    if route is not Route.CHAT:
        return 1

    try:
        asyncio.run(_run_chat(user, args.url))
    except OSError as exc:
        print(f"cannot connect to {args.url}: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"bad message from server: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())