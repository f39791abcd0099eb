"""A WebSocket chat client: registration, live user list and messages."""

__version__ = "0.1.0"