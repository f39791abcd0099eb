"""Websocket link to the chat server, feeding incoming text to an event bus."""

from __future__ import annotations

import asyncio
import logging

import websockets
from websockets.exceptions import ConnectionClosedError

from yewchat.event_bus import EventBus

logger = logging.getLogger(__name__)

DEFAULT_URL = "ws://127.0.0.1:8080"
CHANNEL_CAPACITY = 1000

_CLOSE = object()


class WebsocketService:
    """Queues outgoing text for the server and republishes what it sends back."""

    def __init__(self, event_bus: EventBus, url: str = DEFAULT_URL) -> None:
        self.event_bus = event_bus
        self.url = url
        self._outgoing: asyncio.Queue[object] = asyncio.Queue()
        self._closed = False

    def try_send(self, text: str) -> None:
        """Queue text for the server without waiting.

        Raises RuntimeError once the service is closed and asyncio.QueueFull
        when the outgoing channel already holds its full capacity.
        """
        if self._closed:
            raise RuntimeError("websocket channel is closed")
        if self._outgoing.qsize() >= CHANNEL_CAPACITY:
            raise asyncio.QueueFull
        self._outgoing.put_nowait(text)

    def dispatch_incoming(self, data: str | bytes) -> bool:
        """Forward a received frame to the event bus; bytes must be UTF-8."""
        if isinstance(data, (bytes, bytearray, memoryview)):
            try:
                data = bytes(data).decode("utf-8")
            except UnicodeDecodeError:
                logger.debug("dropping non UTF-8 binary frame")
                return False
        logger.debug("from websocket: %s", data)
        self.event_bus.send(data)
        return True

    async def _pump_outgoing(self, connection) -> None:
        while True:
            item = await self._outgoing.get()
            if item is _CLOSE:
                await connection.close()
                return
            logger.debug("got event from channel! %s", item)
            await connection.send(item)

    async def run(self) -> None:
        """Connect and exchange messages until the connection ends."""
        async with websockets.connect(self.url) as connection:
            writer = asyncio.create_task(self._pump_outgoing(connection))
            try:
                async for frame in connection:
                    self.dispatch_incoming(frame)
            except ConnectionClosedError as exc:
                logger.error("ws: %r", exc)
            finally:
                writer.cancel()
                await asyncio.gather(writer, return_exceptions=True)
        logger.debug("WebSocket Closed")

    def close(self) -> None:
        """Stop accepting messages and close the connection once queued ones are sent."""
        if not self._closed:
            self._closed = True
            self._outgoing.put_nowait(_CLOSE)