"""
Server-Sent Events channel for MCP clients.

Each connected client owns one ``EventStreamChannel``. The channel emits a
``ready`` event as soon as it opens, then a ``keepalive`` event carrying the
current epoch-millisecond timestamp on a fixed interval until the client goes
away.
"""

import asyncio
import itertools
import json
import logging
import time
from typing import Any, AsyncIterator, Awaitable, Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_KEEPALIVE_INTERVAL = 25.0

_channel_ids = itertools.count(1)


def format_sse(event: Optional[str], data: Any) -> str:
    """Format one SSE frame: optional ``event:`` line, ``data:`` line, blank line."""
    frame = f"event: {event}\n" if event else ""
    return frame + f"data: {json.dumps(data, separators=(',', ':'))}\n\n"


def epoch_millis() -> int:
    return int(time.time() * 1000)


class EventStreamChannel:
    """A single client's push channel."""

    def __init__(
        self,
        is_disconnected: Callable[[], Awaitable[bool]],
        keepalive_interval: float = DEFAULT_KEEPALIVE_INTERVAL,
        clock: Callable[[], int] = epoch_millis,
    ):
        """
        Args:
            is_disconnected: Coroutine function reporting whether the client left
            keepalive_interval: Seconds between keepalive events
            clock: Source of epoch-millisecond timestamps
        """
        self.channel_id = next(_channel_ids)
        self.is_disconnected = is_disconnected
        self.keepalive_interval = keepalive_interval
        self.clock = clock
        self.closed = False

    async def events(self) -> AsyncIterator[str]:
        """Yield formatted SSE frames until the client disconnects.

        Transport cancellation (the server noticing the disconnect first) also
        ends the stream; ``closed`` is set either way.
        """
        logger.info(f"[SSE] channel {self.channel_id} opened")
        try:
            yield format_sse("ready", {"ok": True})
            while True:
                await asyncio.sleep(self.keepalive_interval)
                if await self.is_disconnected():
                    break
                yield format_sse("keepalive", {"t": self.clock()})
        finally:
            self.closed = True
            logger.info(f"[SSE] channel {self.channel_id} closed")
