"""WebSocket fan-out for realtime notifications."""

from typing import Any

import logfire
from fastapi import WebSocket


class Broadcaster:
    """Keeps track of open WebSocket connections and fans messages out.

    One instance lives for the whole application. Messages are sent as
    ``{"channel": ..., "data": ...}``; a connection that fails to receive
    is dropped.
    """

    def __init__(self) -> None:
        self._connections: set[WebSocket] = set()

    @property
    def connection_count(self) -> int:
        """Number of open connections."""
        return len(self._connections)

    def connect(self, websocket: WebSocket) -> None:
        """Register an accepted connection."""
        self._connections.add(websocket)
        logfire.info("WebSocket client connected", connections=self.connection_count)

    def disconnect(self, websocket: WebSocket) -> None:
        """Forget a connection; unknown connections are ignored."""
        self._connections.discard(websocket)
        logfire.info(
            "WebSocket client disconnected", connections=self.connection_count
        )

    async def broadcast(self, channel: str, data: Any) -> int:
        """Send a message to every open connection.

        Args:
            channel: Channel name, e.g. ``new-meme``
            data: JSON-serializable payload

        Returns:
            Number of connections that received the message
        """
        message = {"channel": channel, "data": data}
        delivered = 0
        with logfire.span("broadcaster.broadcast", channel=channel):
            # Iterate over a snapshot, failing connections are removed below
            for websocket in list(self._connections):
                try:
                    await websocket.send_json(message)
                    delivered += 1
                except Exception as e:
                    logfire.warn(
                        "Dropping WebSocket client after failed send",
                        channel=channel,
                        error=str(e),
                    )
                    self._connections.discard(websocket)
            logfire.info("Broadcast sent", channel=channel, delivered=delivered)
        return delivered
