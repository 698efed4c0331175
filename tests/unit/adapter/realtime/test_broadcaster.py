"""Unit tests for the realtime broadcaster."""

import pytest

from cfh.adapter.realtime import Broadcaster


class FakeWebSocket:
    """Records messages sent to it; can be told to fail."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[dict] = []

    async def send_json(self, data: dict) -> None:
        if self.fail:
            raise RuntimeError("connection closed")
        self.sent.append(data)


class TestBroadcaster:
    """Tests for fan-out and connection bookkeeping."""

    @pytest.mark.asyncio
    async def test_broadcast_reaches_every_connection(self):
        broadcaster = Broadcaster()
        clients = [FakeWebSocket(), FakeWebSocket()]
        for client in clients:
            broadcaster.connect(client)

        delivered = await broadcaster.broadcast("new-meme", {"id": 1})

        assert delivered == 2
        for client in clients:
            assert client.sent == [{"channel": "new-meme", "data": {"id": 1}}]

    @pytest.mark.asyncio
    async def test_failed_connection_is_dropped(self):
        broadcaster = Broadcaster()
        healthy, broken = FakeWebSocket(), FakeWebSocket(fail=True)
        broadcaster.connect(healthy)
        broadcaster.connect(broken)

        delivered = await broadcaster.broadcast("new-comment", {"id": 3})

        assert delivered == 1
        assert broadcaster.connection_count == 1
        assert healthy.sent[0]["channel"] == "new-comment"

    @pytest.mark.asyncio
    async def test_broadcast_without_connections(self):
        broadcaster = Broadcaster()

        assert await broadcaster.broadcast("new-meme", {}) == 0

    def test_disconnect_unknown_is_ignored(self):
        broadcaster = Broadcaster()

        broadcaster.disconnect(FakeWebSocket())

        assert broadcaster.connection_count == 0
