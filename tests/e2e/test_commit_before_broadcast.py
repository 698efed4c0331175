"""End-to-end tests for announcing content only after it is committed."""

import pytest
from dishka import Provider, Scope, provide
from fastapi.testclient import TestClient

from cfh.domain.repository import UnitOfWork
from cfh.interface.api.app import create_app
from tests.di import build_test_container
from tests.e2e.helpers import register


class FailingUnitOfWork(UnitOfWork):
    async def commit(self) -> None:
        raise RuntimeError("commit failed")


class FailingCommitProvider(Provider):
    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self) -> UnitOfWork:
        return FailingUnitOfWork()


@pytest.fixture
def failing_client():
    app = create_app(build_test_container(overrides=[FailingCommitProvider()]))
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


class TestCommitBeforeBroadcast:
    """Realtime clients hear only about content that was saved."""

    def test_failed_commit_is_not_broadcast(self, failing_client):
        register(failing_client)

        with failing_client.websocket_connect("/ws") as websocket:
            websocket.receive_json()
            response = failing_client.post(
                "/api/memes", json={"image_url": "https://img.example.com/lost.png"}
            )
            websocket.send_json({"type": "get_memes"})
            reply = websocket.receive_json()

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}
        assert reply["type"] == "memes_list"

    def test_comment_announced_after_commit(self, client):
        register(client)
        meme = client.post(
            "/api/memes", json={"image_url": "https://img.example.com/ok.png"}
        ).json()["meme"]

        with client.websocket_connect("/ws") as websocket:
            websocket.receive_json()
            response = client.post(
                "/api/comments", json={"meme_id": meme["id"], "body": "Net 90?"}
            )
            message = websocket.receive_json()

        assert response.status_code == 201
        assert message["channel"] == "new-comment"
        assert message["data"]["body"] == "Net 90?"
