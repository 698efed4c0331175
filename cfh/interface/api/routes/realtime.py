"""Realtime WebSocket channel."""

import json
from datetime import datetime, timezone

from dishka import AsyncContainer
from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from cfh.adapter.realtime import Broadcaster
from cfh.application.usecase.meme import ListMemesRequest, ListMemesUseCase
from cfh.domain.value import FeedSort
from cfh.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["realtime"])

# Number of memes returned for a get_memes request
MEMES_LIST_SIZE = 10


async def _top_memes(container: AsyncContainer) -> list[dict]:
    async with container() as request_container:
        list_memes_use_case = await request_container.get(ListMemesUseCase)
        result = await list_memes_use_case.execute(
            ListMemesRequest(sort=FeedSort.HOT, limit=MEMES_LIST_SIZE)
        )
    return [meme.model_dump(mode="json") for meme in result.memes]


@router.websocket("/ws")
async def realtime_channel(websocket: WebSocket) -> None:
    """Accept a client and serve it until it disconnects.

    Clients receive every broadcast (``new-meme``, ``new-comment``) and may
    ask for the current hot feed with ``{"type": "get_memes"}``.
    """
    container: AsyncContainer = websocket.app.state.dishka_container
    broadcaster = await container.get(Broadcaster)

    await websocket.accept()
    broadcaster.connect(websocket)
    try:
        await websocket.send_json(
            {
                "type": "welcome",
                "message": "Connected to Client From Hell realtime channel",
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )
        while True:
            raw = await websocket.receive_text()
            try:
                message = json.loads(raw)
            except json.JSONDecodeError:
                await websocket.send_json(
                    {"type": "error", "message": "Invalid message format"}
                )
                continue
            if not isinstance(message, dict):
                await websocket.send_json(
                    {"type": "error", "message": "Invalid message format"}
                )
                continue

            message_type = message.get("type")
            if message_type == "get_memes":
                await websocket.send_json(
                    {"type": "memes_list", "data": await _top_memes(container)}
                )
            else:
                logger.info(f"Ignoring unknown WebSocket message type: {message_type}")
    except WebSocketDisconnect:
        logger.debug("WebSocket client went away")
    finally:
        broadcaster.disconnect(websocket)
