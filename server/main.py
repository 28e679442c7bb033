"""FastAPI relay for decoded NMEA sentences.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

An external stream reader (serial port, file tail, gpsd relay...) posts each
line it receives to ``POST /sentences``. Accepted lines are decoded, answered
with their JSON form, and pushed to every WebSocket client connected to
``ws://<host>:8000/ws``. Rejected lines are answered with ``422`` and an error
description; they are never broadcast.
"""

import asyncio
import logging

from fastapi import FastAPI, Request, WebSocket, WebSocketDisconnect
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from navcodec import NMEAError, decode_line
from navcodec.nmea import supported_types
from server.broadcaster import add_subscriber, broadcast_message, remove_subscriber
from server.formatters import format_error, format_sentence

_LOGGER = logging.getLogger(__name__)

_QUEUE_MAX_SIZE = 10
_IDLE_TIMEOUT_SECONDS = 5.0


class SentenceLine(BaseModel):
    """Request body of ``POST /sentences``."""

    line: str


app = FastAPI(title="navcodec relay")


@app.exception_handler(NMEAError)
async def _nmea_error_handler(_request: Request, error: NMEAError) -> JSONResponse:
    _LOGGER.warning("Rejected sentence: %s", error)
    return JSONResponse(status_code=422, content=format_error(error))


@app.post("/sentences")
async def post_sentence(body: SentenceLine) -> Response:
    """Decode one line, broadcast it, and return its JSON form.

    The response includes ``line``, the canonical re-encoding of the record
    (fresh checksum, whole-second times).
    """
    record = decode_line(body.line)
    message = format_sentence(record)
    delivered = broadcast_message(message)
    _LOGGER.debug(
        "Accepted %s, delivered to %d subscribers",
        record.sentence_type.value,
        delivered,
    )
    return Response(content=message, media_type="application/json")


@app.get("/sentence-types")
async def get_sentence_types() -> dict[str, int]:
    """Supported type tags and the minimum field count of each."""
    return supported_types()


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=_IDLE_TIMEOUT_SECONDS)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream decoded sentences as JSON to a connected WebSocket client.

    Each client gets its own bounded queue (max ``_QUEUE_MAX_SIZE`` messages).
    The oldest message is dropped when the queue is full so a slow client
    never blocks ``POST /sentences``. The connection closes with code 1001
    if no sentence arrives within ``_IDLE_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    # Subscribe before accepting so no sentence posted after the handshake is missed.
    queue: asyncio.Queue[str] = asyncio.Queue(maxsize=_QUEUE_MAX_SIZE)
    add_subscriber(queue)
    try:
        await websocket.accept()
        await _send_messages_until_disconnect(queue, websocket)
    finally:
        remove_subscriber(queue)
