"""Client to backend direction: frame every WebSocket message onto the TCP stream."""

from __future__ import annotations

import logging

from fastapi import WebSocket, WebSocketDisconnect

from wsbridge.state import SessionEnd
from wsbridge.errors import FrameTooLargeError
from wsbridge.framing import FrameEncoder
from wsbridge.backend import BackendConnection

logger = logging.getLogger(__name__)


async def forward_client_to_backend(
    ws: WebSocket,
    backend: BackendConnection,
    encoder: FrameEncoder,
) -> SessionEnd:
    while True:
        try:
            message = await ws.receive()
        except WebSocketDisconnect as exc:
            logger.info("client disconnected code=%s", exc.code)
            return SessionEnd.CLIENT_CLOSED

        if message["type"] == "websocket.disconnect":
            logger.info("client disconnected code=%s", message.get("code"))
            return SessionEnd.CLIENT_CLOSED

        data = message.get("text")
        if data is None:
            data = message.get("bytes")
        if data is None:
            continue

        try:
            frame = encoder.encode(data)
        except FrameTooLargeError as exc:
            logger.error("client message too large for a frame (size=%s, limit=%s)", exc.size, exc.limit)
            return SessionEnd.BACKEND_ERROR

        try:
            backend.write(frame)
        except OSError as exc:
            logger.warning("backend write failed: %s", exc)
            return SessionEnd.BACKEND_ERROR


__all__ = ["forward_client_to_backend"]
