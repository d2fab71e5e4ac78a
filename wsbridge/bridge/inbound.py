"""Backend to client direction: decode frames from the TCP stream into WebSocket messages."""

from __future__ import annotations

import logging

from fastapi import WebSocket

from wsbridge.state import SessionEnd
from wsbridge.framing import FrameDecoder
from wsbridge.backend import BackendConnection

from .client import safe_send_text

logger = logging.getLogger(__name__)


async def forward_backend_to_client(
    backend: BackendConnection,
    ws: WebSocket,
    decoder: FrameDecoder,
) -> SessionEnd:
    dropped = 0
    while True:
        try:
            chunk = await backend.read()
        except OSError as exc:
            logger.warning("backend read failed: %s", exc)
            return SessionEnd.BACKEND_ERROR

        if not chunk:
            if decoder.pending or not decoder.at_boundary:
                logger.info("backend closed mid-frame; discarding %s buffered bytes", decoder.pending)
            return SessionEnd.BACKEND_CLOSED

        for message in decoder.feed(chunk):
            # Undeliverable messages are dropped; the session ends through its own close path.
            if not await safe_send_text(ws, message):
                dropped += 1
                logger.warning("client send failed; backend message dropped (dropped=%s)", dropped)


__all__ = ["forward_backend_to_client"]
