"""Error-tolerant send/close helpers for the client WebSocket."""

from __future__ import annotations

import logging

from fastapi import WebSocket, WebSocketDisconnect

logger = logging.getLogger(__name__)


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    try:
        await ws.send_text(text)
    except WebSocketDisconnect:
        return False
    except Exception:
        logger.debug("WebSocket send failed", exc_info=True)
        return False
    return True


async def safe_close(ws: WebSocket, *, code: int, reason: str = "") -> bool:
    try:
        await ws.close(code=code, reason=reason)
    except Exception:
        # Already closed by the peer or the server is going away.
        logger.debug("WebSocket close failed", exc_info=True)
        return False
    return True


__all__ = ["safe_close", "safe_send_text"]
