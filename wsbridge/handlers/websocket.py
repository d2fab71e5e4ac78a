"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import logging

from fastapi import WebSocket

from wsbridge.state import RuntimeDeps, SessionEnd

logger = logging.getLogger(__name__)


def _describe_client(ws: WebSocket) -> str:
    client = getattr(ws, "client", None)
    if client is None:
        return "unknown"
    return f"{client.host}:{client.port}"


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> SessionEnd | None:
    try:
        await ws.accept()
    except Exception:
        logger.debug("WebSocket accept failed", exc_info=True)
        return None

    peer = _describe_client(ws)
    logger.info("client connected peer=%s", peer)

    # Messages sent while the backend connection is in flight wait in the
    # WebSocket receive queue and are forwarded once the session is active.
    session = runtime_deps.sessions.new_session(ws)
    end: SessionEnd | None = None
    try:
        end = await session.run()
    except Exception:
        # A failing session must never take down the endpoint or sibling sessions.
        logger.exception("session failed peer=%s", peer)
    finally:
        logger.info("client connection closed peer=%s reason=%s", peer, end.value if end is not None else "error")
    return end


__all__ = ["handle_websocket_connection"]
