"""One client WebSocket paired with one backend TCP connection."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Awaitable

from fastapi import WebSocket

from wsbridge.backend import BackendConnection
from wsbridge.state.settings import BackendSettings
from wsbridge.framing import FrameDecoder, FrameEncoder
from wsbridge.state import SessionEnd, SessionPhase
from wsbridge.config.websocket import (
    WS_CLOSE_NORMAL_CODE,
    WS_CLOSE_GOING_AWAY_CODE,
    WS_CLOSE_GOING_AWAY_REASON,
    WS_CLOSE_BACKEND_ERROR_CODE,
    WS_CLOSE_BACKEND_ERROR_REASON,
    WS_CLOSE_BACKEND_CLOSED_REASON,
    WS_CLOSE_BACKEND_UNAVAILABLE_CODE,
    WS_CLOSE_BACKEND_UNAVAILABLE_REASON,
)

from .client import safe_close
from .inbound import forward_backend_to_client
from .outbound import forward_client_to_backend

logger = logging.getLogger(__name__)

ConnectFn = Callable[[], Awaitable[BackendConnection]]

_CLIENT_CLOSE: dict[SessionEnd | None, tuple[int, str]] = {
    SessionEnd.BACKEND_CLOSED: (WS_CLOSE_NORMAL_CODE, WS_CLOSE_BACKEND_CLOSED_REASON),
    SessionEnd.BACKEND_ERROR: (WS_CLOSE_BACKEND_ERROR_CODE, WS_CLOSE_BACKEND_ERROR_REASON),
    SessionEnd.BACKEND_UNAVAILABLE: (WS_CLOSE_BACKEND_UNAVAILABLE_CODE, WS_CLOSE_BACKEND_UNAVAILABLE_REASON),
    None: (WS_CLOSE_GOING_AWAY_CODE, WS_CLOSE_GOING_AWAY_REASON),
}


def _task_outcome(task: asyncio.Task, direction: str) -> SessionEnd:
    if task.cancelled():
        return SessionEnd.BACKEND_ERROR
    exc = task.exception()
    if exc is None:
        return task.result()
    logger.error("%s forwarding failed unexpectedly", direction, exc_info=exc)
    return SessionEnd.BACKEND_ERROR


class SessionBridge:
    """Owns a client WebSocket and its backend connection for their shared lifetime.

    ``run()`` moves the session through CONNECTING -> ACTIVE -> CLOSED. While
    ACTIVE, client messages are framed onto the backend stream and backend
    frames are decoded and sent to the client, each direction in its own task.
    The first direction to stop decides how the other transport is torn down:
    a client close aborts the backend, anything on the backend side closes the
    client. Both transports are closed exactly once.
    """

    def __init__(
        self,
        ws: WebSocket,
        backend: BackendSettings,
        *,
        connect: ConnectFn | None = None,
    ) -> None:
        self._ws = ws
        self._settings = backend
        self._connect = connect or self._open_backend
        self._backend: BackendConnection | None = None
        self._encoder = FrameEncoder(header_size=backend.header_size)
        self._decoder = FrameDecoder(header_size=backend.header_size)
        self._phase = SessionPhase.CONNECTING
        self._end: SessionEnd | None = None

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def end(self) -> SessionEnd | None:
        return self._end

    async def _open_backend(self) -> BackendConnection:
        return await BackendConnection.open(
            self._settings.host,
            self._settings.port,
            read_chunk_size=self._settings.read_chunk_size,
        )

    async def run(self) -> SessionEnd | None:
        if self._phase is not SessionPhase.CONNECTING:
            raise RuntimeError(f"session cannot run from phase {self._phase.value}")

        end: SessionEnd | None = None
        try:
            try:
                self._backend = await self._connect()
            except (OSError, UnicodeError) as exc:
                # UnicodeError: getaddrinfo rejects a malformed host label
                logger.warning(
                    "backend unavailable at %s:%s: %s", self._settings.host, self._settings.port, exc
                )
                end = SessionEnd.BACKEND_UNAVAILABLE
                return end

            logger.info("backend connected peer=%s", self._backend.peername)
            self._phase = SessionPhase.ACTIVE
            end = await self._forward(self._backend)
            return end
        except Exception:
            end = SessionEnd.BACKEND_ERROR
            raise
        finally:
            await self._teardown(end)

    async def _forward(self, backend: BackendConnection) -> SessionEnd:
        outbound = asyncio.create_task(forward_client_to_backend(self._ws, backend, self._encoder))
        inbound = asyncio.create_task(forward_backend_to_client(backend, self._ws, self._decoder))
        try:
            done, _pending = await asyncio.wait({outbound, inbound}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in (outbound, inbound):
                if not task.done():
                    task.cancel()
            await asyncio.gather(outbound, inbound, return_exceptions=True)

        if outbound in done:
            return _task_outcome(outbound, "client->backend")
        return _task_outcome(inbound, "backend->client")

    async def _teardown(self, end: SessionEnd | None) -> None:
        if self._phase is SessionPhase.CLOSED:
            return
        self._phase = SessionPhase.CLOSED
        self._end = end
        if self._backend is not None:
            self._backend.abort()
        if end is not SessionEnd.CLIENT_CLOSED:
            code, reason = _CLIENT_CLOSE[end]
            await safe_close(self._ws, code=code, reason=reason)
        state = self._decoder.state
        logger.info(
            "session closed reason=%s frames_decoded=%s frames_malformed=%s",
            end.value if end is not None else "cancelled",
            state.frames_decoded,
            state.frames_malformed,
        )


__all__ = ["SessionBridge"]
