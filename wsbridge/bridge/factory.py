"""Factory for pairing client WebSockets with backend sessions."""

from __future__ import annotations

from fastapi import WebSocket

from wsbridge.state.settings import BackendSettings

from .session import SessionBridge


class SessionFactory:
    def __init__(self, *, backend: BackendSettings) -> None:
        self._backend = backend

    def new_session(self, ws: WebSocket) -> SessionBridge:
        return SessionBridge(ws, self._backend)


__all__ = ["SessionFactory"]
