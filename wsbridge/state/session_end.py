"""Reasons a session stops forwarding."""

from __future__ import annotations

from enum import Enum


class SessionEnd(str, Enum):
    CLIENT_CLOSED = "client_closed"
    BACKEND_CLOSED = "backend_closed"
    BACKEND_ERROR = "backend_error"
    BACKEND_UNAVAILABLE = "backend_unavailable"


__all__ = ["SessionEnd"]
