"""Session lifecycle phases."""

from __future__ import annotations

from enum import Enum


class SessionPhase(str, Enum):
    CONNECTING = "connecting"
    ACTIVE = "active"
    CLOSED = "closed"


__all__ = ["SessionPhase"]
