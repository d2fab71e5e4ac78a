"""Shared error types for the WebSocket bridge."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FrameTooLargeError(Exception):
    """Raised when a payload does not fit the frame's u32 length field."""

    size: int
    limit: int


__all__ = ["FrameTooLargeError"]
