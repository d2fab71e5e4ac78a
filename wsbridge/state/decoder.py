"""Per-connection parser state for the backend frame decoder."""

from __future__ import annotations

from dataclasses import field, dataclass


@dataclass(slots=True)
class DecoderState:
    buffer: bytearray = field(default_factory=bytearray)
    # None while positioned at a frame boundary (waiting for a header).
    expected_length: int | None = None
    frames_decoded: int = 0
    frames_malformed: int = 0


__all__ = ["DecoderState"]
