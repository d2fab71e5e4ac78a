"""Outbound framing: one client message to one length-prefixed block."""

from __future__ import annotations

from wsbridge.config.backend import FRAME_HEADER_SIZE

from .header import pack_header, validate_header_size


class FrameEncoder:
    def __init__(self, *, header_size: int = FRAME_HEADER_SIZE) -> None:
        self._header_size = validate_header_size(header_size)

    @property
    def header_size(self) -> int:
        return self._header_size

    def encode(self, message: str | bytes) -> bytes:
        """Return the complete frame for ``message``.

        Text is encoded as UTF-8. Bytes (binary WebSocket frames) are framed as-is.
        The result is meant to be written with a single call so a frame is never
        split across writes.
        """
        payload = message.encode("utf-8") if isinstance(message, str) else bytes(message)
        return pack_header(len(payload), self._header_size) + payload


__all__ = ["FrameEncoder"]
