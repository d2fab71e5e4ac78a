"""Inbound framing: rebuild discrete messages from an arbitrarily chunked stream."""

from __future__ import annotations

import logging

from wsbridge.state import DecoderState
from wsbridge.config.backend import FRAME_HEADER_SIZE

from .header import unpack_length, validate_header_size

logger = logging.getLogger(__name__)


class FrameDecoder:
    """Two-phase stream parser.

    HEADER (``expected_length is None``): wait for a full header, read the u32
    length and drop the reserved bytes. PAYLOAD (``expected_length == n``): wait
    for ``n`` bytes, emit them as one message and return to HEADER.

    Bytes that cannot complete the current phase stay buffered until the next
    ``feed`` call. Messages come out in arrival order.
    """

    def __init__(self, *, header_size: int = FRAME_HEADER_SIZE) -> None:
        self._header_size = validate_header_size(header_size)
        self._state = DecoderState()

    @property
    def state(self) -> DecoderState:
        return self._state

    @property
    def pending(self) -> int:
        return len(self._state.buffer)

    @property
    def at_boundary(self) -> bool:
        return self._state.expected_length is None

    def reset(self) -> None:
        self._state.buffer.clear()
        self._state.expected_length = None

    def feed(self, chunk: bytes) -> list[str]:
        state = self._state
        buf = state.buffer
        if chunk:
            buf.extend(chunk)

        messages: list[str] = []
        while True:
            if state.expected_length is None:
                if len(buf) < self._header_size:
                    break
                state.expected_length = unpack_length(buf)
                del buf[: self._header_size]

            length = state.expected_length
            if len(buf) < length:
                break
            payload = bytes(buf[:length])
            del buf[:length]
            state.expected_length = None

            try:
                messages.append(payload.decode("utf-8"))
            except UnicodeDecodeError as exc:
                state.frames_malformed += 1
                logger.warning(
                    "backend frame dropped: payload is not valid UTF-8 (size=%s, error=%s)",
                    length,
                    exc.reason,
                )
                continue
            state.frames_decoded += 1

        return messages


__all__ = ["FrameDecoder"]
