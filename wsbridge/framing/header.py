"""Frame header layout for the backend byte stream.

A header is a u32 little-endian payload length followed by ``header_size - 4``
reserved bytes. The reserved bytes are always written as zero and never read:
they are the high word of a 64-bit length the backend used to send and are
expected to disappear (``header_size=4``).
"""

from __future__ import annotations

import struct

from wsbridge.errors import FrameTooLargeError
from wsbridge.config.backend import FRAME_LENGTH_SIZE, FRAME_MAX_PAYLOAD_SIZE

_LENGTH = struct.Struct("<I")


def validate_header_size(header_size: int) -> int:
    header_size = int(header_size)
    if header_size < FRAME_LENGTH_SIZE:
        raise ValueError(f"frame header must be at least {FRAME_LENGTH_SIZE} bytes, got {header_size}")
    return header_size


def pack_header(payload_size: int, header_size: int) -> bytes:
    if payload_size > FRAME_MAX_PAYLOAD_SIZE:
        raise FrameTooLargeError(size=payload_size, limit=FRAME_MAX_PAYLOAD_SIZE)
    return _LENGTH.pack(payload_size) + bytes(header_size - FRAME_LENGTH_SIZE)


def unpack_length(header: bytes | bytearray | memoryview) -> int:
    """Read the payload length from the first four header bytes; the rest is ignored."""
    (length,) = _LENGTH.unpack_from(header, 0)
    return length


__all__ = ["pack_header", "unpack_length", "validate_header_size"]
