"""Backend (length-framed TCP) configuration and constants."""

from __future__ import annotations

ENV_BACKEND_HOST = "BACKEND_HOST"
ENV_BACKEND_PORT = "BACKEND_PORT"

DEFAULT_BACKEND_HOST = "localhost"
DEFAULT_BACKEND_PORT = 7777

# Upper bound on a single read from the backend stream. Frames larger than this
# are reassembled across reads by the decoder.
BACKEND_READ_CHUNK_SIZE = 64 * 1024

# Frame header: u32 little-endian payload length followed by a reserved word.
# The reserved word is a leftover of a 64-bit length field; it is written as
# zero and ignored on read. Set to FRAME_LENGTH_SIZE once the backend drops it.
FRAME_LENGTH_SIZE = 4
FRAME_HEADER_SIZE = 8
FRAME_MAX_PAYLOAD_SIZE = 0xFFFFFFFF

__all__ = [
    "ENV_BACKEND_HOST",
    "ENV_BACKEND_PORT",
    "DEFAULT_BACKEND_HOST",
    "DEFAULT_BACKEND_PORT",
    "BACKEND_READ_CHUNK_SIZE",
    "FRAME_LENGTH_SIZE",
    "FRAME_HEADER_SIZE",
    "FRAME_MAX_PAYLOAD_SIZE",
]
