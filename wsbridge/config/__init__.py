"""Configuration module exports (env names, defaults and protocol constants only)."""

from .backend import (
    FRAME_HEADER_SIZE,
    DEFAULT_BACKEND_HOST,
    DEFAULT_BACKEND_PORT,
)
from .websocket import (
    DEFAULT_WS_PORT,
    WS_ENDPOINT_PATH,
)

__all__ = [
    "DEFAULT_BACKEND_HOST",
    "DEFAULT_BACKEND_PORT",
    "DEFAULT_WS_PORT",
    "FRAME_HEADER_SIZE",
    "WS_ENDPOINT_PATH",
]
