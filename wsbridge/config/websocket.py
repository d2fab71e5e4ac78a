"""WebSocket endpoint configuration and constants."""

from __future__ import annotations

ENV_WS_PORT = "WS_PORT"

DEFAULT_WS_PORT = 9010

# Bind address and route are fixed; only the port is configurable.
WS_HOST = "0.0.0.0"  # noqa: S104
WS_ENDPOINT_PATH = "/"

# Close codes
WS_CLOSE_NORMAL_CODE = 1000
WS_CLOSE_GOING_AWAY_CODE = 1001
WS_CLOSE_BACKEND_ERROR_CODE = 1011
WS_CLOSE_BACKEND_UNAVAILABLE_CODE = 1013

WS_CLOSE_BACKEND_CLOSED_REASON = "backend closed"
WS_CLOSE_BACKEND_ERROR_REASON = "backend error"
WS_CLOSE_BACKEND_UNAVAILABLE_REASON = "backend unavailable"
WS_CLOSE_GOING_AWAY_REASON = "server shutting down"

__all__ = [
    "ENV_WS_PORT",
    "DEFAULT_WS_PORT",
    "WS_HOST",
    "WS_ENDPOINT_PATH",
    "WS_CLOSE_NORMAL_CODE",
    "WS_CLOSE_GOING_AWAY_CODE",
    "WS_CLOSE_BACKEND_ERROR_CODE",
    "WS_CLOSE_BACKEND_UNAVAILABLE_CODE",
    "WS_CLOSE_BACKEND_CLOSED_REASON",
    "WS_CLOSE_BACKEND_ERROR_REASON",
    "WS_CLOSE_BACKEND_UNAVAILABLE_REASON",
    "WS_CLOSE_GOING_AWAY_REASON",
]
