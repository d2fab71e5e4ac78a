"""Environment parsing for runtime settings.

Env names and defaults live in ``wsbridge.config``; this module resolves them
once at startup into frozen dataclasses for the rest of the server.
"""

from __future__ import annotations

import os

from wsbridge.state.settings import AppSettings, ServerSettings, BackendSettings
from wsbridge.config.websocket import WS_HOST, ENV_WS_PORT, DEFAULT_WS_PORT, WS_ENDPOINT_PATH
from wsbridge.config.backend import (
    ENV_BACKEND_HOST,
    ENV_BACKEND_PORT,
    FRAME_HEADER_SIZE,
    DEFAULT_BACKEND_HOST,
    DEFAULT_BACKEND_PORT,
    BACKEND_READ_CHUNK_SIZE,
)

_PORT_MIN = 1
_PORT_MAX = 65535


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _validate_port(name: str, port: int) -> int:
    if port < _PORT_MIN or port > _PORT_MAX:
        raise ValueError(f"{name} must be between {_PORT_MIN} and {_PORT_MAX}, got {port}")
    return port


def _load_server_settings() -> ServerSettings:
    return ServerSettings(
        host=WS_HOST,
        port=_validate_port(ENV_WS_PORT, _int_env(ENV_WS_PORT, DEFAULT_WS_PORT)),
        ws_path=WS_ENDPOINT_PATH,
    )


def _load_backend_settings() -> BackendSettings:
    return BackendSettings(
        host=_str_env(ENV_BACKEND_HOST, DEFAULT_BACKEND_HOST),
        port=_validate_port(ENV_BACKEND_PORT, _int_env(ENV_BACKEND_PORT, DEFAULT_BACKEND_PORT)),
        read_chunk_size=BACKEND_READ_CHUNK_SIZE,
        header_size=FRAME_HEADER_SIZE,
    )


def load_settings() -> AppSettings:
    return AppSettings(
        server=_load_server_settings(),
        backend=_load_backend_settings(),
    )


__all__ = ["load_settings"]
