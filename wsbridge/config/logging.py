"""Logging configuration (env-resolved constants only)."""

from __future__ import annotations

import os

LOG_LEVEL: str = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# uvicorn logs every HTTP probe and WebSocket handshake. Keep it tame unless explicitly enabled.
SHOW_ACCESS_LOGS: bool = (os.getenv("SHOW_ACCESS_LOGS") or "").strip().lower() in {"1", "true", "yes"}

__all__ = ["LOG_FORMAT", "LOG_LEVEL", "SHOW_ACCESS_LOGS"]
