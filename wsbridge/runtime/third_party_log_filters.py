"""Log noise filters for third-party libraries.

This layer only adjusts logger levels to keep uvicorn output readable: every
health probe and WebSocket handshake is otherwise logged at INFO.
"""

from __future__ import annotations

import logging

from wsbridge.config.logging import SHOW_ACCESS_LOGS


def configure() -> None:
    if not SHOW_ACCESS_LOGS:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


__all__ = ["configure"]
