"""Runtime dependency construction (settings + session factory)."""

from __future__ import annotations

import logging

from wsbridge.state import RuntimeDeps
from wsbridge.bridge import SessionFactory
from wsbridge.state.settings import AppSettings

from .settings_loader import load_settings

logger = logging.getLogger(__name__)


def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()
    logger.info(
        "runtime: bridging ws://%s:%s%s -> tcp://%s:%s (header=%s bytes)",
        settings.server.host,
        settings.server.port,
        settings.server.ws_path,
        settings.backend.host,
        settings.backend.port,
        settings.backend.header_size,
    )
    return RuntimeDeps(
        settings=settings,
        sessions=SessionFactory(backend=settings.backend),
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
