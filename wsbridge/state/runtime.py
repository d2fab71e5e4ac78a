"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wsbridge.bridge import SessionFactory
    from wsbridge.state.settings import AppSettings


@dataclass(frozen=True, slots=True)
class RuntimeDeps:
    settings: AppSettings
    sessions: SessionFactory


__all__ = ["RuntimeDeps"]
