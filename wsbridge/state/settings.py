"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int
    ws_path: str


@dataclass(frozen=True, slots=True)
class BackendSettings:
    host: str
    port: int
    read_chunk_size: int
    header_size: int


@dataclass(frozen=True, slots=True)
class AppSettings:
    server: ServerSettings
    backend: BackendSettings


__all__ = [
    "AppSettings",
    "BackendSettings",
    "ServerSettings",
]
