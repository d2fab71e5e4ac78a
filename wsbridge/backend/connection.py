"""Duplex byte stream to the backend over asyncio TCP streams."""

from __future__ import annotations

import asyncio
import logging
import contextlib

logger = logging.getLogger(__name__)


class BackendConnection:
    def __init__(
        self,
        reader: asyncio.StreamReader,
        writer: asyncio.StreamWriter,
        *,
        read_chunk_size: int,
    ) -> None:
        self._reader = reader
        self._writer = writer
        self._read_chunk_size = max(1, int(read_chunk_size))
        self._closed = False

    @classmethod
    async def open(cls, host: str, port: int, *, read_chunk_size: int) -> BackendConnection:
        """Connect to the backend. Raises ``OSError`` when it is unreachable."""
        reader, writer = await asyncio.open_connection(host, port)
        return cls(reader, writer, read_chunk_size=read_chunk_size)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def peername(self) -> object:
        return self._writer.get_extra_info("peername")

    def write(self, data: bytes) -> None:
        """Queue one block on the transport without waiting for it to drain."""
        if self._closed or self._writer.is_closing():
            raise ConnectionResetError("backend connection is closed")
        self._writer.write(data)

    async def read(self) -> bytes:
        """Return the next chunk of any size; ``b""`` once the backend closed the stream."""
        return await self._reader.read(self._read_chunk_size)

    def abort(self) -> None:
        """Destroy the connection immediately (no FIN handshake, pending writes dropped)."""
        if self._closed:
            return
        self._closed = True
        with contextlib.suppress(Exception):
            self._writer.transport.abort()
        logger.debug("backend connection aborted")


__all__ = ["BackendConnection"]
