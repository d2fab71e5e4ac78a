#!/usr/bin/env python3
"""Framed echo backend for manual bridge testing.

Listens on TCP, decodes length-prefixed frames and writes each message back,
optionally prefixed. Start it, start the bridge with BACKEND_PORT pointing at
it, then run ``tests/e2e/echo.py``.
"""

from __future__ import annotations

import sys
import asyncio
import logging
import argparse
from pathlib import Path

if __package__ in {None, ""}:
    sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from wsbridge.framing import FrameDecoder, FrameEncoder  # noqa: E402

logger = logging.getLogger("e2e.backend")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Length-framed TCP echo backend")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=7777)
    p.add_argument("--prefix", default="", help="Text prepended to every echoed message")
    return p.parse_args()


async def _handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter, prefix: str) -> None:
    peer = writer.get_extra_info("peername")
    logger.info("bridge connected from %s", peer)
    decoder = FrameDecoder()
    encoder = FrameEncoder()
    try:
        while True:
            data = await reader.read(4096)
            if not data:
                break
            for message in decoder.feed(data):
                logger.info("echo %r", message)
                writer.write(encoder.encode(f"{prefix}{message}"))
                await writer.drain()
    except ConnectionError as exc:
        logger.info("bridge connection lost: %s", exc)
    finally:
        writer.close()
        logger.info("bridge disconnected from %s", peer)


async def run(args: argparse.Namespace) -> int:
    server = await asyncio.start_server(lambda r, w: _handle(r, w, args.prefix), args.host, args.port)
    logger.info("echo backend listening on %s:%s", args.host, args.port)
    async with server:
        await server.serve_forever()
    return 0


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = parse_args()
    try:
        return asyncio.run(run(args))
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
