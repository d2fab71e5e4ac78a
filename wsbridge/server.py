"""Main FastAPI server for the WebSocket to TCP bridge."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, WebSocket
from fastapi.responses import ORJSONResponse

from wsbridge.config.websocket import WS_ENDPOINT_PATH
from wsbridge.runtime.logging import configure_logging
from wsbridge.runtime.settings_loader import load_settings
from wsbridge.runtime.dependencies import build_runtime_deps
from wsbridge.handlers.websocket import handle_websocket_connection

logger = logging.getLogger(__name__)

configure_logging()


@asynccontextmanager
async def _lifespan(app: FastAPI):
    app.state.runtime_deps = build_runtime_deps()
    logger.info("runtime: ready")
    yield


app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.websocket(WS_ENDPOINT_PATH)
async def websocket_endpoint(websocket: WebSocket) -> None:
    runtime_deps = getattr(app.state, "runtime_deps", None)
    if runtime_deps is None:
        raise RuntimeError("Runtime dependencies are not initialized")
    await handle_websocket_connection(websocket, runtime_deps)


def main() -> None:
    settings = load_settings()
    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
