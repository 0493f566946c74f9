"""
pagegen/main.py  - LLM page server
Startup order (anything failing before step 4 exits 1, nothing is bound):
  1. logging
  2. Bedrock generator
  3. seed page, generated synchronously
  4. bind HOST:PORT
  5. uvicorn on the pre-bound socket
After that every request is served from the double buffer.
"""

import asyncio
import logging
import socket
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from pagegen.core.config import HOST, PORT, LOG_LEVEL, LOG_FORMAT, SHUTDOWN_GRACE_S
from pagegen.core.errors import BindError, StartupGenerationError
from pagegen.core.regenerator import Regenerator
from pagegen.generators.base import ContentGenerator
from pagegen.routers import page

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
log = logging.getLogger("main")


def create_app(regenerator: Regenerator) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info(f"🚀 Serving page v{regenerator.buffer.version}")
        yield
        log.info("🛑 Shutting down...")
        await regenerator.drain(SHUTDOWN_GRACE_S)

    app = FastAPI(
        title="pagegen",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.regenerator = regenerator
    app.include_router(page.router)
    return app


def bind_socket(host: str = HOST, port: int = PORT) -> socket.socket:
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as ex:
        sock.close()
        raise BindError(host, port, ex) from ex
    sock.set_inheritable(True)
    return sock


def serve(regenerator: Regenerator, sock: socket.socket) -> None:
    config = uvicorn.Config(create_app(regenerator), log_level=LOG_LEVEL.lower())
    uvicorn.Server(config).run(sockets=[sock])


def main(generator: Optional[ContentGenerator] = None, host: str = HOST, port: int = PORT) -> int:
    if generator is None:
        from pagegen.generators.bedrock import BedrockGenerator
        generator = BedrockGenerator()

    try:
        regenerator = asyncio.run(Regenerator.bootstrap(generator))
    except StartupGenerationError as ex:
        log.critical(f"Initial page generation failed, not serving: {ex}")
        return 1

    try:
        sock = bind_socket(host, port)
    except BindError as ex:
        log.critical(str(ex))
        return 1

    log.info(f"Server running on http://{host}:{port}")
    try:
        serve(regenerator, sock)
    finally:
        sock.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
