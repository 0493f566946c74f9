"""
pagegen/routers/page.py
Endpoints:
  GET /  → the current live page (text/html)

Answers from the double buffer only; the refresh it triggers runs after
the response, in the background.
"""

import logging
import time

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from pagegen.core.regenerator import Regenerator

log = logging.getLogger("page")

router = APIRouter(tags=["page"])


def get_regenerator(request: Request) -> Regenerator:
    return request.app.state.regenerator


@router.get("/", response_class=HTMLResponse)
async def serve_page(regenerator: Regenerator = Depends(get_regenerator)):
    t0 = time.monotonic()
    log.info("Handling new request")

    page = regenerator.serve()
    regenerator.trigger()

    log.info(f"Finished handling request in {(time.monotonic() - t0) * 1000:.1f}ms")
    return HTMLResponse(page)
