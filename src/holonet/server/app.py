"""
FastAPI app factory for the HOLONET demo server.

Routes:
- GET / and /index.html: static landing page
- GET /api: start one Orchestrator run in the background
- anything else: plain-text 404

Run output goes to the process log; the HTTP response never reports it.
"""

from __future__ import annotations

import logging

from fastapi import BackgroundTasks, FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from holonet.config import Settings, settings as default_settings
from holonet.pipeline import Orchestrator

logger = logging.getLogger(__name__)

INDEX_HTML = (
    "<!DOCTYPE html><html><head><title>Star Wars API Demo</title></head>"
    "<body><h1>Star Wars API</h1><p>Open the console to see the data.</p>"
    "</body></html>"
)
API_ACK = "Fetching Star Wars data. Check the console."


def create_app(
    settings: Settings | None = None,
    orchestrator: Orchestrator | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    The app owns one Orchestrator, so cache, counters and cursor persist
    across /api requests for the life of the process.
    """
    settings = settings or default_settings

    app = FastAPI(title="Star Wars API Demo", docs_url=None, redoc_url=None, openapi_url=None)

    app.state.settings = settings
    app.state.orchestrator = orchestrator or Orchestrator(settings=settings)

    register_routes(app)

    return app


def register_routes(app: FastAPI) -> None:
    """Register all routes on the FastAPI app."""

    @app.get("/", response_class=HTMLResponse)
    @app.get("/index.html", response_class=HTMLResponse)
    async def index() -> HTMLResponse:  # pyright: ignore[reportUnusedFunction]
        return HTMLResponse(INDEX_HTML)

    @app.get("/api", response_class=PlainTextResponse)
    async def api(background_tasks: BackgroundTasks) -> PlainTextResponse:  # pyright: ignore[reportUnusedFunction]
        orchestrator: Orchestrator = app.state.orchestrator
        background_tasks.add_task(orchestrator.run)
        logger.debug("Scheduled orchestrator run")
        return PlainTextResponse(API_ACK)

    @app.exception_handler(StarletteHTTPException)
    async def not_found(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:  # pyright: ignore[reportUnusedFunction]
        if exc.status_code == 404:
            return PlainTextResponse("Not Found", status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)
