"""Main FastAPI application."""

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, Response

from ipchecker import __version__
from ipchecker.client_ip import get_client_ip
from ipchecker.config import Settings, get_settings
from ipchecker.pages import render_health, render_index


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with exactly two routes: the index page and the health probe.

    Also usable as an ASGI factory: ``uvicorn --factory ipchecker.main:create_app``.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="IP Checker",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request) -> HTMLResponse:
        return render_index(get_client_ip(request, settings.trusted_hops))

    # Health check for the load balancer
    @app.get("/health")
    async def health() -> Response:
        return render_health()

    return app

