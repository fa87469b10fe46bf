"""FastAPI application factory.

Routers
-------
    /scrape    — fetch YouTube's landing page and extract its shorts
    /health    — liveness probe

Each request is self-contained: nothing is cached or shared between calls.
"""

from __future__ import annotations

from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from shorts_scraper.api.routers import scrape as scrape_router
from shorts_scraper.config import settings


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    settings.configure_logging()

    app = FastAPI(
        title="Shorts Scraper API",
        description=(
            "Fetches the YouTube landing page, optionally with the caller's "
            "cookies, and returns the short-form videos listed in its "
            "embedded ytInitialData."
        ),
        version="0.1.0",
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(scrape_router.router, prefix="/scrape", tags=["scrape"])

    @app.exception_handler(StarletteHTTPException)
    async def empty_method_not_allowed(request: Request, exc: StarletteHTTPException) -> Response:
        # 405s carry only the Allow header, never a body.
        if exc.status_code == 405:
            return Response(status_code=405, headers=exc.headers)
        return await http_exception_handler(request, exc)

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


# Module-level instance used by uvicorn:
#   uvicorn shorts_scraper.api.app:app --reload
app = create_app()
