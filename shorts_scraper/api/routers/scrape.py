"""Shorts scrape endpoint.

Routes
------
GET  /scrape                                       → scrape without cookies
POST /scrape    Body: {"cookiesContent": "..."}    → scrape with cookies.txt text
Any other method on /scrape gets an empty 405 (see ``shorts_scraper.api.app``).
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from shorts_scraper.errors import LocatorNotFound
from shorts_scraper.scraper.service import scrape_shorts

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ScrapeRequest(BaseModel):
    cookiesContent: Optional[str] = None


class ShortItem(BaseModel):
    id: Any = None
    title: str
    views: str
    url: str
    thumbnail: Optional[str] = None


class ScrapeResponse(BaseModel):
    total: int
    data: List[ShortItem]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _cookies_from_body(request: Request) -> Optional[str]:
    """Return ``cookiesContent`` from a JSON body, or ``None``.

    A missing, malformed, or mistyped body means "no cookies", never an error.
    """
    body = await request.body()
    if not body:
        return None
    try:
        payload = ScrapeRequest.model_validate_json(body)
    except ValidationError as exc:
        logger.debug("Ignoring unreadable request body: %s", exc)
        return None
    return payload.cookiesContent


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": message})


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.api_route(
    "",
    methods=["GET", "POST"],
    response_model=ScrapeResponse,
    responses={500: {"description": "Scrape failed; body is {\"error\": message}."}},
)
async def scrape(request: Request) -> Any:
    """Fetch YouTube's landing page and return every short found in it."""
    cookies_content = None
    if request.method == "POST":
        cookies_content = await _cookies_from_body(request)

    try:
        result = await run_in_threadpool(scrape_shorts, cookies_content)
    except LocatorNotFound as exc:
        logger.warning("ytInitialData not found in fetched page")
        return _error(str(exc))
    except Exception as exc:
        logger.exception("Scrape failed")
        return _error(str(exc))

    return result.to_dict()
