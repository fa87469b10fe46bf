"""HTTP fetcher for the YouTube landing page."""

from __future__ import annotations

import logging
from typing import Any, Dict

import httpx

from shorts_scraper.config import settings
from shorts_scraper.errors import TransportError
from shorts_scraper.scraper.models import RawPage

logger = logging.getLogger(__name__)

# Non-browser user agents are served a reduced page without ytInitialData.
_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}


def _build_headers(cookie_header: str) -> Dict[str, str]:
    headers = dict(_DEFAULT_HEADERS)
    if cookie_header:
        headers["Cookie"] = cookie_header
    return headers


def fetch_page(url: str, cookie_header: str = "") -> RawPage:
    """Fetch *url* once and return a :class:`RawPage`.

    Non-2xx responses are returned as-is; the extractor reports them as a
    missing ytInitialData further down.

    Raises:
        TransportError: If the request fails at the network layer.
    """
    client_kwargs: Dict[str, Any] = {
        "headers": _build_headers(cookie_header),
        "follow_redirects": True,
    }
    if settings.request_timeout is not None:
        client_kwargs["timeout"] = settings.request_timeout

    try:
        with httpx.Client(**client_kwargs) as client:
            response = client.get(url)
            html = response.text
            status_code = response.status_code
    except httpx.RequestError as exc:
        raise TransportError(str(exc) or exc.__class__.__name__) from exc

    logger.info("Fetched %s: HTTP %d, %d chars", url, status_code, len(html))
    return RawPage(url=url, html=html, status_code=status_code)
