"""One scrape, end to end: cookies → fetch → extract."""

from __future__ import annotations

import logging
from typing import Optional

from shorts_scraper.config import settings
from shorts_scraper.scraper.cookies import build_cookie_header
from shorts_scraper.scraper.extractor import extract_shorts
from shorts_scraper.scraper.fetcher import fetch_page
from shorts_scraper.scraper.models import ResultSet

logger = logging.getLogger(__name__)


def scrape_shorts(cookies_content: Optional[str] = None) -> ResultSet:
    """Fetch the YouTube landing page and return the shorts it lists.

    Args:
        cookies_content: Optional Netscape ``cookies.txt`` text sent along
            as the ``Cookie`` header.

    Raises:
        shorts_scraper.errors.ScrapeError: On transport, locate, or parse
            failure.  Nothing is retried.
    """
    cookie_header = build_cookie_header(cookies_content)
    raw = fetch_page(settings.source_url, cookie_header)
    result = extract_shorts(raw)
    logger.info("Found %d shorts (cookies=%s)", result.total, bool(cookie_header))
    return result
