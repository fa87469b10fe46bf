"""Scraper package — page fetch, cookie handling & shorts extraction."""

from shorts_scraper.scraper.cookies import build_cookie_header
from shorts_scraper.scraper.extractor import extract_shorts, find_shorts
from shorts_scraper.scraper.fetcher import fetch_page
from shorts_scraper.scraper.models import RawPage, ResultSet, ShortRecord
from shorts_scraper.scraper.service import scrape_shorts

__all__ = [
    "build_cookie_header",
    "extract_shorts",
    "fetch_page",
    "find_shorts",
    "scrape_shorts",
    "RawPage",
    "ResultSet",
    "ShortRecord",
]
