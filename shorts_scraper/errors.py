"""Request-level failures raised by the scraper.

Anything that subclasses :class:`ScrapeError` aborts the whole request.
Problems confined to a single cookie line or a single shorts entry are never
raised; they are dropped where they occur.
"""

from __future__ import annotations

LOCATOR_NOT_FOUND_MESSAGE = (
    "Failed to locate ytInitialData. "
    "YouTube might have changed layout or blocked the request."
)


class ScrapeError(Exception):
    """Base class for terminal scrape failures."""


class TransportError(ScrapeError):
    """The outbound fetch failed at the network layer."""


class LocatorNotFound(ScrapeError):
    """The page did not contain a ``var ytInitialData = {...};`` assignment."""

    def __init__(self, message: str = LOCATOR_NOT_FOUND_MESSAGE) -> None:
        super().__init__(message)


class BlobParseError(ScrapeError):
    """The located ytInitialData text is not valid JSON."""
