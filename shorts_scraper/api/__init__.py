"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from shorts_scraper.api import app

    uvicorn shorts_scraper.api:app --reload
"""

from shorts_scraper.api.app import app

__all__ = ["app"]
