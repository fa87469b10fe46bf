"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass
class ShortRecord:
    """One short-form video entry pulled out of ytInitialData.

    ``url`` is always an absolute watch URL; entries without one are never
    built.  ``title`` and ``views`` fall back to ``"Unknown"`` / ``"N/A"``.
    ``id`` is the payload's ``entityId`` exactly as found, of whatever JSON type.
    """

    id: Any
    title: str
    views: str
    url: str
    thumbnail: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "views": self.views,
            "url": self.url,
            "thumbnail": self.thumbnail,
        }


@dataclass
class ResultSet:
    """Ordered shorts found in one page, in traversal order."""

    records: List[ShortRecord] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.records)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "data": [r.to_dict() for r in self.records],
        }
