"""Shorts extraction: locates ytInitialData in a page and walks it for shorts.

The page embeds its initial state as ``var ytInitialData = {...};``.  The
structure of that document changes often, so rather than following a fixed
path the extractor searches the whole tree for ``shortsLockupViewModel``
objects and reads what it can from each one.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, List, Optional, Union

from shorts_scraper.config import settings
from shorts_scraper.errors import BlobParseError, LocatorNotFound
from shorts_scraper.scraper.models import RawPage, ResultSet, ShortRecord

logger = logging.getLogger(__name__)

MARKER_KEY = "shortsLockupViewModel"
UNKNOWN_TITLE = "Unknown"
UNKNOWN_VIEWS = "N/A"

# Non-greedy up to the first "};" on the same line; not a brace-balanced parse.
_INITIAL_DATA_RE = re.compile(r"var ytInitialData\s*=\s*(\{.+?\});")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _dig(node: Any, *path: str) -> Any:
    """Follow *path* through nested dicts, returning ``None`` at the first gap."""
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def _text(value: Any) -> Optional[str]:
    """Return *value* if it is a non-empty string, else ``None``."""
    if isinstance(value, str) and value:
        return value
    return None


def _resolve_title(payload: dict) -> str:
    title = _text(_dig(payload, "overlayMetadata", "primaryText", "content"))
    if title:
        return title
    # Accessibility text reads "<title>, <N> views".
    accessibility = _text(payload.get("accessibilityText"))
    if accessibility:
        return accessibility.split(",", 1)[0]
    return UNKNOWN_TITLE


def _resolve_thumbnail(payload: dict) -> Optional[str]:
    sources = _dig(payload, "thumbnailViewModel", "thumbnailViewModel", "image", "sources")
    if not isinstance(sources, list) or not sources:
        return None
    # Sources are ordered by ascending resolution.
    last = sources[-1]
    if last is None:
        raise ValueError("null thumbnail source")
    if not isinstance(last, dict):
        return None
    return _text(last.get("url"))


def _build_record(payload: dict) -> Optional[ShortRecord]:
    """Build a :class:`ShortRecord` from a ``shortsLockupViewModel`` payload.

    Returns ``None`` when the payload has no watch URL.
    """
    path = _text(
        _dig(
            payload,
            "onTap", "innertubeCommand", "commandMetadata", "webCommandMetadata", "url",
        )
    )
    if not path:
        return None

    return ShortRecord(
        id=payload.get("entityId"),
        title=_resolve_title(payload),
        views=_text(_dig(payload, "overlayMetadata", "secondaryText", "content")) or UNKNOWN_VIEWS,
        url=f"{settings.youtube_origin}{path}",
        thumbnail=_resolve_thumbnail(payload),
    )


def _walk(node: Any, results: List[ShortRecord]) -> None:
    if isinstance(node, dict):
        payload = node.get(MARKER_KEY)
        if isinstance(payload, dict):
            try:
                record = _build_record(payload)
            except Exception as exc:  # noqa: BLE001
                logger.debug("Skipping malformed %s: %r", MARKER_KEY, exc)
                record = None
            if record is not None:
                results.append(record)
        children = node.values()
    elif isinstance(node, list):
        children = node
    else:
        return

    for child in children:
        _walk(child, results)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def locate_initial_data(html: str) -> str:
    """Return the JSON text assigned to ``ytInitialData`` in *html*.

    Raises:
        LocatorNotFound: If the assignment is not present.
    """
    match = _INITIAL_DATA_RE.search(html)
    if match is None:
        raise LocatorNotFound()
    return match.group(1)


def parse_initial_data(blob: str) -> Any:
    """Parse the located ytInitialData text.

    Raises:
        BlobParseError: If *blob* is not valid JSON.
    """
    try:
        return json.loads(blob)
    except json.JSONDecodeError as exc:
        raise BlobParseError(str(exc)) from exc


def find_shorts(tree: Any) -> List[ShortRecord]:
    """Collect every short in *tree*, depth-first, in pre-order.

    An object's own marker is checked before its children are visited, and
    the walk continues inside matched payloads too.  Entries that cannot be
    read, or that have no URL, are dropped without aborting the walk.
    """
    results: List[ShortRecord] = []
    _walk(tree, results)
    return results


def extract_shorts(raw: Union[RawPage, str]) -> ResultSet:
    """Locate, parse, and search the ytInitialData embedded in *raw*."""
    html = raw.html if isinstance(raw, RawPage) else raw
    tree = parse_initial_data(locate_initial_data(html))
    return ResultSet(records=find_shorts(tree))
