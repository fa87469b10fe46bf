"""Netscape ``cookies.txt`` → ``Cookie`` request header."""

from __future__ import annotations

import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

# domain, include-subdomains flag, path, secure, expiry, name, value
_MIN_FIELDS = 7
_NAME_FIELD = 5
_VALUE_FIELD = 6


def build_cookie_header(text: Optional[str]) -> str:
    """Turn the contents of a Netscape cookies file into a ``Cookie`` header.

    Blank lines and ``#`` comments are skipped.  Lines with fewer than seven
    tab-separated fields are dropped silently.  Returns ``""`` for empty input.

    Example::

        >>> build_cookie_header("example.com\\tTRUE\\t/\\tFALSE\\t0\\tsid\\tabc123\\n")
        'sid=abc123'
    """
    if not text:
        return ""

    pairs: List[str] = []
    for lineno, line in enumerate(text.split("\n"), start=1):
        if not line.strip() or line.startswith("#"):
            continue
        parts = line.split("\t")
        if len(parts) < _MIN_FIELDS:
            logger.debug("Skipping malformed cookie line %d (%d fields)", lineno, len(parts))
            continue
        pairs.append(f"{parts[_NAME_FIELD]}={parts[_VALUE_FIELD].strip()}")

    return "; ".join(pairs)
