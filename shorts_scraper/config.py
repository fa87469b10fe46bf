"""Centralised settings for the shorts scraper.

Tunable values can be overridden via environment variables or a `.env` file
in the project root (loaded automatically when this module is imported).
The fetch target itself is fixed and is not read from the environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

SOURCE_URL = "https://www.youtube.com/"
YOUTUBE_ORIGIN = "https://www.youtube.com"


def _optional_float(name: str) -> Optional[float]:
    value = os.environ.get(name, "").strip()
    return float(value) if value else None


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Fetch target
    # ------------------------------------------------------------------
    source_url: str = SOURCE_URL
    youtube_origin: str = YOUTUBE_ORIGIN

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------
    # None leaves httpx's own default timeout in place.
    request_timeout: Optional[float] = field(
        default_factory=lambda: _optional_float("REQUEST_TIMEOUT")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )

    def configure_logging(self) -> None:
        """Apply :attr:`log_level` to the root logger (no-op if already configured)."""
        logging.basicConfig(
            level=self.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# Module-level singleton — import this everywhere:
#   from shorts_scraper.config import settings
settings = Settings()
