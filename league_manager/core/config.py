"""Application configuration. Load from environment."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LEAGUE_NAME = "Sports League"


def get_league_name() -> str:
    """Return LEAGUE_NAME from environment, or the default display name."""
    name = os.environ.get("LEAGUE_NAME", "").strip()
    return name or DEFAULT_LEAGUE_NAME


def get_log_level() -> int:
    """Return the numeric level for LOG_LEVEL (default INFO). Raises if unknown."""
    raw = os.environ.get("LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise RuntimeError(f"LOG_LEVEL {raw!r} is not a valid logging level")
    return level
