"""
Runtime settings read from the environment.

Environment Variables:
    OUTPOST_MAX_DEPTH: Maximum container nesting accepted (1-128) - default: 64
    OUTPOST_SORT_SETS: Sort set elements for reproducible output (true/false) - default: false
    OUTPOST_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    OUTPOST_LOG_FORMAT: Log format (json, text) - default: text
"""

import logging
import os
from dataclasses import dataclass

from .core.limits import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT

logger = logging.getLogger(__name__)


def _env_int(key: str, default: int, maximum: int) -> int:
    val = os.getenv(key)
    if val is None or val == "":
        return default
    try:
        parsed = int(val)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %d", key, val, default)
        return default
    if parsed < 1:
        logger.warning("Ignoring non-positive %s=%r, using %d", key, val, default)
        return default
    if parsed > maximum:
        logger.warning("Ignoring %s=%r above %d, using %d", key, val, maximum, default)
        return default
    return parsed


@dataclass(frozen=True)
class Settings:
    max_depth: int = DEFAULT_MAX_DEPTH
    sort_sets: bool = False
    log_level: str = "INFO"
    log_format: str = "text"

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            max_depth=_env_int("OUTPOST_MAX_DEPTH", DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT),
            sort_sets=os.getenv("OUTPOST_SORT_SETS", "false").lower() == "true",
            log_level=os.getenv("OUTPOST_LOG_LEVEL", "INFO").upper(),
            log_format=os.getenv("OUTPOST_LOG_FORMAT", "text").lower(),
        )
