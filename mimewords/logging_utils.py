"""Central logging configuration for mimewords.

Provides a single configure_logging function used by the command line.
Safe to call multiple times; only configures root handlers once.
"""
from __future__ import annotations

import logging
import os

# Include filename:lineno for easier debugging
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(filename)s:%(lineno)d - %(message)s"


def _base_level(default: str | None) -> int:
    level_name = (os.getenv("LOG_LEVEL") or default or "INFO").upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(verbose: bool = False, level: str | None = None) -> None:
    """Configure the root logger once and adjust its level.

    Args:
        verbose: If True force DEBUG level.
        level: Level name used when ``LOG_LEVEL`` is not set in the
            environment (typically from the config file). Defaults to INFO.
    """
    target = logging.DEBUG if verbose else _base_level(level)

    # Only add handlers once to prevent duplicate log lines.
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=target, format=DEFAULT_FORMAT)
    else:
        root.setLevel(target)
