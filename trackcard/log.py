# trackcard/log.py
"""Logging setup shared by the web and MCP entry points."""

import logging
import sys


def configure_logging(level: str | int = logging.INFO) -> None:
    """Send log records to stderr; stdout belongs to the MCP stdio transport."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # httpx logs every request at INFO, which drowns out our own lines
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
