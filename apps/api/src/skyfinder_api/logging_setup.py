"""Process-wide logging configuration."""

from __future__ import annotations

import logging
import sys

_LOGGING_CONFIGURED = False


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once per process.  Safe to call repeatedly."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stdout,
    )
    _LOGGING_CONFIGURED = True
