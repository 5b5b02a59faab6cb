"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger once; unknown level names fall back to WARNING."""
    logging.basicConfig(
        format=LOG_FORMAT,
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.WARNING),
    )
