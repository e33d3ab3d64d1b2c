"""Logging helpers shared across the package."""

from __future__ import annotations

import logging
import os

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def mask_sensitive(value: str | None, keep: int = 4) -> str:
    """Return *value* with everything after the first *keep* characters hidden.

    >>> mask_sensitive("abcdefgh", 3)
    'abc****'
    """
    if not value:
        return "<empty>"
    return f"{value[:keep]}****"


def setup_logging(level: int | str | None = None) -> logging.Logger:
    """Configure the ``spotify-api`` logger hierarchy for scripts.

    Libraries should not call this; it exists for the CLI helpers.  The level
    falls back to ``SPOTIFY_LOG_LEVEL`` and then to ``WARNING``.
    """
    resolved = level or os.getenv("SPOTIFY_LOG_LEVEL", "WARNING").upper()
    logger = logging.getLogger("spotify-api")
    logger.setLevel(resolved)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        logger.addHandler(handler)
    return logger
