"""Utility functions for reading settings from the environment."""

import logging
import os
from typing import Final, Tuple

logger = logging.getLogger("spotify-api.utils.environment")

_TRUTHY: Final[Tuple[str, ...]] = ("true", "1", "yes", "y", "on")


def _truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in _TRUTHY


def env_str(name: str, default: str | None = None) -> str | None:
    """Return the stripped value of *name*, or *default* when unset/blank."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return _truthy(value)


def env_float(name: str, default: float) -> float:
    """
    Return *name* parsed as a float.

    Unparseable values are logged and replaced by *default* so a typo in an
    optional tuning knob does not prevent the client from starting.
    """
    raw = env_str(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %s", name, raw, default)
        return default
