"""Coercion helpers for configuration values read from JSON or the CLI.

Each helper turns loosely typed input into the number it describes, or falls
back to ``default``.  A warning is logged on every fallback so a bad config
file is visible without aborting generation.
"""

from __future__ import annotations

from typing import Any, Tuple
import math
import logging

logger = logging.getLogger(__name__)


def to_int(value: Any, default: int = 0) -> int:
    """Coerce ``value`` to ``int``.

    Booleans are rejected.  Integral floats (``3.0``) and integer strings
    (``" -4 "``) are accepted; anything else yields ``default``.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        s = value.strip()
        # isdecimal, not isdigit: "²" is a digit that int() rejects
        if s and (s.isdecimal() or (s[0] in {"+", "-"} and s[1:].isdecimal())):
            try:
                return int(s)
            except ValueError:
                pass
    if value is None:
        return default
    logger.warning("to_int: coercing %r to default %r", value, default)
    return default


def to_float(value: Any, default: float = 0.0) -> float:
    """Coerce ``value`` to a finite ``float``; NaN and inf yield ``default``."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        f = float(value)
        if math.isfinite(f):
            return f
    elif isinstance(value, str):
        try:
            f = float(value.strip())
        except ValueError:
            f = math.nan
        if math.isfinite(f):
            return f
    elif value is None:
        return default
    logger.warning("to_float: coercing %r to default %r", value, default)
    return default


def to_pair(value: Any, default: Tuple[float, float] = (0.0, 0.0)) -> Tuple[float, float]:
    """Coerce a two-element sequence (or ``{"x":..,"y":..}``) to a float pair."""
    if isinstance(value, dict):
        value = (value.get("x"), value.get("y"))
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return (to_float(value[0], default[0]), to_float(value[1], default[1]))
    if value is None:
        return default
    logger.warning("to_pair: coercing %r to default %r", value, default)
    return default
