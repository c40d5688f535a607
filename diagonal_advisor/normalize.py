"""Numeric input coercion.

Form fields arrive as whatever the caller typed: floats, ints, numeric
strings, empty strings, ``None``. Every numeric field goes through
``to_number`` so a malformed value degrades to a field-specific default
instead of failing the evaluation.
"""

from __future__ import annotations

import math
import numbers
import re
from decimal import Decimal
from typing import Any

# Leading ASCII decimal literal: optional sign, digits with optional fraction, optional exponent.
_DECIMAL_PREFIX = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

DELTA_DEFAULT = 0.0
THETA_DEFAULT = 0.0
IV_DEFAULT = 0.0
FAR_DAYS_DEFAULT = 999.0


def to_number(value: Any, default: float | None = 0.0) -> float | None:
    """Coerce ``value`` to a finite float, or return ``default``.

    Finite real numbers pass through unchanged (as float). Strings are read
    by their leading decimal literal, so ``"0.25 "`` and ``"12abc"`` parse
    while ``"abc"`` does not. Booleans, ``None``, NaN and infinities all
    fall back to ``default``.
    """
    if isinstance(value, bool):
        return default

    if isinstance(value, (numbers.Real, Decimal)):
        try:
            v = float(value)
        except (OverflowError, ValueError):
            return default
        return v if math.isfinite(v) else default

    if isinstance(value, (str, bytes)):
        text = value.decode(errors="ignore") if isinstance(value, bytes) else value
        match = _DECIMAL_PREFIX.match(text.strip())
        if match is None:
            return default
        try:
            v = float(match.group(0))
        except (OverflowError, ValueError):
            return default
        return v if math.isfinite(v) else default

    return default
