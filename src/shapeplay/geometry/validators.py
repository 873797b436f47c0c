"""Argument validation for property setters.

Setters on drawables and the coordinate space reject bad geometry up
front instead of clamping it. Every check raises InvalidArgumentError
naming the offending property.
"""

from __future__ import annotations

import math

from shapeplay.exceptions import InvalidArgumentError


def require_finite(name: str, value: float) -> float:
    """Return value as a float, rejecting NaN and infinities.

    Raises:
        InvalidArgumentError: If value is not a finite number.
    """
    number = float(value)
    if not math.isfinite(number):
        raise InvalidArgumentError(f"{name} must be finite", name=name, value=value)
    return number


def require_non_negative(name: str, value: float) -> float:
    """Return value as a float, rejecting negative and non-finite values.

    Raises:
        InvalidArgumentError: If value is negative or not finite.
    """
    number = require_finite(name, value)
    if number < 0:
        raise InvalidArgumentError(
            f"{name} must be 0.0 or larger", name=name, value=value
        )
    return number


def require_positive(name: str, value: float) -> float:
    """Return value as a float, rejecting zero, negative and non-finite values.

    Raises:
        InvalidArgumentError: If value is not strictly positive.
    """
    number = require_finite(name, value)
    if number <= 0:
        raise InvalidArgumentError(f"{name} must be positive", name=name, value=value)
    return number
