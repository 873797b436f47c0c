"""Unit tests for geometry validators.

Tests the require_* guards including:
- Accepted values are returned as floats
- Rejection of negative, zero and non-finite values
- InvalidArgumentError context information
"""

from __future__ import annotations

import math

import pytest

from shapeplay.exceptions import InvalidArgumentError
from shapeplay.geometry import require_finite, require_non_negative, require_positive


class TestRequireFinite:
    """Tests for require_finite."""

    def test_returns_float(self) -> None:
        result = require_finite("rotation", 3)
        assert result == 3.0
        assert isinstance(result, float)

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_rejects_non_finite(self, bad: float) -> None:
        with pytest.raises(InvalidArgumentError, match="rotation must be finite"):
            require_finite("rotation", bad)


class TestRequireNonNegative:
    """Tests for require_non_negative."""

    @pytest.mark.parametrize("value", [0.0, 0.5, 1e6])
    def test_accepts_zero_and_positive(self, value: float) -> None:
        assert require_non_negative("radius", value) == value

    def test_rejects_negative(self) -> None:
        with pytest.raises(InvalidArgumentError, match="radius must be 0.0 or larger"):
            require_non_negative("radius", -0.1)

    def test_rejects_infinity(self) -> None:
        with pytest.raises(InvalidArgumentError, match="must be finite"):
            require_non_negative("radius", math.inf)


class TestRequirePositive:
    """Tests for require_positive."""

    def test_accepts_positive(self) -> None:
        assert require_positive("points_per_unit", 10) == 10.0

    @pytest.mark.parametrize("bad", [0.0, -1.0])
    def test_rejects_zero_and_negative(self, bad: float) -> None:
        with pytest.raises(InvalidArgumentError, match="must be positive"):
            require_positive("points_per_unit", bad)


class TestErrorContext:
    """Tests for the context carried by InvalidArgumentError."""

    def test_error_names_argument_and_value(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            require_non_negative("border_width", -2.0)

        error = exc_info.value
        assert error.name == "border_width"
        assert error.value == -2.0
        assert str(error) == "border_width must be 0.0 or larger (border_width=-2.0)"

    def test_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            require_positive("scale", -1.0)
