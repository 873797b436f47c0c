"""Unit tests for geometry primitives.

Tests Point, Size, and Rect Pydantic models including:
- Construction and validation
- Arithmetic and computed properties
- Tuple conversion (to/from)
- Rect containment and construction from a center
"""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from shapeplay.geometry import Point, Rect, Size


class TestPoint:
    """Tests for the Point model."""

    def test_point_defaults_to_origin(self) -> None:
        point = Point()
        assert point.x == 0.0
        assert point.y == 0.0

    def test_point_allows_negative_coordinates(self) -> None:
        """Model space is centered on the origin, so negatives are normal."""
        point = Point(x=-3.5, y=-1.25)
        assert point.to_tuple() == (-3.5, -1.25)

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_point_rejects_non_finite(self, bad: float) -> None:
        with pytest.raises(ValidationError):
            Point(x=bad, y=0.0)

    def test_point_addition_and_subtraction(self) -> None:
        a = Point(x=3, y=4)
        b = Point(x=1, y=-2)
        assert a + b == Point(x=4, y=2)
        assert a - b == Point(x=2, y=6)

    def test_point_from_tuple(self) -> None:
        assert Point.from_tuple((1.5, 2.5)) == Point(x=1.5, y=2.5)

    def test_point_is_frozen(self) -> None:
        point = Point(x=1, y=2)
        with pytest.raises(ValidationError):
            point.x = 3  # type: ignore[misc]

    def test_point_hashable(self) -> None:
        assert len({Point(x=1, y=2), Point(x=1, y=2)}) == 1

    def test_point_quick_look(self) -> None:
        assert Point(x=1.0, y=-2.0).quick_look() == "x = 1.0, y = -2.0"


class TestSize:
    """Tests for the Size model."""

    def test_size_allows_zero(self) -> None:
        size = Size(width=0, height=0)
        assert size.to_tuple() == (0.0, 0.0)

    def test_size_rejects_negative_width(self) -> None:
        with pytest.raises(ValidationError, match="greater than or equal to 0"):
            Size(width=-1, height=10)

    def test_size_rejects_negative_height(self) -> None:
        with pytest.raises(ValidationError, match="greater than or equal to 0"):
            Size(width=10, height=-1)

    def test_size_from_tuple(self) -> None:
        assert Size.from_tuple((10, 20)) == Size(width=10, height=20)


class TestRect:
    """Tests for the Rect model."""

    def test_rect_edges_and_center(self) -> None:
        rect = Rect(x=10, y=20, width=100, height=50)
        assert rect.right == 110
        assert rect.bottom == 70
        assert rect.center == Point(x=60, y=45)
        assert rect.size == Size(width=100, height=50)

    def test_rect_from_center(self) -> None:
        rect = Rect.from_center(Point(x=150, y=150), Size(width=100, height=100))
        assert rect == Rect(x=100, y=100, width=100, height=100)
        assert rect.center == Point(x=150, y=150)

    def test_rect_offset_by(self) -> None:
        rect = Rect(x=0, y=0, width=10, height=10).offset_by(Point(x=5, y=-5))
        assert rect == Rect(x=5, y=-5, width=10, height=10)

    def test_rect_contains_point_inclusive(self) -> None:
        rect = Rect(x=0, y=0, width=10, height=10)
        assert rect.contains_point(Point(x=0, y=0))
        assert rect.contains_point(Point(x=10, y=10))
        assert rect.contains_point(Point(x=5, y=5))
        assert not rect.contains_point(Point(x=10.1, y=5))
        assert not rect.contains_point(Point(x=5, y=-0.1))

    def test_rect_rejects_negative_size(self) -> None:
        with pytest.raises(ValidationError):
            Rect(width=-1, height=1)
