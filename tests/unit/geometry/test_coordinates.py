"""Unit tests for CoordinateSpace.

Covers the model <-> screen formulas, magnitude conversion, recentering,
and property-based round-trips.
"""

from __future__ import annotations

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from shapeplay.exceptions import InvalidArgumentError
from shapeplay.geometry import CoordinateSpace, Point, Size

coords = st.floats(min_value=-1e4, max_value=1e4, allow_nan=False, allow_infinity=False)
offsets = st.floats(min_value=0.0, max_value=1e4, allow_nan=False, allow_infinity=False)
factors = st.floats(min_value=1.0, max_value=100.0)


@pytest.fixture
def space() -> CoordinateSpace:
    return CoordinateSpace(points_per_unit=10.0, center_offset=Point(x=150, y=150))


class TestPointConversion:
    def test_origin_maps_to_center_offset(self, space: CoordinateSpace) -> None:
        assert space.to_screen(Point(x=0, y=0)) == Point(x=150, y=150)

    def test_to_screen_flips_y(self, space: CoordinateSpace) -> None:
        """Model y is up, screen y is down."""
        assert space.to_screen(Point(x=1, y=2)) == Point(x=160, y=130)

    def test_to_model(self, space: CoordinateSpace) -> None:
        assert space.to_model(Point(x=160, y=150)) == Point(x=1, y=0)
        assert space.to_model(Point(x=100, y=200)) == Point(x=-5, y=-5)

    def test_default_space(self) -> None:
        space = CoordinateSpace()
        assert space.points_per_unit == 10.0
        assert space.center_offset == Point()


class TestMagnitudes:
    def test_magnitude_to_screen(self, space: CoordinateSpace) -> None:
        assert space.magnitude_to_screen(2.5) == 25.0

    def test_magnitude_to_model(self, space: CoordinateSpace) -> None:
        assert space.magnitude_to_model(25.0) == 2.5

    def test_magnitudes_ignore_center_offset(self, space: CoordinateSpace) -> None:
        space.recenter(Point(x=999, y=-999))
        assert space.magnitude_to_screen(1.0) == 10.0

    def test_size_conversion(self, space: CoordinateSpace) -> None:
        assert space.size_to_screen(Size(width=10, height=4)) == Size(width=100, height=40)
        assert space.size_to_model(Size(width=300, height=300)) == Size(width=30, height=30)

    def test_magnitude_rejects_nan(self, space: CoordinateSpace) -> None:
        with pytest.raises(InvalidArgumentError, match="must be finite"):
            space.magnitude_to_screen(math.nan)


class TestRecenter:
    def test_recenter_returns_delta(self, space: CoordinateSpace) -> None:
        delta = space.recenter(Point(x=200, y=100))
        assert delta == Point(x=50, y=-50)
        assert space.center_offset == Point(x=200, y=100)

    def test_recenter_to_same_offset_has_zero_delta(self, space: CoordinateSpace) -> None:
        assert space.recenter(Point(x=150, y=150)) == Point()

    def test_shifted_anchor_keeps_model_point(self, space: CoordinateSpace) -> None:
        model = Point(x=3, y=-2)
        anchor = space.to_screen(model)
        delta = space.recenter(Point(x=400, y=250))
        assert space.to_model(anchor + delta) == model


class TestValidation:
    @pytest.mark.parametrize("factor", [0.0, -10.0])
    def test_rejects_non_positive_points_per_unit(self, factor: float) -> None:
        with pytest.raises(InvalidArgumentError, match="must be positive"):
            CoordinateSpace(points_per_unit=factor)


class TestRoundTrips:
    """Property-based round-trip tests."""

    @given(x=coords, y=coords, cx=offsets, cy=offsets, factor=factors)
    def test_model_screen_model_roundtrip(
        self, x: float, y: float, cx: float, cy: float, factor: float
    ) -> None:
        space = CoordinateSpace(points_per_unit=factor, center_offset=Point(x=cx, y=cy))
        original = Point(x=x, y=y)
        roundtripped = space.to_model(space.to_screen(original))
        assert roundtripped.x == pytest.approx(original.x, rel=1e-9, abs=1e-9)
        assert roundtripped.y == pytest.approx(original.y, rel=1e-9, abs=1e-9)

    @given(x=coords, y=coords, cx=offsets, cy=offsets, factor=factors)
    def test_screen_model_screen_roundtrip(
        self, x: float, y: float, cx: float, cy: float, factor: float
    ) -> None:
        space = CoordinateSpace(points_per_unit=factor, center_offset=Point(x=cx, y=cy))
        original = Point(x=x, y=y)
        roundtripped = space.to_screen(space.to_model(original))
        assert roundtripped.x == pytest.approx(original.x, rel=1e-9, abs=1e-9)
        assert roundtripped.y == pytest.approx(original.y, rel=1e-9, abs=1e-9)
