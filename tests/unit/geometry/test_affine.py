"""Unit tests for AffineTransform."""

from __future__ import annotations

import math

import pytest

from shapeplay.geometry import AffineTransform, Point


def _approx_point(point: Point) -> tuple[object, object]:
    return (pytest.approx(point.x, abs=1e-12), pytest.approx(point.y, abs=1e-12))


class TestConstructors:
    def test_identity(self) -> None:
        identity = AffineTransform.identity()
        assert identity.is_identity
        assert identity.apply_to_point(Point(x=3, y=4)) == Point(x=3, y=4)

    def test_uniform_scaling(self) -> None:
        scale = AffineTransform.scaling(2.0)
        assert scale.apply_to_point(Point(x=3, y=-4)) == Point(x=6, y=-8)

    def test_non_uniform_scaling(self) -> None:
        scale = AffineTransform.scaling(2.0, 0.5)
        assert scale.apply_to_point(Point(x=2, y=2)) == Point(x=4, y=1)

    def test_rotation_quarter_turn(self) -> None:
        """+x turns toward +y."""
        rotation = AffineTransform.rotation(math.pi / 2)
        result = rotation.apply_to_point(Point(x=1, y=0))
        assert (result.x, result.y) == _approx_point(Point(x=0, y=1))

    def test_translation(self) -> None:
        move = AffineTransform.translation(5, -5)
        assert move.apply_to_point(Point(x=1, y=1)) == Point(x=6, y=-4)


class TestConcat:
    def test_concat_with_identity_is_noop(self) -> None:
        rotation = AffineTransform.rotation(0.3)
        assert AffineTransform.identity().concat(rotation) == rotation
        assert rotation.concat(AffineTransform.identity()) == rotation

    def test_concat_applies_left_operand_first(self) -> None:
        """Scale then translate differs from translate then scale."""
        scale = AffineTransform.scaling(2.0)
        move = AffineTransform.translation(10, 0)
        point = Point(x=1, y=0)
        assert scale.concat(move).apply_to_point(point) == Point(x=12, y=0)
        assert move.concat(scale).apply_to_point(point) == Point(x=22, y=0)

    def test_scale_then_rotation_order(self) -> None:
        """Non-uniform scale before rotation keeps the stretched axis rotated."""
        scale = AffineTransform.scaling(2.0, 1.0)
        rotation = AffineTransform.rotation(math.pi / 2)
        result = scale.concat(rotation).apply_to_point(Point(x=1, y=0))
        assert (result.x, result.y) == _approx_point(Point(x=0, y=2))

        reversed_result = rotation.concat(scale).apply_to_point(Point(x=1, y=0))
        assert (reversed_result.x, reversed_result.y) == _approx_point(Point(x=0, y=1))

    def test_rotations_compose_additively(self) -> None:
        combined = AffineTransform.rotation(0.25).concat(AffineTransform.rotation(0.5))
        expected = AffineTransform.rotation(0.75)
        for got, want in zip(combined.to_tuple(), expected.to_tuple(), strict=True):
            assert got == pytest.approx(want, abs=1e-12)
