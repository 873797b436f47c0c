"""Geometry module for shapeplay.

This package provides value types, an explicit affine matrix, and the
coordinate space that maps resolution-independent model coordinates
onto screen points.

Key Components:
    - Primitives: Point, Size, Rect models
    - AffineTransform: 2D matrix with documented composition order
    - CoordinateSpace: model <-> screen conversion with a movable origin
    - Validators: setter argument checks raising InvalidArgumentError

Example:
    from shapeplay.geometry import CoordinateSpace, Point

    space = CoordinateSpace(points_per_unit=10.0)
    space.recenter(Point(x=150, y=150))
    screen = space.to_screen(Point(x=1, y=0))  # Point(x=160.0, y=150.0)
    space.to_model(screen)  # Point(x=1.0, y=0.0)
"""

from shapeplay.geometry.affine import AffineTransform
from shapeplay.geometry.coordinates import CoordinateSpace
from shapeplay.geometry.primitives import Point, Rect, Size
from shapeplay.geometry.validators import (
    require_finite,
    require_non_negative,
    require_positive,
)

__all__ = [
    "AffineTransform",
    "CoordinateSpace",
    "Point",
    "Rect",
    "Size",
    "require_finite",
    "require_non_negative",
    "require_positive",
]
