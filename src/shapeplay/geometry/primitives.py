"""Geometry primitives for shapeplay.

This module provides immutable Pydantic models for points, sizes and
rectangles. The same types are used in both coordinate systems:

- Model space: origin at the canvas center, y increases upward.
- Screen space: origin at the viewport top-left, y increases downward.

Which space a value lives in is a property of where it came from, not of
the type; `shapeplay.geometry.coordinates.CoordinateSpace` converts
between the two.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field


class Point(BaseModel, frozen=True):
    """A 2D point (or displacement).

    Attributes:
        x: Horizontal component.
        y: Vertical component.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    x: float = Field(default=0.0, description="Horizontal component")
    y: float = Field(default=0.0, description="Vertical component")

    def __add__(self, other: Point) -> Point:
        return Point(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(x=self.x - other.x, y=self.y - other.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, coord: tuple[float, float]) -> Self:
        """Create Point from (x, y) tuple."""
        return cls(x=coord[0], y=coord[1])

    def quick_look(self) -> str:
        """Short human-readable description."""
        return f"x = {self.x}, y = {self.y}"


class Size(BaseModel, frozen=True):
    """A 2D extent. Both dimensions must be non-negative.

    Attributes:
        width: Horizontal extent.
        height: Vertical extent.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    width: float = Field(..., ge=0, description="Horizontal extent")
    height: float = Field(..., ge=0, description="Vertical extent")

    def to_tuple(self) -> tuple[float, float]:
        """Convert to (width, height) tuple."""
        return (self.width, self.height)

    @classmethod
    def from_tuple(cls, size: tuple[float, float]) -> Self:
        """Create Size from (width, height) tuple."""
        return cls(width=size[0], height=size[1])


class Rect(BaseModel, frozen=True):
    """An axis-aligned rectangle in screen space.

    Defined by its top-left corner (x, y) and dimensions. Used for
    viewport bounds and for the frames of visuals handed to the
    rendering backend.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Horizontal extent (>= 0).
        height: Vertical extent (>= 0).
    """

    model_config = ConfigDict(allow_inf_nan=False)

    x: float = 0.0
    y: float = 0.0
    width: float = Field(default=0.0, ge=0)
    height: float = Field(default=0.0, ge=0)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        """Return the center of the rectangle."""
        return Point(x=self.x + self.width / 2, y=self.y + self.height / 2)

    @property
    def size(self) -> Size:
        return Size(width=self.width, height=self.height)

    @classmethod
    def from_center(cls, center: Point, size: Size) -> Self:
        """Create a Rect of the given size centered on a point."""
        return cls(
            x=center.x - size.width / 2,
            y=center.y - size.height / 2,
            width=size.width,
            height=size.height,
        )

    def offset_by(self, delta: Point) -> Rect:
        """Return a copy translated by delta."""
        return Rect(x=self.x + delta.x, y=self.y + delta.y, width=self.width, height=self.height)

    def contains_point(self, point: Point) -> bool:
        """Check if a point is inside this rectangle (edges inclusive).

        Args:
            point: Point to check.

        Returns:
            True if the point lies within the rectangle.
        """
        return self.x <= point.x <= self.right and self.y <= point.y <= self.bottom
