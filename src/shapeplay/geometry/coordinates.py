"""Model <-> screen coordinate conversion.

Model space is resolution independent: the origin sits at the visual
center of the canvas, y increases upward, and one unit spans
``points_per_unit`` screen points. Screen space is the backend's space:
origin at the top-left of the viewport, y increases downward.

Transform Direction Conventions:
    - to_screen: scale by points_per_unit, flip y, add center_offset
    - to_model: subtract center_offset, flip y, divide by points_per_unit
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shapeplay.geometry.primitives import Point, Size
from shapeplay.geometry.validators import require_finite, require_positive


@dataclass
class CoordinateSpace:
    """Conversion between model space and screen space.

    ``points_per_unit`` is fixed for the lifetime of the space.
    ``center_offset`` is the screen location of the model origin and is
    replaced through ``recenter`` whenever the viewport changes.

    Usage:
        space = CoordinateSpace(points_per_unit=10.0)
        space.recenter(Point(x=150, y=150))
        space.to_screen(Point(x=1, y=1))  # Point(x=160.0, y=140.0)
    """

    points_per_unit: float = 10.0
    center_offset: Point = field(default_factory=Point)

    def __post_init__(self) -> None:
        self.points_per_unit = require_positive("points_per_unit", self.points_per_unit)

    def to_screen(self, model_point: Point) -> Point:
        """Convert a model-space point to screen space."""
        return Point(
            x=model_point.x * self.points_per_unit + self.center_offset.x,
            # screen y grows downward
            y=self.center_offset.y - model_point.y * self.points_per_unit,
        )

    def to_model(self, screen_point: Point) -> Point:
        """Convert a screen-space point to model space."""
        return Point(
            x=(screen_point.x - self.center_offset.x) / self.points_per_unit,
            y=(self.center_offset.y - screen_point.y) / self.points_per_unit,
        )

    def magnitude_to_screen(self, model_magnitude: float) -> float:
        return require_finite("model_magnitude", model_magnitude) * self.points_per_unit

    def magnitude_to_model(self, screen_magnitude: float) -> float:
        return require_finite("screen_magnitude", screen_magnitude) / self.points_per_unit

    def size_to_screen(self, model_size: Size) -> Size:
        return Size(
            width=self.magnitude_to_screen(model_size.width),
            height=self.magnitude_to_screen(model_size.height),
        )

    def size_to_model(self, screen_size: Size) -> Size:
        return Size(
            width=self.magnitude_to_model(screen_size.width),
            height=self.magnitude_to_model(screen_size.height),
        )

    def recenter(self, new_center_offset: Point) -> Point:
        """Move the model origin to a new screen location.

        Anything anchored in screen space must be shifted by the returned
        delta to keep its model-space position.

        Args:
            new_center_offset: Screen location of the new model origin.

        Returns:
            The screen-space delta (new offset minus old offset).
        """
        delta = new_center_offset - self.center_offset
        self.center_offset = new_center_offset
        return delta
