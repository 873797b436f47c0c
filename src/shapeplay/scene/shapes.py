"""Concrete shapes: filled, bordered drawables.

    canvas = Canvas(RecordingBackend())
    circle = Circle(canvas, radius=3.0)
    circle.color = Color.from_hex("#0A84FF")
    circle.center = Point(x=-5, y=2)
    circle.draggable = True
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from shapeplay.geometry.primitives import Point, Size
from shapeplay.geometry.validators import require_non_negative
from shapeplay.scene.drawable import Drawable
from shapeplay.style import Color

if TYPE_CHECKING:
    from shapeplay.scene.canvas import Canvas

DEFAULT_BORDER_WIDTH = 2.0  # screen points
DEFAULT_RECTANGLE_SIZE = 10.0


class Shape(Drawable):
    """A drawable with a fill color and a border.

    Attributes:
        color: The color to fill the shape with. The default is black.
        border_width: Border width in screen points. The default is 2.0.
        border_color: Border color. Until set, it follows the fill color.
    """

    def __init__(
        self,
        canvas: Canvas,
        model_size: Size,
        *,
        color: Color | None = None,
        border_width: float = DEFAULT_BORDER_WIDTH,
        border_color: Color | None = None,
    ) -> None:
        self._color = color or Color.black()
        self._border_width = require_non_negative("border_width", border_width)
        self._border_color = border_color
        super().__init__(canvas, model_size)
        self._apply_fill()

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, value: Color) -> None:
        self._require_attached()
        self._color = value
        self._apply_fill()

    @property
    def border_width(self) -> float:
        return self._border_width

    @border_width.setter
    def border_width(self, value: float) -> None:
        self._require_attached()
        self._border_width = require_non_negative("border_width", value)
        self._apply_fill()

    @property
    def border_color(self) -> Color:
        return self._border_color if self._border_color is not None else self._color

    @border_color.setter
    def border_color(self, value: Color | None) -> None:
        self._require_attached()
        self._border_color = value
        self._apply_fill()

    def _apply_fill(self) -> None:
        self.canvas.backend.set_fill(
            self.handle, self._color, self._border_width, self.border_color
        )


class Circle(Shape):
    """A circle on the canvas.

    Attributes:
        radius: Distance from the center to the outside edge. Must be 0.0
            or larger; defaults to settings.DEFAULT_CIRCLE_RADIUS (5.0).
    """

    def __init__(
        self,
        canvas: Canvas,
        radius: float | None = None,
        *,
        color: Color | None = None,
        border_width: float = DEFAULT_BORDER_WIDTH,
        border_color: Color | None = None,
    ) -> None:
        if radius is None:
            radius = canvas.settings.DEFAULT_CIRCLE_RADIUS
        self._radius = require_non_negative("radius", radius)
        super().__init__(
            canvas,
            _diameter_size(self._radius),
            color=color,
            border_width=border_width,
            border_color=border_color,
        )

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        self._require_attached()
        self._radius = require_non_negative("radius", value)
        self._update_size_from_model_size(_diameter_size(self._radius))

    def on_size_changed(self) -> None:
        # A corner radius of half the width draws the round silhouette.
        self.canvas.backend.set_corner_radius(self.handle, self.frame.width / 2.0)

    def hit_test(self, screen_point: Point) -> bool:
        reach = self.frame.width / 2.0 * self.scale
        center = self.screen_center
        return math.hypot(screen_point.x - center.x, screen_point.y - center.y) <= reach

    def quick_look(self) -> str:
        return f"Radius = {self._radius}"


class Rectangle(Shape):
    """A rectangle on the canvas.

    Attributes:
        width: Horizontal extent in model units (>= 0).
        height: Vertical extent in model units (>= 0).
        corner_radius: Rounding of the corners in model units (>= 0).
    """

    def __init__(
        self,
        canvas: Canvas,
        width: float = DEFAULT_RECTANGLE_SIZE,
        height: float = DEFAULT_RECTANGLE_SIZE,
        *,
        corner_radius: float = 0.0,
        color: Color | None = None,
        border_width: float = DEFAULT_BORDER_WIDTH,
        border_color: Color | None = None,
    ) -> None:
        self._corner_radius = require_non_negative("corner_radius", corner_radius)
        size = Size(
            width=require_non_negative("width", width),
            height=require_non_negative("height", height),
        )
        super().__init__(
            canvas, size, color=color, border_width=border_width, border_color=border_color
        )

    @property
    def width(self) -> float:
        return self.model_size.width

    @width.setter
    def width(self, value: float) -> None:
        self._require_attached()
        width = require_non_negative("width", value)
        self._update_size_from_model_size(Size(width=width, height=self.model_size.height))

    @property
    def height(self) -> float:
        return self.model_size.height

    @height.setter
    def height(self, value: float) -> None:
        self._require_attached()
        height = require_non_negative("height", value)
        self._update_size_from_model_size(Size(width=self.model_size.width, height=height))

    @property
    def corner_radius(self) -> float:
        return self._corner_radius

    @corner_radius.setter
    def corner_radius(self, value: float) -> None:
        self._require_attached()
        self._corner_radius = require_non_negative("corner_radius", value)
        self.on_size_changed()

    def on_size_changed(self) -> None:
        screen_radius = self.canvas.coordinates.magnitude_to_screen(self._corner_radius)
        self.canvas.backend.set_corner_radius(self.handle, screen_radius)

    def quick_look(self) -> str:
        return f"Width = {self.width}, height = {self.height}"


def _diameter_size(radius: float) -> Size:
    diameter = radius * 2
    return Size(width=diameter, height=diameter)
