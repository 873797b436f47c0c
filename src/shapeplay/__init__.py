"""shapeplay: a retained-mode 2D canvas with draggable shapes.

Shapes live in a resolution-independent model space (origin at the
canvas center, y up) and are rendered through a pluggable backend.
"""

from shapeplay.exceptions import (
    CanvasError,
    DetachedDrawableError,
    DrawableNotFoundError,
    InvalidArgumentError,
)
from shapeplay.geometry import AffineTransform, CoordinateSpace, Point, Rect, Size
from shapeplay.scene import Canvas, Circle, Drawable, Rectangle, Shape, TouchEvent, TouchPhase
from shapeplay.style import Color, Shadow

__version__ = "0.1.0"

__all__ = [
    "AffineTransform",
    "Canvas",
    "CanvasError",
    "Circle",
    "Color",
    "CoordinateSpace",
    "DetachedDrawableError",
    "Drawable",
    "DrawableNotFoundError",
    "InvalidArgumentError",
    "Point",
    "Rect",
    "Rectangle",
    "Shadow",
    "Shape",
    "Size",
    "TouchEvent",
    "TouchPhase",
    "__version__",
]
