"""Scene graph for shapeplay.

Key Components:
    - Canvas: Root container, viewport handling and touch routing
    - Drawable: Abstract base for anything placed on a canvas
    - Shape, Circle, Rectangle: Concrete filled/bordered drawables
    - TouchEvent, TouchPhase: Raw pointer events from the host
    - TouchInteractionController: Per-entity touch state machine

Example:
    from shapeplay.geometry import Point, Rect
    from shapeplay.rendering import RecordingBackend
    from shapeplay.scene import Canvas, Circle

    canvas = Canvas(RecordingBackend(), viewport=Rect(width=300, height=300))
    circle = Circle(canvas, radius=5.0)
    circle.draggable = True
    circle.center = Point(x=1, y=0)
"""

from shapeplay.scene.canvas import Canvas
from shapeplay.scene.drawable import Drawable, DrawableTouchController
from shapeplay.scene.shapes import Circle, Rectangle, Shape
from shapeplay.scene.touch import (
    TouchEvent,
    TouchInteractionController,
    TouchPhase,
    TouchState,
    Touchable,
)

__all__ = [
    "Canvas",
    "Circle",
    "Drawable",
    "DrawableTouchController",
    "Rectangle",
    "Shape",
    "TouchEvent",
    "TouchInteractionController",
    "TouchPhase",
    "TouchState",
    "Touchable",
]
