"""Abstract drawable base class.

A Drawable owns one visual on the canvas's rendering backend. Its
position is stored as a screen-space anchor (the center of the visual)
and exposed in model space through the canvas's CoordinateSpace, so a
viewport resize only has to shift anchors to keep model positions fixed.

Every property setter validates its argument, stores it, and pushes the
derived state to the backend before returning.
"""

from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from shapeplay.exceptions import DetachedDrawableError
from shapeplay.geometry.affine import AffineTransform
from shapeplay.geometry.primitives import Point, Rect, Size
from shapeplay.geometry.validators import require_finite, require_non_negative
from shapeplay.rendering.protocol import VisualHandle
from shapeplay.scene.touch import TouchEvent, TouchInteractionController, Touchable
from shapeplay.style import Color, Shadow

if TYPE_CHECKING:
    from shapeplay.scene.canvas import Canvas

logger = logging.getLogger(__name__)


class DrawableTouchController(TouchInteractionController):
    """Touch controller that drags its drawable.

    On touch-down a draggable drawable is brought to the front and given
    a small scale/rotation pulse; while the touch moves, the drawable's
    center follows it at the offset captured on touch-down; on touch-up
    or cancel the pulse is reverted.
    """

    def __init__(self, drawable: Drawable) -> None:
        super().__init__(name=f"{type(drawable).__name__}({drawable.id})")
        self._drawable = drawable
        self._feedback_applied = False

    def wants_touch(self, event: TouchEvent) -> bool:
        return self._drawable.draggable or self.has_handlers

    def _touch_began(self, event: TouchEvent) -> None:
        drawable = self._drawable
        if drawable.draggable:
            drawable.canvas.bring_to_front(drawable)
            drawable._apply_touch_feedback()
            self._feedback_applied = True

        touch_point = drawable.canvas.coordinates.to_model(event.location)
        drawable._drag_offset = touch_point - drawable.center

    def _touch_moved(self, event: TouchEvent) -> None:
        drawable = self._drawable
        if drawable.draggable and drawable._drag_offset is not None:
            touch_point = drawable.canvas.coordinates.to_model(event.location)
            drawable.center = touch_point - drawable._drag_offset

    def _touch_ended(self, event: TouchEvent) -> None:
        self._finish_touch()

    def _touch_cancelled(self, event: TouchEvent) -> None:
        self._finish_touch()

    def _finish_touch(self) -> None:
        # Revert only what touch-down applied, even if draggable changed since.
        if self._feedback_applied:
            self._feedback_applied = False
            self._drawable._revert_touch_feedback()
        self._drawable._drag_offset = None

    def reset(self) -> None:
        super().reset()
        self._feedback_applied = False


class Drawable(Touchable, ABC):
    """An object placed on a canvas.

    Concrete subclasses pass their initial model size to ``__init__``,
    which creates the backing visual and registers the drawable with the
    canvas. New drawables are centered on the model origin.

    Attributes:
        id: Unique identifier, used in logs.
        touch_controller: State machine for touches on this drawable.
    """

    def __init__(self, canvas: Canvas, model_size: Size) -> None:
        self.id = str(uuid.uuid4())
        self._canvas = canvas
        self._scale = 1.0
        self._rotation = 0.0
        self._shadow: Shadow | None = None
        self._draggable = False
        self._drag_offset: Point | None = None
        self._detached = False
        self._screen_center = Point()

        self._handle: VisualHandle = canvas.backend.create_visual(
            canvas.coordinates.size_to_screen(model_size)
        )
        self.touch_controller: TouchInteractionController = DrawableTouchController(self)

        self._update_size_from_model_size(model_size)
        canvas.add(self)

    # Identity and ownership

    @property
    def canvas(self) -> Canvas:
        return self._canvas

    @property
    def handle(self) -> VisualHandle:
        """Backend handle of the visual representing this drawable."""
        return self._handle

    @property
    def is_attached(self) -> bool:
        return not self._detached and self in self._canvas

    # Geometry

    @property
    def center(self) -> Point:
        """The center point of the object in model space. Setting it moves the object."""
        return self._canvas.coordinates.to_model(self._screen_center)

    @center.setter
    def center(self, value: Point) -> None:
        self._require_attached()
        self._move_screen_center(self._canvas.coordinates.to_screen(value))

    @property
    def model_size(self) -> Size:
        return self._model_size

    @property
    def screen_center(self) -> Point:
        return self._screen_center

    @property
    def frame(self) -> Rect:
        """Untransformed screen-space frame of the visual."""
        return Rect.from_center(self._screen_center, self._screen_size)

    @property
    def scale(self) -> float:
        """The amount to grow or shrink the object; 1.0 is the natural size."""
        return self._scale

    @scale.setter
    def scale(self, value: float) -> None:
        self._require_attached()
        self._scale = require_non_negative("scale", value)
        self._update_display_for_transforms()

    @property
    def rotation(self) -> float:
        """Counter-clockwise rotation about the center, in radians."""
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._require_attached()
        self._rotation = require_finite("rotation", value)
        self._update_display_for_transforms()

    @property
    def shadow(self) -> Shadow | None:
        """The drop shadow for this object, or None for no shadow."""
        return self._shadow

    @shadow.setter
    def shadow(self, value: Shadow | None) -> None:
        self._require_attached()
        self._shadow = value
        self._apply_shadow()

    @property
    def draggable(self) -> bool:
        """Whether the object can be dragged around the canvas."""
        return self._draggable

    @draggable.setter
    def draggable(self, value: bool) -> None:
        self._require_attached()
        self._draggable = bool(value)

    @property
    def drag_offset(self) -> Point | None:
        """Offset from the active touch to the center, or None between touches."""
        return self._drag_offset

    def display_transform(self) -> AffineTransform:
        """The screen-space transform for the current scale and rotation.

        Scale is applied before rotation. The angle is negated because
        screen y points down, so positive rotation reads counter-clockwise.
        """
        return (
            AffineTransform.identity()
            .concat(AffineTransform.scaling(self._scale))
            .concat(AffineTransform.rotation(-self._rotation))
        )

    def hit_test(self, screen_point: Point) -> bool:
        """Whether a screen point falls on this drawable (scaled frame)."""
        scaled = Size(
            width=self._screen_size.width * self._scale,
            height=self._screen_size.height * self._scale,
        )
        return Rect.from_center(self._screen_center, scaled).contains_point(screen_point)

    @abstractmethod
    def quick_look(self) -> str:
        """Short human-readable description."""

    # Subclass hooks

    def on_size_changed(self) -> None:
        """Called after the visual has been resized; the transform is cleared."""

    # Internal

    def _require_attached(self) -> None:
        if self._detached:
            raise DetachedDrawableError(
                "Drawable has been removed from its canvas", drawable_id=self.id
            )

    def _move_screen_center(self, screen_point: Point) -> None:
        self._screen_center = screen_point
        self._canvas.backend.set_visual_frame(self._handle, self.frame)

    def _shift_screen_center(self, delta: Point) -> None:
        self._move_screen_center(self._screen_center + delta)

    def _update_display_for_transforms(self) -> None:
        self._canvas.backend.set_visual_transform(self._handle, self.display_transform())

    def _update_size_from_model_size(self, model_size: Size) -> None:
        backend = self._canvas.backend
        self._model_size = model_size
        self._screen_size = self._canvas.coordinates.size_to_screen(model_size)

        # Resize untransformed, keeping the screen center where it is.
        backend.set_visual_transform(self._handle, AffineTransform.identity())
        backend.set_visual_frame(self._handle, self.frame)
        self.on_size_changed()
        self._update_display_for_transforms()

    def _apply_shadow(self) -> None:
        backend = self._canvas.backend
        shadow = self._shadow
        if shadow is None:
            backend.set_shadow(self._handle, Point(), 0.0, 0.0, Color.black())
            return

        coordinates = self._canvas.coordinates
        offset = Point(
            x=coordinates.magnitude_to_screen(shadow.offset.x),
            y=-coordinates.magnitude_to_screen(shadow.offset.y),
        )
        backend.set_shadow(
            self._handle,
            offset,
            coordinates.magnitude_to_screen(shadow.blur_radius),
            shadow.opacity,
            shadow.color,
        )

    def _apply_touch_feedback(self) -> None:
        settings = self._canvas.settings

        def grow() -> None:
            self.scale = settings.TOUCH_FEEDBACK_SCALE
            self.rotation = self.rotation + settings.TOUCH_FEEDBACK_ROTATION

        self._canvas.animate(grow)

    def _revert_touch_feedback(self) -> None:
        settings = self._canvas.settings

        def settle() -> None:
            self.scale = 1.0
            self.rotation = self.rotation - settings.TOUCH_FEEDBACK_ROTATION

        self._canvas.animate(settle)

    def _detach(self) -> None:
        """Remove the visual from the backend; called by the canvas."""
        self._canvas.backend.remove_visual(self._handle)
        self.touch_controller.reset()
        self._drag_offset = None
        self._detached = True
