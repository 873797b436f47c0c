"""The canvas: root container of the scene.

The canvas owns the ordered list of drawables (back to front), the
CoordinateSpace whose origin it keeps at the visual center of the
viewport, and the routing of raw touch batches to drawables or to its
own canvas-level handlers.

One canvas per process is the usage convention; it is not enforced.
Every drawable receives its canvas explicitly at construction.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable
from typing import TypeAlias

from shapeplay.config import Settings, settings as default_settings
from shapeplay.exceptions import DrawableNotFoundError, InvalidArgumentError
from shapeplay.geometry.coordinates import CoordinateSpace
from shapeplay.geometry.primitives import Point, Rect, Size
from shapeplay.rendering.protocol import AnimationTiming, Animator, RenderBackend
from shapeplay.rendering.recording import ImmediateAnimator
from shapeplay.scene.drawable import Drawable
from shapeplay.scene.touch import (
    TouchEvent,
    TouchInteractionController,
    TouchPhase,
    Touchable,
)
from shapeplay.style import Color
from shapeplay.utils.logging import touch_context

logger = logging.getLogger(__name__)

ResizeObserver = Callable[[Rect], None]
TouchOwner: TypeAlias = "Drawable | Canvas"


class Canvas(Touchable):
    """The surface that all drawables are added to.

    The model origin (0, 0) sits at the visual center of the viewport and
    stays there across resizes; drawables keep their model positions.

    Usage:
        canvas = Canvas(RecordingBackend(), viewport=Rect(width=300, height=300))
        circle = Circle(canvas, radius=5.0)      # added at (0, 0)
        canvas.dispatch_touches([TouchEvent(touch_id=1, phase=TouchPhase.BEGAN,
                                            location=Point(x=150, y=150))])

    Attributes:
        id: Unique identifier, used in logs.
        backend: Rendering backend receiving all visual updates.
        animator: Animation engine used by ``animate``.
        settings: Configuration (scale factor, animation and feedback values).
        coordinates: Model <-> screen conversion for this canvas.
        touch_controller: Canvas-level touch state machine.
    """

    def __init__(
        self,
        backend: RenderBackend,
        animator: Animator | None = None,
        *,
        settings: Settings | None = None,
        viewport: Rect | None = None,
    ) -> None:
        self.id = str(uuid.uuid4())
        self.backend = backend
        self.animator: Animator = animator or ImmediateAnimator()
        self.settings = settings or default_settings
        self.coordinates = CoordinateSpace(points_per_unit=self.settings.POINTS_PER_UNIT)
        self.touch_controller = TouchInteractionController(name="canvas")

        self._drawables: list[Drawable] = []
        self._viewport = Rect()
        self._shows_grid = False
        self._color = Color.clear()
        self._resize_observers: list[ResizeObserver] = []
        self._touch_owners: dict[int, TouchOwner] = {}
        self._touch_locations: dict[int, Point] = {}

        self.backend.set_background_color(self._color)
        self._push_grid()
        if viewport is not None:
            self.on_viewport_resize(viewport)

    def __contains__(self, drawable: object) -> bool:
        return any(existing is drawable for existing in self._drawables)

    def __len__(self) -> int:
        return len(self._drawables)

    # Scene contents

    @property
    def drawables(self) -> tuple[Drawable, ...]:
        """Drawables back to front; the last one is topmost."""
        return tuple(self._drawables)

    def add(self, drawable: Drawable) -> None:
        """Add a drawable in front of all others, centered on the model origin.

        Drawables call this from their constructor. Adding a drawable that
        is already present does nothing.

        Raises:
            InvalidArgumentError: If the drawable belongs to another canvas
                or has already been removed.
        """
        if drawable.canvas is not self:
            raise InvalidArgumentError(
                "Drawable belongs to a different canvas", name="drawable", value=drawable.id
            )
        if drawable._detached:
            raise InvalidArgumentError(
                "Removed drawables cannot be added again", name="drawable", value=drawable.id
            )
        if drawable in self:
            return

        self._drawables.append(drawable)
        self.backend.attach_visual(drawable.handle)
        drawable._move_screen_center(self.coordinates.center_offset)
        logger.debug("Added %s (%d drawables)", type(drawable).__name__, len(self._drawables))

    def remove(self, drawable: Drawable) -> None:
        """Detach a drawable's visual and remove it from the scene.

        Any touch stream the drawable owns is dropped without firing its
        handlers. The drawable cannot be modified afterwards.

        Raises:
            DrawableNotFoundError: If the drawable is not on this canvas.
        """
        if drawable not in self:
            raise DrawableNotFoundError("Drawable is not on this canvas", drawable_id=drawable.id)

        self._drawables.remove(drawable)
        self._drop_touches_owned_by(drawable)
        drawable._detach()
        logger.info("Removed %s (%d drawables)", type(drawable).__name__, len(self._drawables))

    def clear(self) -> None:
        """Remove every drawable. Calling it on an empty canvas is a no-op."""
        if not self._drawables:
            return
        drawables, self._drawables = self._drawables, []
        for drawable in drawables:
            self._drop_touches_owned_by(drawable)
            drawable._detach()
        logger.info("Cleared %d drawables", len(drawables))

    def bring_to_front(self, drawable: Drawable) -> None:
        """Move a drawable to the end of the paint/hit-test order.

        Raises:
            DrawableNotFoundError: If the drawable is not on this canvas.
        """
        if drawable not in self:
            raise DrawableNotFoundError("Drawable is not on this canvas", drawable_id=drawable.id)
        self._drawables.remove(drawable)
        self._drawables.append(drawable)
        self.backend.bring_to_front(drawable.handle)

    # Viewport

    @property
    def viewport(self) -> Rect:
        """Current viewport bounds in screen points."""
        return self._viewport

    @property
    def visible_size(self) -> Size:
        """The visible width and height of the canvas in model units."""
        return self.coordinates.size_to_model(self._viewport.size)

    def on_viewport_resize(self, bounds: Rect) -> bool:
        """Re-center the model origin for new viewport bounds.

        Every drawable is shifted in screen space by the change in origin
        so its model-space center is unchanged.

        Args:
            bounds: New viewport bounds in screen points.

        Returns:
            True if the bounds changed, False if the call was a no-op.
        """
        if bounds == self._viewport:
            return False

        self._viewport = bounds
        delta = self.coordinates.recenter(bounds.center)
        if delta != Point():
            for drawable in self._drawables:
                drawable._shift_screen_center(delta)
        self._push_grid()

        logger.info(
            "Viewport resized to %.1fx%.1f, model origin at screen (%.1f, %.1f)",
            bounds.width,
            bounds.height,
            self.coordinates.center_offset.x,
            self.coordinates.center_offset.y,
        )
        for observer in list(self._resize_observers):
            observer(bounds)
        return True

    def add_resize_observer(self, observer: ResizeObserver) -> ResizeObserver:
        """Call observer with the new bounds after every effective resize."""
        self._resize_observers.append(observer)
        return observer

    def remove_resize_observer(self, observer: ResizeObserver) -> None:
        """Stop notifying observer. Unknown observers are ignored."""
        if observer in self._resize_observers:
            self._resize_observers.remove(observer)

    # Appearance

    @property
    def shows_grid(self) -> bool:
        """Whether a grid is drawn underneath the drawables. The default is False."""
        return self._shows_grid

    @shows_grid.setter
    def shows_grid(self, value: bool) -> None:
        self._shows_grid = bool(value)
        self._push_grid()

    @property
    def color(self) -> Color:
        """The color to fill the canvas with. The default is clear."""
        return self._color

    @color.setter
    def color(self, value: Color) -> None:
        self._color = value
        self.backend.set_background_color(value)

    def animate(
        self,
        mutation: Callable[[], None],
        duration: float | None = None,
        delay: float | None = None,
    ) -> None:
        """Animate the changes made by mutation.

        The mutation runs before this returns; only the on-screen
        transition is deferred to the animator.

        Args:
            mutation: Callable that changes drawable properties.
            duration: Length in seconds (settings.ANIMATION_DURATION if None).
            delay: Seconds before the start (settings.ANIMATION_DELAY if None).
        """
        timing = AnimationTiming(
            duration=self.settings.ANIMATION_DURATION if duration is None else duration,
            delay=self.settings.ANIMATION_DELAY if delay is None else delay,
            spring_damping=self.settings.ANIMATION_SPRING_DAMPING,
            initial_velocity=self.settings.ANIMATION_SPRING_VELOCITY,
        )
        self.animator.animate(timing, mutation)

    # Touches

    @property
    def current_touch_points(self) -> list[Point]:
        """Model-space points where touches are currently occurring."""
        return [self.coordinates.to_model(location) for location in self._touch_locations.values()]

    def dispatch_touches(self, events: Iterable[TouchEvent]) -> None:
        """Route a batch of raw touch events.

        A new touch goes to the topmost drawable that wants it and lies
        under it; failing that, to the canvas-level handlers if any are
        registered; failing that, it is dropped. Later events of the same
        touch go wherever its first event went.
        """
        for event in events:
            owner = self._owner_for(event)
            drawable_id = owner.id if isinstance(owner, Drawable) else None
            with touch_context(self.id, event.touch_id, drawable_id):
                self._deliver(event, owner)

    def _owner_for(self, event: TouchEvent) -> TouchOwner | None:
        if event.phase != TouchPhase.BEGAN:
            return self._touch_owners.get(event.touch_id)
        for drawable in reversed(self._drawables):
            if drawable.touch_controller.wants_touch(event) and drawable.hit_test(event.location):
                return drawable
        if self.touch_controller.wants_touch(event):
            return self
        return None

    def _deliver(self, event: TouchEvent, owner: TouchOwner | None) -> None:
        touch_id = event.touch_id
        if event.phase == TouchPhase.BEGAN:
            self._touch_locations[touch_id] = event.location
            if owner is None:
                logger.debug("Dropping touch %d: nothing wants it", touch_id)
                return
            # Owned before handlers run, so a raising handler or a removal
            # inside one leaves the stream routable.
            self._touch_owners[touch_id] = owner
            if not owner.touch_controller.handle(event):
                if self._touch_owners.get(touch_id) is owner:
                    del self._touch_owners[touch_id]
        elif event.phase == TouchPhase.MOVED:
            if touch_id in self._touch_locations:
                self._touch_locations[touch_id] = event.location
            if owner is not None:
                owner.touch_controller.handle(event)
        else:
            self._touch_locations.pop(touch_id, None)
            self._touch_owners.pop(touch_id, None)
            if owner is not None:
                owner.touch_controller.handle(event)

    def _drop_touches_owned_by(self, drawable: Drawable) -> None:
        for touch_id, owner in list(self._touch_owners.items()):
            if owner is drawable:
                del self._touch_owners[touch_id]

    def _push_grid(self) -> None:
        self.backend.set_grid(
            self._shows_grid, self.coordinates.points_per_unit, self.coordinates.center_offset
        )
