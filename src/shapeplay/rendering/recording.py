"""In-memory rendering and animation backends.

RecordingBackend keeps the last state pushed for every visual and the
paint order, which is enough to run a canvas headlessly (CLI demo,
tests, or a host that polls state instead of receiving pushes).
ImmediateAnimator runs mutations synchronously and records the timing
each one asked for.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from shapeplay.geometry.affine import AffineTransform
from shapeplay.geometry.primitives import Point, Rect, Size
from shapeplay.rendering.protocol import AnimationTiming, ScreenShadow, VisualHandle
from shapeplay.style import Color

logger = logging.getLogger(__name__)


@dataclass
class VisualState:
    """Last known state of one visual."""

    handle: VisualHandle
    frame: Rect
    transform: AffineTransform = field(default_factory=AffineTransform.identity)
    shadow: ScreenShadow | None = None
    corner_radius: float = 0.0
    fill: Color = field(default_factory=Color.black)
    border_width: float = 0.0
    border_color: Color = field(default_factory=Color.black)
    attached: bool = False


@dataclass
class RecordingBackend:
    """RenderBackend that stores pushed state instead of drawing it.

    Attributes:
        visuals: State per live visual, keyed by handle.
        z_order: Attached visuals, back to front.
        calls: Names of backend methods in call order.
        background: Last background color set.
        grid_visible: Whether the grid is shown.
        grid_stride: Grid spacing in screen points.
        grid_center: Screen location of the grid origin.
    """

    visuals: dict[VisualHandle, VisualState] = field(default_factory=dict)
    z_order: list[VisualHandle] = field(default_factory=list)
    calls: list[str] = field(default_factory=list)
    background: Color = field(default_factory=Color.clear)
    grid_visible: bool = False
    grid_stride: float = 0.0
    grid_center: Point = field(default_factory=Point)
    _next_handle: int = field(default=1, init=False, repr=False)

    def create_visual(self, screen_size: Size) -> VisualHandle:
        self.calls.append("create_visual")
        handle = VisualHandle(self._next_handle)
        self._next_handle += 1
        self.visuals[handle] = VisualState(
            handle=handle,
            frame=Rect(width=screen_size.width, height=screen_size.height),
        )
        return handle

    def attach_visual(self, handle: VisualHandle) -> None:
        self.calls.append("attach_visual")
        state = self._state(handle)
        if not state.attached:
            state.attached = True
            self.z_order.append(handle)

    def set_visual_frame(self, handle: VisualHandle, frame: Rect) -> None:
        self.calls.append("set_visual_frame")
        self._state(handle).frame = frame

    def set_visual_transform(self, handle: VisualHandle, transform: AffineTransform) -> None:
        self.calls.append("set_visual_transform")
        self._state(handle).transform = transform

    def set_shadow(
        self,
        handle: VisualHandle,
        offset: Point,
        blur_radius: float,
        opacity: float,
        color: Color,
    ) -> None:
        self.calls.append("set_shadow")
        self._state(handle).shadow = ScreenShadow(
            offset=offset, blur_radius=blur_radius, opacity=opacity, color=color
        )

    def set_corner_radius(self, handle: VisualHandle, radius: float) -> None:
        self.calls.append("set_corner_radius")
        self._state(handle).corner_radius = radius

    def set_fill(
        self,
        handle: VisualHandle,
        color: Color,
        border_width: float,
        border_color: Color,
    ) -> None:
        self.calls.append("set_fill")
        state = self._state(handle)
        state.fill = color
        state.border_width = border_width
        state.border_color = border_color

    def bring_to_front(self, handle: VisualHandle) -> None:
        self.calls.append("bring_to_front")
        if handle in self.z_order:
            self.z_order.remove(handle)
            self.z_order.append(handle)

    def remove_visual(self, handle: VisualHandle) -> None:
        self.calls.append("remove_visual")
        self._state(handle)
        del self.visuals[handle]
        if handle in self.z_order:
            self.z_order.remove(handle)

    def set_background_color(self, color: Color) -> None:
        self.calls.append("set_background_color")
        self.background = color

    def set_grid(self, visible: bool, stride: float, center: Point) -> None:
        self.calls.append("set_grid")
        self.grid_visible = visible
        self.grid_stride = stride
        self.grid_center = center

    def state_of(self, handle: VisualHandle) -> VisualState:
        """Return the recorded state of a live visual.

        Raises:
            KeyError: If the handle was never created or has been removed.
        """
        return self._state(handle)

    def _state(self, handle: VisualHandle) -> VisualState:
        try:
            return self.visuals[handle]
        except KeyError:
            raise KeyError(f"Unknown visual handle {handle}") from None


@dataclass(frozen=True)
class AnimationRecord:
    """One call to ImmediateAnimator.animate."""

    timing: AnimationTiming


@dataclass
class ImmediateAnimator:
    """Animator that applies every mutation at once.

    There is nothing to interpolate without a display, so the mutation is
    the whole animation. The requested timing is kept in ``history``.
    """

    history: list[AnimationRecord] = field(default_factory=list)

    def animate(self, timing: AnimationTiming, mutation: Callable[[], None]) -> None:
        logger.debug(
            "Applying animated change immediately (duration=%.2fs, delay=%.2fs)",
            timing.duration,
            timing.delay,
        )
        self.history.append(AnimationRecord(timing=timing))
        mutation()
