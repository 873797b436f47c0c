"""Rendering and animation backend protocols for shapeplay.

The canvas core never paints anything itself. It drives two external
collaborators through the protocols defined here:

- RenderBackend: owns one visual per drawable, plus the canvas
  background and grid. All geometry handed to it is in screen space.
- Animator: applies a mutation immediately and interpolates the visual
  result over an AnimationTiming.

Backends are assumed not to fail; anything they raise propagates to the
caller unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import NewType, Protocol

from pydantic import BaseModel, Field

from shapeplay.geometry.affine import AffineTransform
from shapeplay.geometry.primitives import Point, Rect, Size
from shapeplay.style import Color

VisualHandle = NewType("VisualHandle", int)


class AnimationTiming(BaseModel, frozen=True):
    """Timing parameters for an animated change.

    Defaults mirror a short, slightly springy transition.
    """

    duration: float = Field(default=0.35, ge=0.0, description="Seconds")
    delay: float = Field(default=0.0, ge=0.0, description="Seconds before start")
    spring_damping: float = Field(default=0.5, gt=0.0, le=1.0)
    initial_velocity: float = 0.5


@dataclass(frozen=True)
class ScreenShadow:
    """A shadow already converted to screen units.

    Attributes:
        offset: Screen-space offset (y grows downward).
        blur_radius: Blur in screen points.
        opacity: 0.0 hides the shadow.
        color: Shadow color.
    """

    offset: Point
    blur_radius: float
    opacity: float
    color: Color


class RenderBackend(Protocol):
    """Protocol for the rendering surface behind a canvas.

    This protocol allows the scene graph to run against a real toolkit or
    an in-memory recorder interchangeably.
    """

    def create_visual(self, screen_size: Size) -> VisualHandle:
        """Create a detached visual of the given screen size."""
        ...

    def attach_visual(self, handle: VisualHandle) -> None:
        """Add a visual to the surface, in front of all others."""
        ...

    def set_visual_frame(self, handle: VisualHandle, frame: Rect) -> None:
        """Position and size a visual (untransformed frame)."""
        ...

    def set_visual_transform(self, handle: VisualHandle, transform: AffineTransform) -> None:
        """Set the transform applied about the visual's center."""
        ...

    def set_shadow(
        self,
        handle: VisualHandle,
        offset: Point,
        blur_radius: float,
        opacity: float,
        color: Color,
    ) -> None:
        """Configure the drop shadow. Opacity 0.0 removes it."""
        ...

    def set_corner_radius(self, handle: VisualHandle, radius: float) -> None:
        """Round the visual's corners (screen points)."""
        ...

    def set_fill(
        self,
        handle: VisualHandle,
        color: Color,
        border_width: float,
        border_color: Color,
    ) -> None:
        """Set fill color and border of a visual."""
        ...

    def bring_to_front(self, handle: VisualHandle) -> None:
        """Move a visual in front of all its siblings."""
        ...

    def remove_visual(self, handle: VisualHandle) -> None:
        """Detach and discard a visual."""
        ...

    def set_background_color(self, color: Color) -> None:
        """Fill the canvas background."""
        ...

    def set_grid(self, visible: bool, stride: float, center: Point) -> None:
        """Show or hide the background grid.

        Args:
            visible: Whether the grid is drawn.
            stride: Distance between grid lines in screen points.
            center: Screen location of the model origin.
        """
        ...


class Animator(Protocol):
    """Protocol for the animation engine.

    ``mutation`` must be run synchronously before ``animate`` returns, so
    model state is committed immediately; only the on-screen
    interpolation happens later.
    """

    def animate(self, timing: AnimationTiming, mutation: Callable[[], None]) -> None:
        """Apply mutation and animate the visual changes it causes."""
        ...
