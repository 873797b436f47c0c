"""Custom exceptions for canvas operations.

These exceptions carry the offending argument or drawable so callers
(and log output) can see what was rejected, not just that something was.
"""

from __future__ import annotations

from typing import Any


class CanvasError(Exception):
    """Base exception for all canvas-related errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return self.message


class InvalidArgumentError(CanvasError, ValueError):
    """Raised when a setter or constructor receives an invalid value.

    This error is raised when:
    - A radius, size, border width or scale is negative
    - A coordinate, angle or magnitude is NaN or infinite
    - The coordinate space is given a non-positive points-per-unit factor

    Attributes:
        name: Name of the rejected argument or property.
        value: The rejected value.
    """

    def __init__(self, message: str, *, name: str, value: Any) -> None:
        self.name = name
        self.value = value
        super().__init__(message)

    def _format_message(self) -> str:
        return f"{self.message} ({self.name}={self.value!r})"


class DrawableNotFoundError(CanvasError, LookupError):
    """Raised when removing a drawable that is not on the canvas."""

    def __init__(self, message: str, *, drawable_id: str) -> None:
        self.drawable_id = drawable_id
        super().__init__(message)

    def _format_message(self) -> str:
        return f"{self.message} (drawable_id={self.drawable_id})"


class DetachedDrawableError(CanvasError):
    """Raised when a drawable is mutated after removal from its canvas."""

    def __init__(self, message: str, *, drawable_id: str) -> None:
        self.drawable_id = drawable_id
        super().__init__(message)

    def _format_message(self) -> str:
        return f"{self.message} (drawable_id={self.drawable_id})"
