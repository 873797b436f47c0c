"""Touch events and the per-entity touch state machine.

Every touchable entity (each drawable and the canvas itself) embeds one
TouchInteractionController. The controller follows a single touch stream
at a time::

    IDLE --began--> ACTIVE --moved--> ACTIVE --ended/cancelled--> IDLE

Events for other touch ids, and a second touch-down while ACTIVE, are
ignored. After the controller's own bookkeeping hook runs, the user
handler registered for the event's phase (if any) is called.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import TypeVar

from pydantic import BaseModel, Field

from shapeplay.geometry.primitives import Point

logger = logging.getLogger(__name__)

TouchHandler = Callable[[], None]
H = TypeVar("H", bound=TouchHandler)


class TouchPhase(str, Enum):
    """Phase of a pointer event."""

    BEGAN = "began"
    MOVED = "moved"
    ENDED = "ended"
    CANCELLED = "cancelled"


class TouchEvent(BaseModel, frozen=True):
    """A single raw pointer event from the host.

    Attributes:
        touch_id: Host identifier, stable for the life of one touch.
        phase: Which part of the touch this event reports.
        location: Screen-space position of the touch.
    """

    touch_id: int = Field(..., ge=0)
    phase: TouchPhase
    location: Point


class TouchState(Enum):
    """Controller states."""

    IDLE = "idle"
    ACTIVE = "active"


class TouchInteractionController:
    """Tracks one touch stream and fires the matching user handlers.

    This base class never moves geometry; it is what the canvas uses.
    Drawables subclass it and override the ``_touch_*`` hooks.

    Usage:
        controller = TouchInteractionController(name="canvas")
        controller.set_handler(TouchPhase.BEGAN, lambda: print("down"))
        if controller.wants_touch(event):
            controller.handle(event)
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._handlers: dict[TouchPhase, TouchHandler] = {}
        self._state = TouchState.IDLE
        self._touch_id: int | None = None

    @property
    def state(self) -> TouchState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state == TouchState.ACTIVE

    @property
    def active_touch_id(self) -> int | None:
        return self._touch_id

    @property
    def has_handlers(self) -> bool:
        return bool(self._handlers)

    def set_handler(self, phase: TouchPhase, handler: H) -> H:
        """Register the handler for a phase, replacing any previous one.

        Returns:
            The handler, so registration methods can double as decorators.
        """
        if phase in self._handlers:
            logger.debug("Replacing %s handler on %s", phase.value, self.name)
        self._handlers[phase] = handler
        return handler

    def handler_for(self, phase: TouchPhase) -> TouchHandler | None:
        return self._handlers.get(phase)

    def wants_touch(self, event: TouchEvent) -> bool:
        """Whether this entity should receive the stream starting with event."""
        _ = event
        return self.has_handlers

    def handle(self, event: TouchEvent) -> bool:
        """Advance the state machine with one event.

        Args:
            event: The pointer event to process.

        Returns:
            True if the event belonged to this controller's stream and was
            processed, False if it was ignored.
        """
        if event.phase == TouchPhase.BEGAN:
            if self._state == TouchState.ACTIVE:
                logger.debug(
                    "%s already tracking touch %s; ignoring touch %d",
                    self.name,
                    self._touch_id,
                    event.touch_id,
                )
                return False
            self._state = TouchState.ACTIVE
            self._touch_id = event.touch_id
            self._touch_began(event)
        else:
            if self._state == TouchState.IDLE or event.touch_id != self._touch_id:
                return False
            if event.phase == TouchPhase.MOVED:
                self._touch_moved(event)
            else:
                self._state = TouchState.IDLE
                self._touch_id = None
                if event.phase == TouchPhase.ENDED:
                    self._touch_ended(event)
                else:
                    self._touch_cancelled(event)

        handler = self._handlers.get(event.phase)
        if handler is not None:
            handler()
        return True

    def reset(self) -> None:
        """Forget any active stream without firing handlers."""
        self._state = TouchState.IDLE
        self._touch_id = None

    # Hooks for subclasses

    def _touch_began(self, event: TouchEvent) -> None:
        pass

    def _touch_moved(self, event: TouchEvent) -> None:
        pass

    def _touch_ended(self, event: TouchEvent) -> None:
        pass

    def _touch_cancelled(self, event: TouchEvent) -> None:
        pass


class Touchable:
    """Handler registration shared by drawables and the canvas.

    Each method stores at most one handler per event kind; registering
    again replaces the previous handler. Handlers take no arguments.
    """

    touch_controller: TouchInteractionController

    def on_touch_down(self, handler: H) -> H:
        """Set the handler for when a touch down is detected."""
        return self.touch_controller.set_handler(TouchPhase.BEGAN, handler)

    def on_touch_up(self, handler: H) -> H:
        """Set the handler for when a touch is lifted."""
        return self.touch_controller.set_handler(TouchPhase.ENDED, handler)

    def on_touch_drag(self, handler: H) -> H:
        """Set the handler for when a touch moves."""
        return self.touch_controller.set_handler(TouchPhase.MOVED, handler)

    def on_touch_cancelled(self, handler: H) -> H:
        """Set the handler for when the host cancels a touch."""
        return self.touch_controller.set_handler(TouchPhase.CANCELLED, handler)
