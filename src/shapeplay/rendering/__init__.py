"""Rendering layer for shapeplay.

This package defines the protocols the canvas core drives (RenderBackend,
Animator) and in-memory implementations of both for headless use.

Key Components:
    - RenderBackend / Animator: Protocols for dependency injection
    - AnimationTiming: Duration, delay and spring parameters
    - RecordingBackend: Stores pushed visual state and paint order
    - ImmediateAnimator: Applies mutations synchronously
"""

from shapeplay.rendering.protocol import (
    AnimationTiming,
    Animator,
    RenderBackend,
    ScreenShadow,
    VisualHandle,
)
from shapeplay.rendering.recording import (
    AnimationRecord,
    ImmediateAnimator,
    RecordingBackend,
    VisualState,
)

__all__ = [
    "AnimationRecord",
    "AnimationTiming",
    "Animator",
    "ImmediateAnimator",
    "RecordingBackend",
    "RenderBackend",
    "ScreenShadow",
    "VisualHandle",
    "VisualState",
]
