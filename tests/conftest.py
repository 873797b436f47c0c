"""Shared pytest fixtures and configuration."""

from collections.abc import Callable, Iterator

import pytest

from shapeplay.config import Settings
from shapeplay.geometry import Point, Rect
from shapeplay.rendering import ImmediateAnimator, RecordingBackend
from shapeplay.scene import Canvas, TouchEvent, TouchPhase
from shapeplay.utils.logging import clear_correlation_context


@pytest.fixture(autouse=True)
def reset_logging_context() -> Iterator[None]:
    """Reset correlation context between tests."""
    clear_correlation_context()
    yield
    clear_correlation_context()


@pytest.fixture
def test_settings() -> Settings:
    """Create a Settings instance that ignores the environment's .env file."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
    )


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def animator() -> ImmediateAnimator:
    return ImmediateAnimator()


@pytest.fixture
def canvas(
    backend: RecordingBackend, animator: ImmediateAnimator, test_settings: Settings
) -> Canvas:
    """A 300x300 canvas at 10 points per unit, origin at screen (150, 150)."""
    return Canvas(
        backend,
        animator,
        settings=test_settings,
        viewport=Rect(width=300, height=300),
    )


@pytest.fixture
def touch(canvas: Canvas) -> Callable[[TouchPhase, float, float, int], None]:
    """Dispatch a single touch event at a screen location."""

    def _touch(phase: TouchPhase, x: float, y: float, touch_id: int = 1) -> None:
        canvas.dispatch_touches(
            [TouchEvent(touch_id=touch_id, phase=phase, location=Point(x=x, y=y))]
        )

    return _touch
