"""Tests for shapeplay.config module."""

import math

import pytest
from pydantic import ValidationError

from shapeplay.config import Settings


class TestSettings:
    """Tests for the Settings class."""

    def test_default_values(self) -> None:
        """Test that default values are set correctly."""
        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
        )

        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_FORMAT == "console"

        # Coordinate space
        assert settings.POINTS_PER_UNIT == 10.0

        # Animation
        assert settings.ANIMATION_DURATION == 0.35
        assert settings.ANIMATION_DELAY == 0.0
        assert settings.ANIMATION_SPRING_DAMPING == 0.5
        assert settings.ANIMATION_SPRING_VELOCITY == 0.5

        # Touch feedback
        assert settings.TOUCH_FEEDBACK_SCALE == 1.15
        assert settings.TOUCH_FEEDBACK_ROTATION == math.pi / 16

        assert settings.DEFAULT_CIRCLE_RADIUS == 5.0

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that environment variables override defaults."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("POINTS_PER_UNIT", "20")
        monkeypatch.setenv("ANIMATION_DURATION", "0")

        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
        )

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.POINTS_PER_UNIT == 20.0
        assert settings.ANIMATION_DURATION == 0.0

    def test_log_format_options(self) -> None:
        """Test that LOG_FORMAT accepts valid options."""
        settings = Settings(
            LOG_FORMAT="json",
            _env_file=None,  # type: ignore[call-arg]
        )
        assert settings.LOG_FORMAT == "json"

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("POINTS_PER_UNIT", 0.0),
            ("POINTS_PER_UNIT", -10.0),
            ("ANIMATION_DURATION", -1.0),
            ("ANIMATION_SPRING_DAMPING", 1.5),
            ("DEFAULT_CIRCLE_RADIUS", -5.0),
        ],
    )
    def test_out_of_range_values_are_rejected(self, field: str, value: float) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: value})  # type: ignore[arg-type]

    def test_points_per_unit_drives_canvas_scale(self) -> None:
        from shapeplay.geometry import Rect, Size
        from shapeplay.rendering import RecordingBackend
        from shapeplay.scene import Canvas

        settings = Settings(
            POINTS_PER_UNIT=20.0,
            _env_file=None,  # type: ignore[call-arg]
        )
        canvas = Canvas(RecordingBackend(), settings=settings, viewport=Rect(width=300, height=300))
        assert canvas.visible_size == Size(width=15, height=15)
