"""shapeplay configuration using pydantic-settings.

All configuration is strongly typed and supports environment variables
and .env files.
"""

import math

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # Coordinate space
    POINTS_PER_UNIT: float = Field(default=10.0, gt=0)  # screen points per model unit

    # Animation timing handed to the animator
    ANIMATION_DURATION: float = Field(default=0.35, ge=0)
    ANIMATION_DELAY: float = Field(default=0.0, ge=0)
    ANIMATION_SPRING_DAMPING: float = Field(default=0.5, gt=0, le=1)
    ANIMATION_SPRING_VELOCITY: float = 0.5

    # Touch-down feedback on draggable drawables
    TOUCH_FEEDBACK_SCALE: float = Field(default=1.15, ge=0)
    TOUCH_FEEDBACK_ROTATION: float = math.pi / 16  # radians added while held

    # Shapes
    DEFAULT_CIRCLE_RADIUS: float = Field(default=5.0, ge=0)


# Singleton instance for import convenience
settings = Settings()
