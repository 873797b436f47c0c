"""Visual style value types: Color and Shadow.

Both are immutable Pydantic models. The core never interprets a Color;
it only passes it through to the rendering backend.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from shapeplay.geometry.primitives import Point


class Color(BaseModel, frozen=True):
    """An RGBA color with components in [0, 1].

    Attributes:
        red: Red component.
        green: Green component.
        blue: Blue component.
        alpha: Opacity (1.0 is fully opaque).
    """

    red: float = Field(default=0.0, ge=0.0, le=1.0)
    green: float = Field(default=0.0, ge=0.0, le=1.0)
    blue: float = Field(default=0.0, ge=0.0, le=1.0)
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

    @classmethod
    def black(cls) -> Self:
        return cls(red=0.0, green=0.0, blue=0.0, alpha=1.0)

    @classmethod
    def white(cls) -> Self:
        return cls(red=1.0, green=1.0, blue=1.0, alpha=1.0)

    @classmethod
    def clear(cls) -> Self:
        return cls(red=0.0, green=0.0, blue=0.0, alpha=0.0)

    @classmethod
    def from_hex(cls, value: str) -> Self:
        """Create a Color from "#RRGGBB" or "#RRGGBBAA".

        Raises:
            ValueError: If the string is not 6 or 8 hex digits.
        """
        digits = value.lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Expected #RRGGBB or #RRGGBBAA, got {value!r}")
        channels = [int(digits[i : i + 2], 16) / 255 for i in range(0, len(digits), 2)]
        if len(channels) == 3:
            channels.append(1.0)
        return cls(red=channels[0], green=channels[1], blue=channels[2], alpha=channels[3])

    def to_hex(self) -> str:
        """Format as "#RRGGBBAA"."""
        parts = (self.red, self.green, self.blue, self.alpha)
        return "#" + "".join(f"{round(p * 255):02X}" for p in parts)


class Shadow(BaseModel, frozen=True):
    """A drop shadow that can be applied to a drawable.

    All distances are in model units. An offset of (1, -1) casts the
    shadow down and to the right.

    Attributes:
        offset: Displacement of the shadow from the object.
        blur_radius: Amount to blur the shadow.
        opacity: 1.0 is fully opaque, 0.0 fully transparent.
        color: Shadow color.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    offset: Point = Field(default_factory=lambda: Point(x=1.0, y=-1.0))
    blur_radius: float = Field(default=1.0, ge=0.0)
    opacity: float = Field(default=0.3, ge=0.0, le=1.0)
    color: Color = Field(default_factory=Color.black)

    def quick_look(self) -> str:
        """Short human-readable description."""
        return (
            f"Offset = {self.offset.quick_look()}, blur radius = {self.blur_radius}, "
            f"opacity = {self.opacity}"
        )
