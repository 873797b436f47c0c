"""Explicit 2D affine transforms.

Matrices use the row-vector convention common to 2D graphics APIs::

    [x' y' 1] = [x y 1] · | a  b  0 |
                          | c  d  0 |
                          | tx ty 1 |

so ``first.concat(second)`` is the transform that applies ``first`` and
then ``second``. Drawables compose their display transform as
``identity.concat(scale).concat(rotation)``: scale is applied before
rotation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from shapeplay.geometry.primitives import Point


@dataclass(frozen=True)
class AffineTransform:
    """Immutable 2D affine matrix.

    Attributes:
        a, b, c, d: Linear part (see module docstring for layout).
        tx, ty: Translation part.
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> AffineTransform:
        return cls()

    @classmethod
    def scaling(cls, sx: float, sy: float | None = None) -> AffineTransform:
        """Scale by sx horizontally and sy vertically (sy defaults to sx)."""
        return cls(a=sx, d=sx if sy is None else sy)

    @classmethod
    def rotation(cls, angle: float) -> AffineTransform:
        """Rotate by angle radians.

        Positive angles turn +x toward +y. In a y-down space that reads as
        clockwise on screen.
        """
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return cls(a=cos_a, b=sin_a, c=-sin_a, d=cos_a)

    @classmethod
    def translation(cls, tx: float, ty: float) -> AffineTransform:
        return cls(tx=tx, ty=ty)

    @property
    def is_identity(self) -> bool:
        return self == AffineTransform()

    def concat(self, other: AffineTransform) -> AffineTransform:
        """Return the transform applying self first, then other."""
        return AffineTransform(
            a=self.a * other.a + self.b * other.c,
            b=self.a * other.b + self.b * other.d,
            c=self.c * other.a + self.d * other.c,
            d=self.c * other.b + self.d * other.d,
            tx=self.tx * other.a + self.ty * other.c + other.tx,
            ty=self.tx * other.b + self.ty * other.d + other.ty,
        )

    def apply_to_point(self, point: Point) -> Point:
        return Point(
            x=self.a * point.x + self.c * point.y + self.tx,
            y=self.b * point.x + self.d * point.y + self.ty,
        )

    def to_tuple(self) -> tuple[float, float, float, float, float, float]:
        """Convert to (a, b, c, d, tx, ty) tuple."""
        return (self.a, self.b, self.c, self.d, self.tx, self.ty)
