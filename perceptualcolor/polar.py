"""
Polar coordinates with normalized radius and angle.

A polar point always has a radius of zero or more and an angle, in degrees,
from 0 up to but excluding 360. The constructor normalizes its arguments
accordingly, so that ``PolarPoint(-2, 723)`` and ``PolarPoint(2, 183)`` are one
and the same point. Since the angle carries no meaning at the origin, two
points with radius zero are equal no matter their angles.
"""
import math
from typing import Self


def normalize_angle(angle: float) -> float:
    """
    Normalize the angle in degrees to the range 0 ≤ angle < 360.

    Whole multiples of 360, including negative ones, normalize to exactly 0.
    """
    value = math.fmod(angle, 360)
    if value < 0:
        value += 360
    if value >= 360:
        # Adding 360 to a tiny negative remainder rounds up
        value = 0.0
    return value + 0.0


class PolarPoint:
    """
    A point in polar coordinates.

    Attributes:
        radius: is the distance from the origin, never negative
        angle: is the angle in degrees, 0 ≤ angle < 360

    Instances of this class are immutable.
    """
    __slots__ = ('radius', 'angle')

    radius: float
    angle: float

    def __init__(self, radius: float = 0, angle: float = 0) -> None:
        if radius < 0:
            radius, angle = -radius, angle + 180
        object.__setattr__(self, 'radius', float(radius))
        object.__setattr__(self, 'angle', normalize_angle(angle))

    @classmethod
    def from_cartesian(cls, x: float, y: float) -> Self:
        """
        Convert the cartesian coordinates to polar coordinates. If both
        coordinates are zero, the resulting angle is zero, too.
        """
        radius = math.hypot(x, y)
        if radius == 0:
            return cls(0, 0)

        # Clamp ratio against rounding just past ±1
        ratio = max(-1.0, min(1.0, x / radius))
        if y >= 0:
            angle = math.degrees(math.acos(ratio))
        else:
            angle = 360 - math.degrees(math.acos(ratio))
        return cls(radius, angle)

    def to_cartesian(self) -> tuple[float, float]:
        """Convert this point to cartesian coordinates."""
        radians = math.radians(self.angle)
        return self.radius * math.cos(radians), self.radius * math.sin(radians)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f'cannot assign to field "{name}"')

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f'cannot delete field "{name}"')

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PolarPoint):
            return NotImplemented
        return self.radius == other.radius and (
            self.angle == other.angle or self.radius == 0
        )

    def __hash__(self) -> int:
        return hash((self.radius, self.angle if self.radius != 0 else 0.0))

    def __repr__(self) -> str:
        return f'PolarPoint(radius={self.radius}, angle={self.angle})'
