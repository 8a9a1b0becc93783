"""
Metadata about the color spaces known to the ``conversion`` module.

Both modules identify color spaces by the same lower-case tags. Only spaces
flagged as ``rgb`` can serve as the working space of a profile.
"""
import dataclasses
import math
from typing import cast

from .spec import Triple


@dataclasses.dataclass(frozen=True, slots=True)
class Coordinate:
    """
    A color space coordinate.

    Attributes:
        name: the single-letter name of the coordinate
        lower: the optional lower bound
        upper: the optional upper bound
        angular: the flag for a hue angle, which is never out of range

    Instances of this class are immutable.
    """
    name: str
    lower: None | float = None
    upper: None | float = None
    angular: bool = False

    def __post_init__(self) -> None:
        if (
            self.lower is not None
            and self.upper is not None
            and self.lower > self.upper
        ):
            raise ValueError(
                f'coordinate {self.name} has lower bound {self.lower} '
                f'above upper bound {self.upper}'
            )

    def in_range(self, value: float, *, epsilon: float = 0) -> bool:
        """
        Determine whether the value falls within this coordinate's bounds,
        widened by epsilon. Not-a-number is never in range.
        """
        if math.isnan(value):
            return False
        if self.angular:
            return True
        if self.lower is not None and value < self.lower - epsilon:
            return False
        return self.upper is None or value <= self.upper + epsilon

    def clip(self, value: float) -> float:
        if self.angular:
            return value
        if self.lower is not None and value < self.lower:
            return self.lower
        if self.upper is not None and value > self.upper:
            return self.upper
        return value


@dataclasses.dataclass(frozen=True, slots=True)
class Space:
    """
    A color space.

    Attributes:
        tag: is the tag used by ``get_converter``
        label: is a human-readable name
        coordinates: are the three coordinates
        rgb: is the flag for RGB working spaces
    """
    tag: str
    label: str
    coordinates: tuple[Coordinate, Coordinate, Coordinate]
    rgb: bool = False

    def in_gamut(self, *coordinates: float, epsilon: float = 0) -> bool:
        """
        Determine whether every coordinate is within range. The default
        tolerance is zero.
        """
        return all(
            c.in_range(v, epsilon=epsilon)
            for c, v in zip(self.coordinates, coordinates, strict=True)
        )

    def clip(self, *coordinates: float) -> Triple:
        """Clip each coordinate to its range."""
        return cast(
            Triple,
            tuple(c.clip(v) for c, v in zip(self.coordinates, coordinates, strict=True)),
        )


def resolve(tag: str) -> Space:
    """Look up the color space with the tag."""
    try:
        return _SPACES[tag]
    except KeyError:
        raise ValueError(f'{tag} is not a valid color space') from None


def _rgb_space(tag: str, label: str, *, rgb: bool = False) -> Space:
    return Space(
        tag,
        label,
        (Coordinate('r', 0, 1), Coordinate('g', 0, 1), Coordinate('b', 0, 1)),
        rgb,
    )


def _tristimulus(tag: str, label: str) -> Space:
    return Space(tag, label, (Coordinate('X'), Coordinate('Y'), Coordinate('Z')))


SRGB = _rgb_space('srgb', 'sRGB', rgb=True)
LINEAR_SRGB = _rgb_space('linear_srgb', 'Linear sRGB')
P3 = _rgb_space('p3', 'Display P3', rgb=True)
LINEAR_P3 = _rgb_space('linear_p3', 'Linear Display P3')
XYZ = _tristimulus('xyz', 'XYZ D65')
XYZ_D50 = _tristimulus('xyz_d50', 'XYZ D50')

LAB = Space(
    'lab',
    'CIE Lab D50',
    (Coordinate('L', 0, 100), Coordinate('a'), Coordinate('b')),
)

LCH = Space(
    'lch',
    'CIE LCh D50',
    (Coordinate('L', 0, 100), Coordinate('C', 0), Coordinate('h', angular=True)),
)

_SPACES = {
    space.tag: space
    for space in (SRGB, LINEAR_SRGB, P3, LINEAR_P3, XYZ, XYZ_D50, LAB, LCH)
}
