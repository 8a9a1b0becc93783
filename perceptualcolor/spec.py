"""
Basic type declarations for colors:

  * ``Rgb`` holds the red, green, and blue channels of an RGB color, each
    a floating point number between 0 and 1, inclusive
  * ``Lab`` holds the L*, a*, and b* coordinates of a CIE Lab color
  * ``Lch`` holds the lightness, chroma, and hue of a CIE LCh color

All three are immutable and iterate over their coordinates, so that they can be
unpacked into the positional arguments of conversion functions.

This module also defines some useful defaults for LCh coordinates. Lightness
ranges from 0 to 100 and a default of 50 sits right in the middle of the gamut
body. Chroma defaults to 0, which is achromatic and hence in gamut for every
lightness between black and white. The physical maximum for chroma follows from
the physical limits of the a* axis (-170 to 100) and b* axis (-100 to 150): It
must be smaller than √(170² + 150²) ≈ 227. In practice, sRGB colors do not
exceed a chroma of about 132, and a chroma of 29 stays in sRGB gamut for all
hues at a lightness of 50.
"""
from collections.abc import Iterator
import dataclasses
from typing import TypeAlias


Triple: TypeAlias = tuple[float, float, float]

DEFAULT_LIGHTNESS = 50.0
DEFAULT_CHROMA = 0.0
DEFAULT_HUE = 0.0
VERSATILE_SRGB_CHROMA = 29.0
MAX_SRGB_CHROMA = 132.0
PHYSICAL_MAXIMUM_CHROMA = 227.0


@dataclasses.dataclass(frozen=True, slots=True)
class Rgb:
    """
    An RGB color.

    Attributes:
        red: is the red channel
        green: is the green channel
        blue: is the blue channel

    All channels must be between 0 and 1, inclusive. The constructor raises a
    ``ValueError`` otherwise.
    """
    red: float
    green: float
    blue: float

    def __post_init__(self) -> None:
        for name in ('red', 'green', 'blue'):
            value = getattr(self, name)
            if not 0 <= value <= 1:
                raise ValueError(f'{name} channel {value} is not between 0 and 1')
            if not isinstance(value, float):
                object.__setattr__(self, name, float(value))

    def __iter__(self) -> Iterator[float]:
        yield self.red
        yield self.green
        yield self.blue


@dataclasses.dataclass(frozen=True, slots=True)
class Lab:
    """A CIE Lab color with lightness ``L`` and opponent axes ``a`` and ``b``."""
    L: float
    a: float
    b: float

    def __iter__(self) -> Iterator[float]:
        yield self.L
        yield self.a
        yield self.b


@dataclasses.dataclass(frozen=True, slots=True)
class Lch:
    """A CIE LCh color with lightness ``L``, chroma ``C``, and hue ``h``."""
    L: float
    C: float
    h: float

    def __iter__(self) -> Iterator[float]:
        yield self.L
        yield self.C
        yield self.h
