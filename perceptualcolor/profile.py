"""
The color space profile, i.e., the bridge between CIE Lab and an RGB working
space.

A profile owns three one-directional transforms: from Lab to floating point
RGB, from Lab to 16-bit RGB, and from RGB back to Lab. The first one is
unbounded and hence serves as gamut test: A Lab color is in gamut exactly if
all of its RGB channels fall between 0 and 1. The second one clips and
quantizes its result and hence always produces some RGB color, even if it only
approximates the Lab color. The third one is unconditional, since every RGB
color is in gamut by definition.

Upon construction, a profile also scans the neutral axis for its black and
white points, i.e., the smallest and largest lightness that are in gamut with
zero chroma.
"""
import logging
from typing import overload

from .conversion import Converter, get_converter, lch_to_lab
from .device import DeviceColor, MAX_CHANNEL
from .gamut import GAMUT_PRECISION
from .space import resolve, Space
from .spec import Lab, Lch, Rgb


logger = logging.getLogger(__name__)


class ColorSpaceProfile:
    """
    A color space profile for an RGB working space.

    Args:
        space: is the tag of the RGB working space, ``srgb`` or ``p3``
        precision: is the step size for scanning the neutral axis

    Profiles are long-lived and shared by many :class:`.FullColor` instances,
    which use a profile only while being constructed. Once constructed, a
    profile is read-only. It does not lock anything, so code sharing a profile
    between threads must serialize access to it.

    The constructor raises a ``ValueError`` if the space is not an RGB working
    space or if the scan of the neutral axis does not find a black point with
    smaller lightness than the white point. A profile without a sane neutral
    axis is unusable.
    """
    __slots__ = (
        '_space',
        '_lab_to_rgb',
        '_rgb_to_lab',
        '_blackpoint_lightness',
        '_whitepoint_lightness',
    )

    def __init__(self, space: str = 'srgb', *, precision: float = GAMUT_PRECISION) -> None:
        rgb_space = resolve(space)
        if not rgb_space.rgb:
            raise ValueError(f'{space} is not an RGB working space')
        if not 0 < precision < 100:
            raise ValueError(f'precision {precision} is not between 0 and 100')

        self._space: Space = rgb_space
        self._lab_to_rgb: Converter = get_converter('lab', space)
        self._rgb_to_lab: Converter = get_converter(space, 'lab')

        steps = round(100 / precision)

        for index in range(steps + 1):
            blackpoint = min(index * precision, 100.0)
            if self.in_gamut(blackpoint, 0, 0):
                break

        for index in range(steps + 1):
            whitepoint = max(100.0 - index * precision, 0.0)
            if self.in_gamut(whitepoint, 0, 0):
                break

        if whitepoint <= blackpoint:
            logger.error(
                'unable to find black point and white point on gray axis of %s',
                rgb_space.label,
            )
            raise ValueError(
                f'unable to find black point and white point on gray axis of {space}'
            )

        self._blackpoint_lightness = blackpoint
        self._whitepoint_lightness = whitepoint
        logger.debug(
            '%s profile has black point L=%s and white point L=%s',
            rgb_space.label, blackpoint, whitepoint,
        )

    @property
    def space(self) -> Space:
        """The RGB working space."""
        return self._space

    @property
    def description(self) -> str:
        """A human-readable description of this profile."""
        return self._space.label

    @property
    def blackpoint_lightness(self) -> float:
        """The smallest in-gamut lightness of the neutral axis."""
        return self._blackpoint_lightness

    @property
    def whitepoint_lightness(self) -> float:
        """The largest in-gamut lightness of the neutral axis."""
        return self._whitepoint_lightness

    # ----------------------------------------------------------------------------------
    # Gamut Testing

    @overload
    def in_gamut(self, lch: Lch, /) -> bool:
        ...
    @overload
    def in_gamut(self, lightness: float, chroma: float, hue: float, /) -> bool:
        ...
    def in_gamut(
        self,
        lightness: float | Lch,
        chroma: None | float = None,
        hue: None | float = None,
    ) -> bool:
        """
        Determine whether the LCh color is in gamut for this profile, i.e.,
        whether all of its RGB channels are between 0 and 1. There is no
        tolerance beyond floating point rounding.
        """
        if isinstance(lightness, Lch):
            lightness, chroma, hue = lightness
        assert chroma is not None and hue is not None
        rgb = self._lab_to_rgb(*lch_to_lab(lightness, chroma, hue))
        return self._space.in_gamut(*rgb)

    # ----------------------------------------------------------------------------------
    # Conversion

    def _to_lab(self, color: Lab | Lch) -> Lab:
        if isinstance(color, Lch):
            return Lab(*lch_to_lab(*color))
        return color

    def to_rgb(self, color: Lab | Lch) -> None | Rgb:
        """
        Convert the Lab or LCh color to RGB. If the color is out of gamut, this
        method returns ``None``.
        """
        rgb = self._lab_to_rgb(*self._to_lab(color))
        if not self._space.in_gamut(*rgb):
            return None
        return Rgb(*rgb)

    def to_rgb_color(self, color: Lab | Lch) -> DeviceColor:
        """
        Convert the Lab or LCh color to a device color. If the color is out of
        gamut, the result is an invalid device color.
        """
        rgb = self.to_rgb(color)
        if rgb is None:
            return DeviceColor()
        return DeviceColor.from_rgb_f(*rgb)

    def to_rgb_bounded(self, color: Lab | Lch) -> Rgb:
        """
        Convert the Lab or LCh color to RGB with 16-bit precision. If the color
        is out of gamut, this method clips the result to the nearest RGB
        channel values.
        """
        rgb = self._space.clip(*self._lab_to_rgb(*self._to_lab(color)))
        return Rgb(*(round(c * MAX_CHANNEL) / MAX_CHANNEL for c in rgb))

    def to_rgb_color_bounded(self, color: Lab | Lch) -> DeviceColor:
        """Convert the Lab or LCh color to a device color, clipping as needed."""
        return DeviceColor.from_rgb_f(*self.to_rgb_bounded(color))

    def to_lab(self, color: Rgb | DeviceColor) -> Lab:
        """Convert the RGB or device color to Lab."""
        if isinstance(color, DeviceColor):
            if not color.is_valid():
                raise ValueError('cannot convert invalid device color to Lab')
            return Lab(*self._rgb_to_lab(*color.rgb_f))
        return Lab(*self._rgb_to_lab(*color))

    def __repr__(self) -> str:
        return (
            f'ColorSpaceProfile({self._space.tag!r}, '
            f'blackpoint_lightness={self._blackpoint_lightness}, '
            f'whitepoint_lightness={self._whitepoint_lightness})'
        )
