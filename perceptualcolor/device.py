"""
A device color, i.e., the color representation of a widget toolkit.

User interfaces mostly exchange colors as 16-bit-per-channel RGB or HSV values
together with an alpha channel. A :class:`DeviceColor` models exactly that, so
that the perceptual color model can hand such colors to the surrounding user
interface code and accept them in return. Conversions between RGB and HSV
always go through floating point and then round back to 16 bits, just like a
toolkit color does.
"""
import colorsys
import dataclasses
from typing import Literal, Self

from .serde import format_hex, parse_hex, parse_x_rgb, parse_x_rgbi


MAX_CHANNEL = 65535
"""The largest value of a 16-bit channel."""

HUE_STEPS = 36000
"""The number of distinct hues, i.e., hues are measured in centidegrees."""


def _to_channel(value: float, name: str) -> int:
    if not 0 <= value <= 1:
        raise ValueError(f'{name} {value} is not between 0 and 1')
    return round(value * MAX_CHANNEL)


@dataclasses.dataclass(frozen=True, slots=True)
class DeviceColor:
    """
    A toolkit color.

    Attributes:
        spec: identifies the representation, which is ``invalid``, ``rgb``,
            or ``hsv``
        components: are the three 16-bit components; for HSV, the first
            component is the hue in centidegrees or -1 for achromatic colors
        alpha: is the 16-bit alpha channel

    The default instance is invalid. It carries no meaningful color and
    only compares equal to other invalid instances.
    """
    spec: Literal['invalid', 'rgb', 'hsv'] = 'invalid'
    components: tuple[int, int, int] = (0, 0, 0)
    alpha: int = MAX_CHANNEL

    @classmethod
    def from_rgb_f(
        cls, red: float, green: float, blue: float, alpha: float = 1.0
    ) -> Self:
        """Create a new RGB color from normal floating point channels."""
        return cls(
            'rgb',
            (
                _to_channel(red, 'red'),
                _to_channel(green, 'green'),
                _to_channel(blue, 'blue'),
            ),
            _to_channel(alpha, 'alpha'),
        )

    @classmethod
    def from_rgb256(cls, red: int, green: int, blue: int) -> Self:
        """Create a new, opaque RGB color from 8-bit channels."""
        return cls.from_rgb_f(red / 255, green / 255, blue / 255)

    @classmethod
    def from_hsv_f(
        cls, hue: float, saturation: float, value: float, alpha: float = 1.0
    ) -> Self:
        """
        Create a new HSV color. The hue is a fraction of a full turn between 0
        and 1 or -1 for achromatic colors.
        """
        if hue == -1 or saturation == 0:
            h = -1
        elif 0 <= hue <= 1:
            h = round(hue * HUE_STEPS) % HUE_STEPS
        else:
            raise ValueError(f'hue {hue} is neither -1 nor between 0 and 1')
        return cls(
            'hsv',
            (h, _to_channel(saturation, 'saturation'), _to_channel(value, 'value')),
            _to_channel(alpha, 'alpha'),
        )

    @classmethod
    def parse(cls, text: str) -> Self:
        """
        Parse the textual representation of an opaque RGB color, which may be
        in ``#`` hexadecimal notation or in X's ``rgb:`` or ``rgbi:`` format.
        """
        text = text.strip()
        if text.startswith('#'):
            return cls.from_rgb256(*parse_hex(text))
        if text.startswith('rgb:'):
            return cls.from_rgb_f(*parse_x_rgb(text))
        if text.startswith('rgbi:'):
            return cls.from_rgb_f(*parse_x_rgbi(text))
        raise SyntaxError(f'"{text}" is not a valid color')

    # ----------------------------------------------------------------------------------

    def is_valid(self) -> bool:
        """Determine whether this color is valid."""
        return self.spec != 'invalid'

    def to_rgb(self) -> Self:
        """Convert this color to RGB. Invalid colors stay invalid."""
        if self.spec != 'hsv':
            return self

        h, s, v = self.components
        r, g, b = colorsys.hsv_to_rgb(
            max(h, 0) / HUE_STEPS, s / MAX_CHANNEL, v / MAX_CHANNEL
        )
        return type(self)(
            'rgb',
            (round(r * MAX_CHANNEL), round(g * MAX_CHANNEL), round(b * MAX_CHANNEL)),
            self.alpha,
        )

    def to_hsv(self) -> Self:
        """Convert this color to HSV. Invalid colors stay invalid."""
        if self.spec != 'rgb':
            return self

        h, s, v = colorsys.rgb_to_hsv(*(c / MAX_CHANNEL for c in self.components))
        hue = -1 if s == 0 else round(h * HUE_STEPS) % HUE_STEPS
        return type(self)(
            'hsv',
            (hue, round(s * MAX_CHANNEL), round(v * MAX_CHANNEL)),
            self.alpha,
        )

    def with_alpha_f(self, alpha: float) -> Self:
        """Replace this color's alpha channel."""
        return dataclasses.replace(self, alpha=_to_channel(alpha, 'alpha'))

    # ----------------------------------------------------------------------------------

    @property
    def rgb_f(self) -> tuple[float, float, float]:
        """The red, green, and blue channels as floating point numbers."""
        r, g, b = self.to_rgb().components
        return r / MAX_CHANNEL, g / MAX_CHANNEL, b / MAX_CHANNEL

    @property
    def red_f(self) -> float:
        return self.rgb_f[0]

    @property
    def green_f(self) -> float:
        return self.rgb_f[1]

    @property
    def blue_f(self) -> float:
        return self.rgb_f[2]

    @property
    def alpha_f(self) -> float:
        return self.alpha / MAX_CHANNEL

    @property
    def hsv_f(self) -> tuple[float, float, float]:
        """
        The hue, saturation, and value as floating point numbers. The hue is
        -1 for achromatic colors.
        """
        h, s, v = self.to_hsv().components
        return (-1.0 if h < 0 else h / HUE_STEPS), s / MAX_CHANNEL, v / MAX_CHANNEL

    @property
    def hue_f(self) -> float:
        return self.hsv_f[0]

    @property
    def saturation_f(self) -> float:
        return self.hsv_f[1]

    @property
    def value_f(self) -> float:
        return self.hsv_f[2]

    def __str__(self) -> str:
        if not self.is_valid():
            return '<invalid>'
        return format_hex(*(round(c / MAX_CHANNEL * 255) for c in self.to_rgb().components))
