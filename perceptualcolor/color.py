"""The full color description used by color picking widgets."""
import dataclasses
import enum
from typing import overload, Self, TYPE_CHECKING

from .conversion import lab_to_lch, lch_to_lab
from .device import DeviceColor
from .gamut import move_chroma_into_gamut
from .polar import PolarPoint
from .spec import Lab, Lch, Rgb

if TYPE_CHECKING:
    from .profile import ColorSpaceProfile


class OutOfGamut(enum.Enum):
    """How to treat Lab and LCh colors that are out of gamut."""

    Preserve = enum.auto()
    """
    Keep the Lab and LCh coordinates as is and force only the RGB
    representations into gamut.
    """

    SacrificeChroma = enum.auto()
    """
    Reduce chroma until the color is in gamut, so that all representations
    agree with each other.
    """


@dataclasses.dataclass(frozen=True, slots=True, init=False)
class FullColor:
    """
    A color in several representations at once.

    Attributes:
        rgb: is the floating point RGB color
        rgb_color: is the RGB device color, including alpha
        hsv_color: is the HSV device color, including alpha
        lab: is the CIE Lab color
        lch: is the CIE LCh color with normalized hue and non-negative chroma
        alpha: is the alpha channel, from 0 (transparent) to 1 (opaque)
        valid: is the validity flag

    A full color is constructed with a color space profile. The profile is
    needed during construction only and is not retained. The constructor
    supports the following combinations of arguments:

        * Without arguments for an invalid color, which carries no meaningful
          color and must not be used except for testing validity
        * From a profile, an :class:`.Rgb` color, and an optional alpha
        * From a profile and a :class:`.DeviceColor`, which may be RGB or HSV;
          an invalid device color results in an invalid full color
        * From a profile, a :class:`.Lab` or :class:`.Lch` color, an
          :class:`OutOfGamut` behaviour, and an optional alpha

    Instances of this class are immutable. Two full colors are equal only if
    all of their representations are equal, which is stricter than denoting
    the same visible color. Widgets rely on that to detect color changes.
    """
    rgb: Rgb
    rgb_color: DeviceColor
    hsv_color: DeviceColor
    lab: Lab
    lch: Lch
    alpha: float
    valid: bool

    @overload
    def __init__(self) -> None:
        ...
    @overload
    def __init__(
        self, profile: 'ColorSpaceProfile', color: Rgb, /, alpha: float = 1.0
    ) -> None:
        ...
    @overload
    def __init__(self, profile: 'ColorSpaceProfile', color: DeviceColor, /) -> None:
        ...
    @overload
    def __init__(
        self,
        profile: 'ColorSpaceProfile',
        color: Lab | Lch,
        behaviour: OutOfGamut,
        /,
        alpha: float = 1.0,
    ) -> None:
        ...
    def __init__(
        self,
        profile: 'None | ColorSpaceProfile' = None,
        color: None | Rgb | DeviceColor | Lab | Lch = None,
        behaviour: None | OutOfGamut | float = None,
        /,
        alpha: float = 1.0,
    ) -> None:
        if isinstance(behaviour, (int, float)):
            # Alpha passed positionally after an RGB color
            alpha, behaviour = float(behaviour), None

        if profile is None or color is None:
            self._set_invalid()
        elif behaviour is not None and not isinstance(color, (Lab, Lch)):
            raise TypeError('only Lab and LCh colors take an out-of-gamut behaviour')
        elif isinstance(color, Rgb):
            self._init_from_rgb(profile, color, alpha)
        elif isinstance(color, DeviceColor):
            self._init_from_device(profile, color)
        elif isinstance(color, (Lab, Lch)):
            if not isinstance(behaviour, OutOfGamut):
                raise TypeError('Lab and LCh colors require an out-of-gamut behaviour')
            lch = Lch(*lab_to_lch(*color)) if isinstance(color, Lab) else color
            self._init_from_lch(profile, lch, behaviour, alpha)
        else:
            raise TypeError(f'{color!r} is not a supported color')

    def _assign(self, **fields: object) -> None:
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    def _set_invalid(self) -> None:
        self._assign(
            rgb=Rgb(0, 0, 0),
            rgb_color=DeviceColor(),
            hsv_color=DeviceColor(),
            lab=Lab(0, 0, 0),
            lch=Lch(0, 0, 0),
            alpha=0.0,
            valid=False,
        )

    def _init_from_rgb(self, profile: 'ColorSpaceProfile', rgb: Rgb, alpha: float) -> None:
        rgb_color = DeviceColor.from_rgb_f(*rgb, alpha)
        lab = profile.to_lab(rgb)
        self._assign(
            rgb=rgb,
            rgb_color=rgb_color,
            hsv_color=rgb_color.to_hsv(),
            lab=lab,
            lch=Lch(*lab_to_lch(*lab)),
            alpha=float(alpha),
            valid=True,
        )

    def _init_from_device(self, profile: 'ColorSpaceProfile', color: DeviceColor) -> None:
        if not color.is_valid():
            self._set_invalid()
            return

        if color.spec == 'hsv':
            hsv_color, rgb_color = color, color.to_rgb()
        else:
            hsv_color, rgb_color = color.to_hsv(), color

        lab = profile.to_lab(rgb_color)
        self._assign(
            rgb=Rgb(*rgb_color.rgb_f),
            rgb_color=rgb_color,
            hsv_color=hsv_color,
            lab=lab,
            lch=Lch(*lab_to_lch(*lab)),
            alpha=color.alpha_f,
            valid=True,
        )

    def _init_from_lch(
        self,
        profile: 'ColorSpaceProfile',
        lch: Lch,
        behaviour: OutOfGamut,
        alpha: float,
    ) -> None:
        polar = PolarPoint(lch.C, lch.h)
        lch = Lch(lch.L, polar.radius, polar.angle)
        if behaviour is OutOfGamut.SacrificeChroma:
            lch = move_chroma_into_gamut(profile, lch)

        lab = Lab(*lch_to_lab(*lch))
        rgb = profile.to_rgb_bounded(lab)
        rgb_color = DeviceColor.from_rgb_f(*rgb, alpha)
        self._assign(
            rgb=rgb,
            rgb_color=rgb_color,
            hsv_color=rgb_color.to_hsv(),
            lab=lab,
            lch=lch,
            alpha=float(alpha),
            valid=True,
        )

    # ----------------------------------------------------------------------------------

    def is_valid(self) -> bool:
        """Determine whether this color is valid."""
        return self.valid

    def with_alpha(self, alpha: float) -> Self:
        """
        Replace the alpha channel. Since full colors are immutable, this method
        returns a new full color.
        """
        if not self.valid:
            return self

        # The constructor does not accept fields, so bypass it
        color = object.__new__(type(self))
        color._assign(
            rgb=self.rgb,
            rgb_color=self.rgb_color.with_alpha_f(alpha),
            hsv_color=self.hsv_color.with_alpha_f(alpha),
            lab=self.lab,
            lch=self.lch,
            alpha=float(alpha),
            valid=True,
        )
        return color

    def __str__(self) -> str:
        if not self.valid:
            return 'FullColor(<invalid>)'
        L, C, h = self.lch
        return '\n'.join((
            'FullColor(',
            f' - RGB: {self.rgb.red} {self.rgb.green} {self.rgb.blue}',
            f' - RGB color: {self.rgb_color}',
            f' - HSV color: {self.hsv_color.hsv_f}',
            f' - Lab: {self.lab.L} {self.lab.a} {self.lab.b}',
            f' - LCh: {L} {C} {h}°',
            f' - Alpha: {self.alpha}',
            ')',
        ))
