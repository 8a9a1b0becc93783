"""Conversion between color spaces"""
import functools
import itertools
import math
from typing import cast, Callable, TypeAlias

from .polar import PolarPoint
from .spec import Triple


Converter: TypeAlias = Callable[..., Triple]

_Matrix: TypeAlias = tuple[Triple, Triple, Triple]

# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/spaces/srgb-linear.js

_XYZ_TO_LINEAR_SRGB = (
	(  3.2409699419045226,  -1.537383177570094,   -0.4986107602930034  ),
	( -0.9692436362808796,   1.8759675015077202,   0.04155505740717559 ),
	(  0.05563007969699366, -0.20397695888897652,  1.0569715142428786  ),
)

_LINEAR_SRGB_TO_XYZ = (
	( 0.41239079926595934, 0.357584339383878,   0.1804807884018343  ),
	( 0.21263900587151027, 0.715168678767756,   0.07219231536073371 ),
	( 0.01933081871559182, 0.11919477979462598, 0.9505321522496607  ),
)

# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/spaces/p3-linear.js

_XYZ_TO_LINEAR_P3 = (
	(  2.493496911941425,   -0.9313836179191239,  -0.40271078445071684  ),
	( -0.8294889695615747,   1.7626640603183463,   0.023624685841943577 ),
	(  0.03584583024378447, -0.07617238926804182,  0.9568845240076872   ),
)

_LINEAR_P3_TO_XYZ = (
	( 0.4865709486482162, 0.26566769316909306, 0.1982172852343625 ),
	( 0.2289745640697488, 0.6917385218365064,  0.079286914093745  ),
	( 0.0000000000000000, 0.04511338185890264, 1.043944368900976  ),
)

# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/adapt.js

_BRADFORD = (
	(  0.8951,  0.2664, -0.1614 ),
	( -0.7502,  1.7135,  0.0367 ),
	(  0.0389, -0.0685,  1.0296 ),
)

D50 = (0.3457 / 0.3585, 1.0, (1.0 - 0.3457 - 0.3585) / 0.3585)
D65 = (0.3127 / 0.3290, 1.0, (1.0 - 0.3127 - 0.3290) / 0.3290)

# CIE Lab constants as rational numbers
_EPSILON = 216 / 24389
_KAPPA = 24389 / 27
_EPSILON3 = 24 / 116


# --------------------------------------------------------------------------------------


def _multiply(matrix: _Matrix, vector: Triple) -> Triple:
    return cast(
        Triple,
        tuple(sum(r * c for r, c in zip(row, vector)) for row in matrix)
    )


def _product(m1: _Matrix, m2: _Matrix) -> _Matrix:
    columns = tuple(zip(*m2))
    return cast(
        _Matrix,
        tuple(
            tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
            for row in m1
        ),
    )


def _invert(m: _Matrix) -> _Matrix:
    (a, b, c), (d, e, f), (g, h, i) = m
    determinant = a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)
    if determinant == 0:
        raise ValueError('matrix is not invertible')

    return cast(_Matrix, tuple(
        tuple(value / determinant for value in row) for row in (
            (e * i - f * h, c * h - b * i, b * f - c * e),
            (f * g - d * i, a * i - c * g, c * d - a * f),
            (d * h - e * g, b * g - a * h, a * e - b * d),
        )
    ))


def _bradford(source: Triple, target: Triple) -> _Matrix:
    """Compute the Bradford chromatic adaptation from source to target white."""
    source_cone = _multiply(_BRADFORD, source)
    target_cone = _multiply(_BRADFORD, target)
    scale = cast(_Matrix, tuple(
        tuple((t / s) if row == column else 0.0 for column in range(3))
        for row, (s, t) in enumerate(zip(source_cone, target_cone))
    ))
    return _product(_invert(_BRADFORD), _product(scale, _BRADFORD))


_D65_TO_D50 = _bradford(D65, D50)
_D50_TO_D65 = _bradford(D50, D65)


# --------------------------------------------------------------------------------------
# sRGB and Display P3, which share the same transfer function
# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/spaces/srgb.js


def _decode(value: float) -> float:
    magnitude = abs(value)
    if magnitude <= 0.04045:
        return value / 12.92
    return math.copysign(((magnitude + 0.055) / 1.055) ** 2.4, value)


def _encode(value: float) -> float:
    magnitude = abs(value)
    if magnitude <= 0.0031308:
        return value * 12.92
    return math.copysign(1.055 * magnitude ** (1 / 2.4) - 0.055, value)


def srgb_to_linear_srgb(r: float, g: float, b: float) -> Triple:
    """Convert the given color from sRGB to linear sRGB."""
    return _decode(r), _decode(g), _decode(b)


def linear_srgb_to_srgb(r: float, g: float, b: float) -> Triple:
    """Convert the given color from linear sRGB to sRGB."""
    return _encode(r), _encode(g), _encode(b)


def linear_srgb_to_xyz(r: float, g: float, b: float) -> Triple:
    return _multiply(_LINEAR_SRGB_TO_XYZ, (r, g, b))


def xyz_to_linear_srgb(X: float, Y: float, Z: float) -> Triple:
    return _multiply(_XYZ_TO_LINEAR_SRGB, (X, Y, Z))


p3_to_linear_p3 = srgb_to_linear_srgb
linear_p3_to_p3 = linear_srgb_to_srgb


def linear_p3_to_xyz(r: float, g: float, b: float) -> Triple:
    return _multiply(_LINEAR_P3_TO_XYZ, (r, g, b))


def xyz_to_linear_p3(X: float, Y: float, Z: float) -> Triple:
    return _multiply(_XYZ_TO_LINEAR_P3, (X, Y, Z))


# --------------------------------------------------------------------------------------
# Chromatic Adaptation


def xyz_to_xyz_d50(X: float, Y: float, Z: float) -> Triple:
    """Adapt the given color from the D65 to the D50 white point."""
    return _multiply(_D65_TO_D50, (X, Y, Z))


def xyz_d50_to_xyz(X: float, Y: float, Z: float) -> Triple:
    """Adapt the given color from the D50 to the D65 white point."""
    return _multiply(_D50_TO_D65, (X, Y, Z))


# --------------------------------------------------------------------------------------
# CIE Lab and LCh
# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/spaces/lab.js


def xyz_d50_to_lab(X: float, Y: float, Z: float) -> Triple:
    """Convert the given color from XYZ D50 to CIE Lab."""
    def f(value: float) -> float:
        if value > _EPSILON:
            return math.cbrt(value)
        return (_KAPPA * value + 16) / 116

    fx, fy, fz = (f(v / w) for v, w in zip((X, Y, Z), D50))
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def lab_to_xyz_d50(L: float, a: float, b: float) -> Triple:
    """Convert the given color from CIE Lab to XYZ D50."""
    fy = (L + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    x = fx ** 3 if fx > _EPSILON3 else (116 * fx - 16) / _KAPPA
    y = fy ** 3 if L > _KAPPA * _EPSILON else L / _KAPPA
    z = fz ** 3 if fz > _EPSILON3 else (116 * fz - 16) / _KAPPA

    return x * D50[0], y * D50[1], z * D50[2]


def lab_to_lch(L: float, a: float, b: float) -> Triple:
    """
    Convert the given color from CIE Lab to CIE LCh. The hue is normalized to
    0 ≤ h < 360 and is 0 for achromatic colors.
    """
    polar = PolarPoint.from_cartesian(a, b)
    return L, polar.radius, polar.angle


def lch_to_lab(L: float, C: float, h: float) -> Triple:
    """Convert the given color from CIE LCh to CIE Lab."""
    a, b = PolarPoint(C, h).to_cartesian()
    return L, a, b


# --------------------------------------------------------------------------------------
# Composed Conversions


_CONVERSIONS: dict[tuple[str, str], Converter] = {
    ('srgb', 'linear_srgb'): srgb_to_linear_srgb,
    ('linear_srgb', 'srgb'): linear_srgb_to_srgb,
    ('linear_srgb', 'xyz'): linear_srgb_to_xyz,
    ('xyz', 'linear_srgb'): xyz_to_linear_srgb,
    ('p3', 'linear_p3'): p3_to_linear_p3,
    ('linear_p3', 'p3'): linear_p3_to_p3,
    ('linear_p3', 'xyz'): linear_p3_to_xyz,
    ('xyz', 'linear_p3'): xyz_to_linear_p3,
    ('xyz', 'xyz_d50'): xyz_to_xyz_d50,
    ('xyz_d50', 'xyz'): xyz_d50_to_xyz,
    ('xyz_d50', 'lab'): xyz_d50_to_lab,
    ('lab', 'xyz_d50'): lab_to_xyz_d50,
    ('lab', 'lch'): lab_to_lch,
    ('lch', 'lab'): lch_to_lab,
}

# The conversions above form a tree rooted in XYZ D65
_PARENT: dict[str, None | str] = {
    'srgb': 'linear_srgb',
    'linear_srgb': 'xyz',
    'p3': 'linear_p3',
    'linear_p3': 'xyz',
    'lch': 'lab',
    'lab': 'xyz_d50',
    'xyz_d50': 'xyz',
    'xyz': None,
}


def _ancestry(tag: str) -> list[str]:
    """Trace the path from the color space up to the root."""
    if tag not in _PARENT:
        raise ValueError(f'{tag} is not a valid color space')

    path = [tag]
    while (parent := _PARENT[path[-1]]) is not None:
        path.append(parent)
    return path


def _route(source: str, target: str) -> tuple[str, ...]:
    """Find the path through the tree from the source to the target."""
    up = _ancestry(source)
    down = _ancestry(target)

    # Strip the shared ancestry but keep the lowest common node
    while len(up) > 1 and len(down) > 1 and up[-2] == down[-2]:
        up.pop()
        down.pop()

    return (*up, *reversed(down[:-1]))


def _pass_through(*coordinates: float) -> Triple:
    return cast(Triple, coordinates)


def _compose(steps: tuple[Converter, ...]) -> Converter:
    def converter(*coordinates: float) -> Triple:
        value = cast(Triple, coordinates)
        for step in steps:
            value = step(*value)
        return value
    return converter


@functools.cache
def get_converter(source: str, target: str) -> Converter:
    """
    Get a function that converts coordinates from the source to the target
    color space. Composed converters are named ``<source>_to_<target>`` and
    have a ``route`` attribute listing the color spaces they pass through.
    Converters are cached, so repeated calls are cheap.

    This function raises a ``ValueError`` for unknown color space tags.
    """
    if source == target:
        _ancestry(source)
        return _pass_through

    elementary = _CONVERSIONS.get((source, target))
    if elementary is not None:
        return elementary

    route = _route(source, target)
    converter = _compose(
        tuple(_CONVERSIONS[pair] for pair in itertools.pairwise(route))
    )

    name = f'{source}_to_{target}'
    converter.__name__ = converter.__qualname__ = name
    setattr(converter, 'route', route)
    return converter
