"""
Support for gamut mapping.

The gamut of an RGB working space is not continuous in LCh, at least not for
every space and hue. Searching the gamut boundary hence proceeds in two stages:
It first walks outwards in steps of ``GAMUT_MESH_SIZE`` and, once it found the
first out-of-gamut color, refines the boundary by bisection until the interval
is no larger than ``GAMUT_PRECISION``. Smaller values mean better precision and
slower processing. ``GAMUT_PRECISION`` must be smaller than ``GAMUT_MESH_SIZE``.

Mapping a single color into gamut, i.e., :func:`move_chroma_into_gamut`, skips
the first stage and bisects between zero chroma and the color's chroma right
away.
"""
from typing import TYPE_CHECKING

from .spec import Lch, PHYSICAL_MAXIMUM_CHROMA

if TYPE_CHECKING:
    from .profile import ColorSpaceProfile


GAMUT_MESH_SIZE = 0.01
GAMUT_PRECISION = 0.001


def move_chroma_into_gamut(
    profile: 'ColorSpaceProfile',
    lch: Lch,
    *,
    precision: float = GAMUT_PRECISION,
) -> Lch:
    """
    Move the LCh color into the profile's gamut by reducing its chroma.

    If the color is in gamut, this function returns it unchanged. Otherwise,
    if the achromatic color with the same lightness is in gamut, it performs a
    binary search for the largest in-gamut chroma between zero and the color's
    chroma. The result has the same lightness and hue and a chroma within
    ``precision`` of the gamut boundary. If even the achromatic color is out of
    gamut, the lightness is out of range for the profile and this function
    snaps to the nearest in-gamut point on the neutral axis, i.e., the black
    point or the white point. The hue is retained in every case.

    This function neither raises an exception nor loops indefinitely.
    """
    if profile.in_gamut(lch):
        return lch

    lightness, chroma, hue = lch
    if profile.in_gamut(lightness, 0, hue):
        lower, upper = 0.0, chroma
        while upper - lower > precision:
            candidate = (lower + upper) / 2
            if profile.in_gamut(lightness, candidate, hue):
                lower = candidate
            else:
                upper = candidate
        return Lch(lightness, lower, hue)

    if lightness < profile.blackpoint_lightness:
        return Lch(profile.blackpoint_lightness, 0.0, hue)
    if lightness > profile.whitepoint_lightness:
        return Lch(profile.whitepoint_lightness, 0.0, hue)
    return lch


def max_chroma(
    profile: 'ColorSpaceProfile',
    lightness: float,
    hue: float,
    *,
    mesh_size: float = GAMUT_MESH_SIZE,
    precision: float = GAMUT_PRECISION,
    limit: float = PHYSICAL_MAXIMUM_CHROMA,
) -> float:
    """
    Determine the largest in-gamut chroma for the lightness and hue.

    The search walks outwards from the neutral axis in steps of ``mesh_size``
    and then bisects the last step down to ``precision``. It never returns a
    chroma larger than ``limit``. If the achromatic color is out of gamut, the
    result is zero.
    """
    if not 0 < precision <= mesh_size:
        raise ValueError(
            f'precision {precision} is not between 0 and mesh size {mesh_size}'
        )
    if not profile.in_gamut(lightness, 0, hue):
        return 0.0

    lower = 0.0
    index = 1
    while True:
        upper = min(index * mesh_size, limit)
        if not profile.in_gamut(lightness, upper, hue):
            break
        lower = upper
        if upper >= limit:
            return limit
        index += 1

    while upper - lower > precision:
        candidate = (lower + upper) / 2
        if profile.in_gamut(lightness, candidate, hue):
            lower = candidate
        else:
            upper = candidate
    return lower
