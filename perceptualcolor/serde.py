"""Parsing and formatting of RGB colors as text"""
from typing import cast, NoReturn

from .spec import Triple


def _reject(entity: str, text: str, problem: str = 'is malformed') -> NoReturn:
    raise SyntaxError(f'{entity} "{text}" {problem}')


def _components(text: str, prefix: str, entity: str) -> list[str]:
    """Strip the prefix and split the remainder into three components."""
    if not text.startswith(prefix):
        _reject(entity, text, f'does not start with "{prefix}"')
    components = text[len(prefix):].split('/')
    if len(components) != 3:
        _reject(entity, text, 'does not have three components')
    return components


def parse_hex(text: str) -> tuple[int, int, int]:
    """
    Parse a color in ``#rgb`` or ``#rrggbb`` notation. The result are the
    red, green, and blue channels, each between 0 and 255.
    """
    entity = 'hex color'
    if not text.startswith('#'):
        _reject(entity, text, 'does not start with "#"')

    digits = text[1:]
    if len(digits) == 3:
        digits = ''.join(d * 2 for d in digits)
    elif len(digits) != 6:
        _reject(entity, text, 'does not have 3 or 6 digits')

    try:
        return cast(
            tuple[int, int, int],
            tuple(int(digits[n:n+2], base=16) for n in (0, 2, 4)),
        )
    except ValueError:
        _reject(entity, text)


def parse_x_rgb(text: str) -> Triple:
    """
    Parse a color in X's ``rgb:`` notation, with one to four hexadecimal
    digits per component. The result are floating point channels between 0
    and 1, scaled by the number of digits.
    """
    entity = 'X rgb color'
    components = _components(text, 'rgb:', entity)
    if not all(1 <= len(c) <= 4 for c in components):
        _reject(entity, text, 'has component with too few or too many digits')

    try:
        return cast(
            Triple,
            tuple(int(c, base=16) / (16 ** len(c) - 1) for c in components),
        )
    except ValueError:
        _reject(entity, text)


def parse_x_rgbi(text: str) -> Triple:
    """Parse a color in X's ``rgbi:`` notation with floating point components."""
    entity = 'X rgbi color'
    components = _components(text, 'rgbi:', entity)

    try:
        channels = cast(Triple, tuple(float(c) for c in components))
    except ValueError:
        _reject(entity, text)
    if not all(0 <= c <= 1 for c in channels):
        _reject(entity, text, 'has component outside 0 to 1')
    return channels


def format_hex(red: int, green: int, blue: int) -> str:
    """Format the 8-bit channels in ``#rrggbb`` notation."""
    return f'#{red:02x}{green:02x}{blue:02x}'
