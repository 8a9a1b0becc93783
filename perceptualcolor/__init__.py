"""Perceptually uniform color model and gamut mapping for LCh color pickers."""

__version__ = '0.0.1'

__all__ = (
    # Value types and defaults
    'Lab',
    'Lch',
    'Rgb',
    'DEFAULT_CHROMA',
    'DEFAULT_HUE',
    'DEFAULT_LIGHTNESS',
    'MAX_SRGB_CHROMA',
    'PHYSICAL_MAXIMUM_CHROMA',
    'VERSATILE_SRGB_CHROMA',
    # Polar coordinates
    'PolarPoint',
    'normalize_angle',
    # Toolkit colors
    'DeviceColor',
    # Profiles and gamut mapping
    'ColorSpaceProfile',
    'GAMUT_MESH_SIZE',
    'GAMUT_PRECISION',
    'max_chroma',
    'move_chroma_into_gamut',
    # Full colors
    'FullColor',
    'OutOfGamut',
)

import logging

from .color import FullColor, OutOfGamut
from .device import DeviceColor
from .gamut import GAMUT_MESH_SIZE, GAMUT_PRECISION, max_chroma, move_chroma_into_gamut
from .polar import normalize_angle, PolarPoint
from .profile import ColorSpaceProfile
from .spec import (
    DEFAULT_CHROMA,
    DEFAULT_HUE,
    DEFAULT_LIGHTNESS,
    Lab,
    Lch,
    MAX_SRGB_CHROMA,
    PHYSICAL_MAXIMUM_CHROMA,
    Rgb,
    VERSATILE_SRGB_CHROMA,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())
