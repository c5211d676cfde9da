"""huevalue: RGB <-> HSV color values."""

from .colors.color_base import ColorBase
from .colors.color import Color, from_rgb, from_argb, from_hsv, from_ahsv
from .conversions import (
    rgb_to_hsv,
    hsv_to_rgb,
    np_rgb_to_hsv,
    np_hsv_to_rgb,
)
from .types.range_policy import RangePolicy, DEFAULT_POLICY

__version__ = "0.1.0"

__all__ = [
    'Color',
    'ColorBase',
    'from_rgb',
    'from_argb',
    'from_hsv',
    'from_ahsv',
    'rgb_to_hsv',
    'hsv_to_rgb',
    'np_rgb_to_hsv',
    'np_hsv_to_rgb',
    'RangePolicy',
    'DEFAULT_POLICY',
]
