"""
huevalue Color Value
====================

An immutable color that carries both its RGB and its HSV representation.

Usage
-----
>>> from huevalue.colors import Color, from_rgb, from_hsv
>>>
>>> orange = from_rgb(255, 128, 0)
>>> orange.hsv             # (30, 1.0, 1.0)
>>> str(orange)            # '#FF8000'
>>>
>>> teal = from_hsv(180, 1.0, 0.5)
>>> teal.rgb               # (0, 128, 128)
>>> teal.with_alpha(64).to_hex_string(include_alpha=True)   # '#00808040'

Notes
-----
- Instances are frozen; assigning to any attribute raises AttributeError
- ``with_rgb`` / ``with_hsv`` / ``with_alpha`` return new instances
- Out-of-range input is handled by a RangePolicy (CLAMP by default)
"""

from .color_base import ColorBase
from .color import Color, from_rgb, from_argb, from_hsv, from_ahsv


__all__ = ['ColorBase', 'Color', 'from_rgb', 'from_argb', 'from_hsv', 'from_ahsv']
