"""
huevalue Color Space Conversions
================================

RGB <-> HSV conversion utilities with both scalar and vectorized (numpy)
implementations.

Conversion Functions
-------------------

RGB -> HSV:
    rgb_to_hsv(r, g, b)
        Scalar 8-bit RGB to (int hue, float saturation, float value)
    np_rgb_to_hsv(r, g, b)
        Vectorized RGB to HSV conversion

HSV -> RGB:
    hsv_to_rgb(h, s, v, policy=None)
        Scalar HSV to 8-bit RGB
    np_hsv_to_rgb(h, s, v, policy=None)
        Vectorized HSV to RGB conversion

Helpers
-------
    round_half_away(n)      round to nearest, ties away from zero
    normalize_angle(h)      NaN -> 0, negative angles shifted by whole turns
    wrap_hue(h)             floored modulo into [0, 360)
    channel_max / channel_min

Range Policy
------------
`hsv_to_rgb` and `np_hsv_to_rgb` accept a `policy` (see
`huevalue.types.RangePolicy`) deciding what happens to channels outside
[0, 255]: raise (STRICT), saturate (CLAMP, default) or wrap like an
unsigned 8-bit cast (PASSTHROUGH, emits a RuntimeWarning).

Examples
--------
>>> from huevalue.conversions import rgb_to_hsv, hsv_to_rgb
>>> rgb_to_hsv(255, 128, 0)
(30, 1.0, 1.0)
>>> hsv_to_rgb(30, 1.0, 1.0)
(255, 128, 0)
>>>
>>> import numpy as np
>>> from huevalue.conversions import np_rgb_to_hsv
>>> rgb = np.array([[255, 0, 0], [0, 255, 0]])
>>> hsv = np_rgb_to_hsv(rgb[..., 0], rgb[..., 1], rgb[..., 2])
"""

# RGB -> HSV conversions
from .to_hsv import (
    rgb_to_hsv,
    np_rgb_to_hsv,
)

# HSV -> RGB conversions
from .to_rgb import (
    hsv_to_rgb,
    np_hsv_to_rgb,
)

# Helpers
from .numbers import (
    round_half_away,
    np_round_half_away,
    normalize_angle,
    np_normalize_angle,
    wrap_hue,
    channel_max,
    channel_min,
)

__all__ = [
    # RGB -> HSV
    'rgb_to_hsv',
    'np_rgb_to_hsv',

    # HSV -> RGB
    'hsv_to_rgb',
    'np_hsv_to_rgb',

    # Helpers
    'round_half_away',
    'np_round_half_away',
    'normalize_angle',
    'np_normalize_angle',
    'wrap_hue',
    'channel_max',
    'channel_min',
]
