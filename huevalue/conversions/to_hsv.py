import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import CHANNEL_MAX, HUE_360, HSVTuple
from .numbers import (
    channel_max,
    channel_min,
    normalize_angle,
    np_normalize_angle,
    np_round_half_away,
    round_half_away,
)


def rgb_to_hsv(r: int, g: int, b: int) -> HSVTuple:
    """
    Convert 8-bit RGB to HSV.

    Args:
        r, g, b: channels in [0, 255]

    Returns:
        Tuple[int, float, float]: (h, s, v) with h in [0, 359] degrees and
        s, v in [0, 1]. Black and grays have h == 0 and s == 0.
    """
    mx = channel_max(r, g, b)
    mn = channel_min(r, g, b)
    R, G, B = float(r), float(g), float(b)

    v = mx / CHANNEL_MAX

    # black: hue and saturation are undefined
    if v == 0:
        return 0, 0.0, 0.0

    s = (mx - mn) / mx
    delta = mx - mn

    if delta == 0:
        # gray: the hue ratio is 0/0
        h = math.nan
    elif mx == R:
        h = 60.0 * ((G - B) / delta)
    elif mx == G:
        h = 60.0 * (2.0 + (B - R) / delta)
    else:
        h = 60.0 * (4.0 + (R - G) / delta)

    return round_half_away(normalize_angle(h)) % HUE_360, s, v


def np_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized :func:`rgb_to_hsv`.

    Args:
        r, g, b: array-like or scalar, channels in [0, 255]

    Returns:
        hsv: float64 array of shape (..., 3): (hue [0, 359], saturation [0, 1], value [0, 1]).
        Hues are whole degrees stored as floats.
    """
    r = np.asarray(r, dtype=np.float64)
    g = np.asarray(g, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    mx = np.maximum.reduce([r, g, b])
    mn = np.minimum.reduce([r, g, b])
    delta = mx - mn

    v = mx / CHANNEL_MAX

    with np.errstate(divide="ignore", invalid="ignore"):
        s = np.where(mx > 0, delta / mx, 0.0)
        h = np.where(
            mx == r,
            60.0 * ((g - b) / delta),
            np.where(
                mx == g,
                60.0 * (2.0 + (b - r) / delta),
                60.0 * (4.0 + (r - g) / delta),
            ),
        )

    h = np.where(mx == 0, 0.0, h)
    h = np_round_half_away(np_normalize_angle(h)) % HUE_360

    return np.stack([h.astype(np.float64), s, v], axis=-1)
