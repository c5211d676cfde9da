import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Optional

from ..types.color_types import CHANNEL_MAX, HUE_360, RGBTuple
from ..types.range_policy import PolicyLike, resolve_policy
from .numbers import fit_channel, np_fit_channels, np_round_half_away, require_finite, round_half_away


def hsv_to_rgb(h: float, s: float, v: float, policy: Optional[PolicyLike] = None) -> RGBTuple:
    """
    Convert HSV to 8-bit RGB.

    Hue is reduced into [0, 360) before the sector lookup, so -30 and 330
    give the same result. Channels that fall outside [0, 255] (only possible
    when s or v is outside [0, 1]) are fitted with ``policy``.

    Args:
        h: Hue in degrees
        s: Saturation in [0, 1]
        v: Value in [0, 1]
        policy: RangePolicy for out-of-range channels, defaults to DEFAULT_POLICY

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]

    Raises:
        ValueError: h, s or v is NaN or infinite.
    """
    require_finite(h=h, s=s, v=v)
    policy = resolve_policy(policy)

    if s == 0:
        c = fit_channel("v*255", round_half_away(v * CHANNEL_MAX), policy)
        return c, c, c

    h = h % HUE_360
    if h >= HUE_360:
        # float modulo of a tiny negative angle can land on 360.0
        h = 0.0
    hi = math.floor(h / 60)
    f = (h / 60.0) - hi
    m = round_half_away(v * (1.0 - s) * CHANNEL_MAX)
    n = round_half_away(v * (1.0 - s * f) * CHANNEL_MAX)
    k = round_half_away(v * (1.0 - s * (1.0 - f)) * CHANNEL_MAX)
    vmax = round_half_away(v * CHANNEL_MAX)

    if hi == 0:
        r, g, b = vmax, k, m
    elif hi == 1:
        r, g, b = n, vmax, m
    elif hi == 2:
        r, g, b = m, vmax, k
    elif hi == 3:
        r, g, b = m, n, vmax
    elif hi == 4:
        r, g, b = k, m, vmax
    else:
        r, g, b = vmax, m, n

    return (
        fit_channel("r", r, policy),
        fit_channel("g", g, policy),
        fit_channel("b", b, policy),
    )


def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray, policy: Optional[PolicyLike] = None) -> NDArray:
    """
    Vectorized :func:`hsv_to_rgb`.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        v: array-like or scalar, value in [0, 1]
        policy: RangePolicy for out-of-range channels

    Returns:
        rgb: int64 array of shape (..., 3): (r, g, b) in [0, 255]

    Raises:
        ValueError: any element of h, s or v is NaN or infinite.
    """
    policy = resolve_policy(policy)

    h = np.asarray(h, dtype=np.float64)
    s = np.asarray(s, dtype=np.float64)
    v = np.asarray(v, dtype=np.float64)
    require_finite(h=h, s=s, v=v)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    h = np.mod(h, HUE_360)
    h = np.where(h >= HUE_360, 0.0, h)
    hi = np.floor(h / 60)
    f = (h / 60.0) - hi
    m = np_round_half_away(v * (1.0 - s) * CHANNEL_MAX)
    n = np_round_half_away(v * (1.0 - s * f) * CHANNEL_MAX)
    k = np_round_half_away(v * (1.0 - s * (1.0 - f)) * CHANNEL_MAX)
    vmax = np_round_half_away(v * CHANNEL_MAX)

    sectors = [hi == 0, hi == 1, hi == 2, hi == 3, hi == 4]
    r = np.select(sectors, [vmax, n, m, m, k], default=vmax)
    g = np.select(sectors, [k, vmax, vmax, n, m], default=m)
    b = np.select(sectors, [m, m, k, vmax, vmax], default=n)

    # achromatic: every channel is round(v*255)
    gray = s == 0
    r = np.where(gray, vmax, r)
    g = np.where(gray, vmax, g)
    b = np.where(gray, vmax, b)

    return np_fit_channels(np.stack([r, g, b], axis=-1), policy)
