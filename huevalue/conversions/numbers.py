import inspect
import math
import os
import warnings
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import CHANNEL_MAX, HUE_360, UNIT_MAX, is_int_value, is_real_value
from ..types.range_policy import RangePolicy

# huevalue/ with a trailing separator
_PACKAGE_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "")


def round_half_away(n: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    if n < 0:
        return int(math.ceil(n - 0.5))
    return int(math.floor(n + 0.5))


def np_round_half_away(n: NDArray) -> NDArray:
    """Vectorized: round to nearest, ties away from zero. Returns int64."""
    n = np.asarray(n, dtype=np.float64)
    return np.where(n < 0, np.ceil(n - 0.5), np.floor(n + 0.5)).astype(np.int64)


def channel_max(*values: int) -> float:
    return float(max(values))


def channel_min(*values: int) -> float:
    return float(min(values))


def normalize_angle(h: float) -> float:
    """
    Map a hue angle to a non-negative angle.

    NaN maps to 0. Negative angles are shifted by whole turns until they
    are non-negative; angles already >= 0 are returned unchanged (they may
    still be >= 360, callers reduce modulo 360 after rounding).
    """
    if math.isnan(h):
        return 0.0
    if h < 0:
        # same result as adding 360 until non-negative
        return h % HUE_360
    return h


def np_normalize_angle(h: NDArray) -> NDArray:
    h = np.asarray(h, dtype=np.float64)
    h = np.where(np.isnan(h), 0.0, h)
    return np.where(h < 0, np.mod(h, HUE_360), h)


def wrap_hue(h: int) -> int:
    """Floored modulo of an integer hue into [0, 360)."""
    return h % HUE_360


# ---------------------------------------------------------------------------
# Range policy helpers
# ---------------------------------------------------------------------------

def _external_stacklevel() -> int:
    """
    ``stacklevel`` for a ``warnings.warn`` issued by the calling function that
    points at the first frame outside this package, however deep the
    constructor chain that led to it.
    """
    frame = inspect.currentframe()
    level = 0
    try:
        while frame is not None and os.path.abspath(frame.f_code.co_filename).startswith(_PACKAGE_DIR):
            frame = frame.f_back
            level += 1
    finally:
        del frame
    return level


def _warn_wrapped(name: str, value, wrapped) -> None:
    warnings.warn(
        f"{name}={value} is outside [0, {CHANNEL_MAX}] and wrapped to {wrapped}",
        RuntimeWarning,
        stacklevel=_external_stacklevel(),
    )


def fit_channel(name: str, value: int, policy: RangePolicy) -> int:
    """
    Bring an 8-bit channel value into [0, 255] according to ``policy``.

    Raises:
        TypeError: value is not an integer.
        ValueError: value is out of range under ``RangePolicy.STRICT``.
    """
    if not is_int_value(value):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    value = int(value)
    if 0 <= value <= CHANNEL_MAX:
        return value
    if policy is RangePolicy.STRICT:
        raise ValueError(f"{name} must be in [0, {CHANNEL_MAX}], got {value}")
    if policy is RangePolicy.CLAMP:
        return max(0, min(value, CHANNEL_MAX))
    wrapped = value & 0xFF
    _warn_wrapped(name, value, wrapped)
    return wrapped


def fit_unit(name: str, value: float, policy: RangePolicy) -> float:
    """
    Validate a saturation/value fraction according to ``policy``.

    PASSTHROUGH keeps out-of-range fractions as given; the channels derived
    from them are fitted later by :func:`fit_channel`.

    Raises:
        TypeError: value is not a real number.
        ValueError: value is not finite, or out of range under STRICT.
    """
    if not is_real_value(value):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    if 0.0 <= value <= UNIT_MAX:
        return value
    if policy is RangePolicy.STRICT:
        raise ValueError(f"{name} must be in [0.0, {UNIT_MAX}], got {value}")
    if policy is RangePolicy.CLAMP:
        return max(0.0, min(value, UNIT_MAX))
    return value


def fit_hue(value: int) -> int:
    """Hue is cyclic: any integer is accepted and wrapped into [0, 360)."""
    if not is_int_value(value):
        raise TypeError(f"h must be an integer, got {type(value).__name__}")
    return wrap_hue(int(value))


def np_fit_channels(values: NDArray, policy: RangePolicy) -> NDArray:
    """Vectorized :func:`fit_channel` for computed channel arrays."""
    values = np.asarray(values, dtype=np.int64)
    out_of_range = (values < 0) | (values > CHANNEL_MAX)
    if not out_of_range.any():
        return values
    if policy is RangePolicy.STRICT:
        raise ValueError(
            f"{int(out_of_range.sum())} channel value(s) outside [0, {CHANNEL_MAX}]"
        )
    if policy is RangePolicy.CLAMP:
        return np.clip(values, 0, CHANNEL_MAX)
    warnings.warn(
        f"{int(out_of_range.sum())} channel value(s) outside [0, {CHANNEL_MAX}] wrapped",
        RuntimeWarning,
        stacklevel=_external_stacklevel(),
    )
    return values & 0xFF


def require_finite(**values: float) -> None:
    """
    Raise ``ValueError`` naming the first non-finite input.

    Accepts scalars or arrays; an array fails if any element is NaN or infinite.
    """
    for name, value in values.items():
        if not np.isfinite(value).all():
            raise ValueError(f"{name} must be finite, got {value}")
