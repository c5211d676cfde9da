from __future__ import annotations
from typing import Tuple
import numpy as np

RGBTuple = Tuple[int, int, int]
ARGBTuple = Tuple[int, int, int, int]
HSVTuple = Tuple[int, float, float]
AHSVTuple = Tuple[int, int, float, float]

CHANNEL_MAX = 255
HUE_360 = 360
UNIT_MAX = 1.0

valid_int_types = (int, np.integer)
valid_real_types = (int, float, np.integer, np.floating)


def is_int_value(value) -> bool:
    """True for python/numpy integers, excluding ``bool``."""
    return isinstance(value, valid_int_types) and not isinstance(value, (bool, np.bool_))


def is_real_value(value) -> bool:
    """True for python/numpy reals, excluding ``bool``."""
    return isinstance(value, valid_real_types) and not isinstance(value, (bool, np.bool_))
