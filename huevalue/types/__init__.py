from .range_policy import RangePolicy, DEFAULT_POLICY, resolve_policy
from .color_types import CHANNEL_MAX, HUE_360, UNIT_MAX

__all__ = [
    'RangePolicy',
    'DEFAULT_POLICY',
    'resolve_policy',
    'CHANNEL_MAX',
    'HUE_360',
    'UNIT_MAX',
]
