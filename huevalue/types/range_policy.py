# No dependencies
from enum import Enum
from typing import Optional, Union


class RangePolicy(str, Enum):
    """
    How values outside a channel's bounds are treated.

    STRICT rejects them, CLAMP saturates them to the bounds and
    PASSTHROUGH keeps the 8-bit wraparound of the reference formulas.
    """
    STRICT = "strict"
    CLAMP = "clamp"
    PASSTHROUGH = "passthrough"


DEFAULT_POLICY = RangePolicy.CLAMP

PolicyLike = Union[RangePolicy, str, None]


def resolve_policy(policy: Optional[PolicyLike]) -> RangePolicy:
    """Return ``DEFAULT_POLICY`` for None, otherwise coerce to ``RangePolicy``."""
    if policy is None:
        return DEFAULT_POLICY
    if isinstance(policy, RangePolicy):
        return policy
    try:
        return RangePolicy(str(policy).lower())
    except ValueError:
        raise ValueError(
            f"Invalid range policy: {policy!r}. "
            f"Expected one of {[p.value for p in RangePolicy]}"
        ) from None
