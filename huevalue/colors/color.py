from __future__ import annotations
from typing import ClassVar, Optional, Self, Tuple

from .color_base import ColorBase
from ..conversions import rgb_to_hsv, hsv_to_rgb
from ..conversions.numbers import fit_channel, fit_hue, fit_unit
from ..types.color_types import CHANNEL_MAX, ARGBTuple, AHSVTuple, HSVTuple, RGBTuple
from ..types.range_policy import PolicyLike, RangePolicy, resolve_policy


class Color(ColorBase):
    """
    A color holding both its RGB and its HSV representation.

    Instances are immutable. Whichever representation is given, the other one
    is derived at construction time, so both describe the same color. The one
    exception is ``RangePolicy.PASSTHROUGH``: saturation and value outside
    [0, 1] are stored as given while the channels derived from them wrap like
    an unsigned 8-bit cast, so the two triples may disagree. Such a color
    still reproduces its own channels through :meth:`make_rgb`.

    The policy a color was built with is remembered and is the default for
    every color derived from it (``make_rgb``, ``with_*``). It is not part of
    equality.

    Use the ``from_*`` constructors, or ``Color(r, g, b, a)`` for the RGB case.

    Attributes:
        a: alpha in [0, 255], carried along and never computed
        r, g, b: channels in [0, 255]
        h: hue in whole degrees [0, 359], 0 for black and grays
        s, v: saturation and value in [0.0, 1.0]
        policy: RangePolicy used to build this color
    """
    __slots__ = ('_a', '_r', '_g', '_b', '_h', '_s', '_v', '_policy')

    fields: ClassVar[Tuple[str, ...]] = ('a', 'r', 'g', 'b', 'h', 's', 'v')
    state: ClassVar[Tuple[str, ...]] = ('policy',)

    def __init__(self, r: int = 0, g: int = 0, b: int = 0, a: int = CHANNEL_MAX, *,
                 policy: Optional[PolicyLike] = None) -> None:
        policy = resolve_policy(policy)
        a = fit_channel("a", a, policy)
        r = fit_channel("r", r, policy)
        g = fit_channel("g", g, policy)
        b = fit_channel("b", b, policy)
        h, s, v = rgb_to_hsv(r, g, b)
        self._assign(a=a, r=r, g=g, b=b, h=h, s=s, v=v, policy=policy)

    @classmethod
    def _build(cls, a: int, r: int, g: int, b: int, h: int, s: float, v: float,
               policy: RangePolicy) -> Self:
        # values are already fitted with ``policy``
        obj = cls.__new__(cls)
        obj._assign(a=a, r=r, g=g, b=b, h=h, s=s, v=v, policy=policy)
        return obj

    def _policy_or_own(self, policy: Optional[PolicyLike]) -> RangePolicy:
        return self._policy if policy is None else resolve_policy(policy)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, *, policy: Optional[PolicyLike] = None) -> Self:
        """Opaque color from red, green, blue."""
        return cls.from_argb(CHANNEL_MAX, r, g, b, policy=policy)

    @classmethod
    def from_argb(cls, a: int, r: int, g: int, b: int, *, policy: Optional[PolicyLike] = None) -> Self:
        """Color from alpha, red, green, blue; hue/saturation/value are derived."""
        return cls(r, g, b, a, policy=policy)

    @classmethod
    def from_hsv(cls, h: int, s: float, v: float, *, policy: Optional[PolicyLike] = None) -> Self:
        """Opaque color from hue, saturation, value."""
        return cls.from_ahsv(CHANNEL_MAX, h, s, v, policy=policy)

    @classmethod
    def from_ahsv(cls, a: int, h: int, s: float, v: float, *, policy: Optional[PolicyLike] = None) -> Self:
        """
        Color from alpha, hue, saturation, value; red/green/blue are derived.

        Hue may be any integer and is stored reduced into [0, 360). Saturation
        and value outside [0, 1] are handled by ``policy``.
        """
        policy = resolve_policy(policy)
        a = fit_channel("a", a, policy)
        h = fit_hue(h)
        s = fit_unit("s", s, policy)
        v = fit_unit("v", v, policy)
        r, g, b = hsv_to_rgb(h, s, v, policy)
        return cls._build(a, r, g, b, h, s, v, policy)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def a(self) -> int:
        return self._a

    @property
    def r(self) -> int:
        return self._r

    @property
    def g(self) -> int:
        return self._g

    @property
    def b(self) -> int:
        return self._b

    @property
    def h(self) -> int:
        return self._h

    @property
    def s(self) -> float:
        return self._s

    @property
    def v(self) -> float:
        return self._v

    @property
    def policy(self) -> RangePolicy:
        return self._policy

    @property
    def rgb(self) -> RGBTuple:
        return self._r, self._g, self._b

    @property
    def argb(self) -> ARGBTuple:
        return self._a, self._r, self._g, self._b

    @property
    def hsv(self) -> HSVTuple:
        return self._h, self._s, self._v

    @property
    def ahsv(self) -> AHSVTuple:
        return self._a, self._h, self._s, self._v

    # ------------------ DERIVED COLORS ------------------
    def make_hsv(self) -> Self:
        """Return a copy whose hue/saturation/value are recomputed from its RGB."""
        h, s, v = rgb_to_hsv(self._r, self._g, self._b)
        return self._build(self._a, self._r, self._g, self._b, h, s, v, self._policy)

    def make_rgb(self, *, policy: Optional[PolicyLike] = None) -> Self:
        """
        Return a copy whose red/green/blue are recomputed from its HSV.

        With the color's own policy, a color built from HSV comes back
        unchanged. A color built from RGB reproduces its channels within ±2,
        since hue is kept in whole degrees.
        """
        policy = self._policy_or_own(policy)
        r, g, b = hsv_to_rgb(self._h, self._s, self._v, policy)
        return self._build(self._a, r, g, b, self._h, self._s, self._v, policy)

    def with_alpha(self, alpha: int, *, policy: Optional[PolicyLike] = None) -> Self:
        """Return a copy with a different alpha; both representations are kept."""
        policy = self._policy_or_own(policy)
        a = fit_channel("a", alpha, policy)
        return self._build(a, self._r, self._g, self._b, self._h, self._s, self._v, policy)

    def with_rgb(self, r: int, g: int, b: int, *, policy: Optional[PolicyLike] = None) -> Self:
        return self.from_argb(self._a, r, g, b, policy=self._policy_or_own(policy))

    def with_hsv(self, h: int, s: float, v: float, *, policy: Optional[PolicyLike] = None) -> Self:
        return self.from_ahsv(self._a, h, s, v, policy=self._policy_or_own(policy))

    # ------------------ FORMATTING ------------------
    def to_hex_string(self, include_alpha: bool = False) -> str:
        """
        Format as ``#RRGGBB`` (or ``#RRGGBBAA``), uppercase, two digits per channel.
        """
        text = f"#{self._r:02X}{self._g:02X}{self._b:02X}"
        if include_alpha:
            text += f"{self._a:02X}"
        return text

    def __str__(self) -> str:
        return self.to_hex_string()


def from_rgb(r: int, g: int, b: int, *, policy: Optional[PolicyLike] = None) -> Color:
    return Color.from_rgb(r, g, b, policy=policy)


def from_argb(a: int, r: int, g: int, b: int, *, policy: Optional[PolicyLike] = None) -> Color:
    return Color.from_argb(a, r, g, b, policy=policy)


def from_hsv(h: int, s: float, v: float, *, policy: Optional[PolicyLike] = None) -> Color:
    return Color.from_hsv(h, s, v, policy=policy)


def from_ahsv(a: int, h: int, s: float, v: float, *, policy: Optional[PolicyLike] = None) -> Color:
    return Color.from_ahsv(a, h, s, v, policy=policy)
