"""Basic huevalue usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from huevalue import (
    Color,
    RangePolicy,
    from_argb,
    from_hsv,
    from_rgb,
    np_hsv_to_rgb,
    np_rgb_to_hsv,
)


def demonstrate_colors() -> None:
    # Build a color from RGB; the HSV side is derived immediately.
    accent = from_rgb(255, 128, 64)
    print("RGB:", accent.rgb, "HSV:", accent.hsv, "hex:", accent)

    # And the other way round.
    teal = from_hsv(180, 1.0, 0.5)
    print("HSV -> RGB:", teal.rgb, teal.to_hex_string())

    # Colors are frozen; derive new ones instead of mutating.
    faded = from_argb(255, 10, 20, 30).with_alpha(64)
    print("with alpha:", faded.to_hex_string(include_alpha=True))

    # Hue wraps around the circle.
    print("-30 deg == 330 deg:", from_hsv(-30, 1, 1) == from_hsv(330, 1, 1))


def demonstrate_policies() -> None:
    print("clamp:", Color(300, 0, 0).rgb)
    print("passthrough v=2.0:", from_hsv(0, 0.0, 2.0, policy=RangePolicy.PASSTHROUGH).rgb)
    try:
        from_hsv(0, 1.5, 1.0, policy="strict")
    except ValueError as exc:
        print("strict:", exc)


def demonstrate_arrays() -> None:
    rgb = np.array([[255, 0, 0], [0, 255, 0], [0, 0, 255], [128, 128, 128]])
    hsv = np_rgb_to_hsv(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    print("RGB -> HSV:\n", hsv)
    print("HSV -> RGB:\n", np_hsv_to_rgb(hsv[..., 0], hsv[..., 1], hsv[..., 2]))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_policies()
    demonstrate_arrays()
