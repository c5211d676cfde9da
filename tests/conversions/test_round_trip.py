from huevalue.conversions.to_hsv import rgb_to_hsv, np_rgb_to_hsv
from huevalue.conversions.to_rgb import hsv_to_rgb, np_hsv_to_rgb
import numpy as np
from ..samples import samples_rgb_hsv, samples_hsv_rgb

# hue is kept in whole degrees: the middle channel of a very saturated
# color can move by up to 255 * 0.5 / 60 before rounding
rgb_tolerance = 2


def test_round_trip_rgb_hsv_samples():
    for (r, g, b) in samples_rgb_hsv:
        assert hsv_to_rgb(*rgb_to_hsv(r, g, b)) == (r, g, b)

def test_round_trip_hsv_rgb_samples():
    for (h, s, v), (r, g, b) in samples_hsv_rgb.items():
        h_out, s_out, v_out = rgb_to_hsv(*hsv_to_rgb(h, s, v))
        if s_out == 0:
            continue
        assert h_out == h
        assert abs(s - s_out) < 1/255
        assert abs(v - v_out) < 1/255

def test_round_trip_rgb_hsv_numpy_grid():
    levels = np.arange(0, 256, 5)
    r, g, b = np.meshgrid(levels, levels, levels, indexing="ij")
    rgb = np.stack([r, g, b], axis=-1)

    hsv = np_rgb_to_hsv(r, g, b)
    rgb_out = np_hsv_to_rgb(hsv[..., 0], hsv[..., 1], hsv[..., 2])

    diff = np.abs(rgb_out - rgb)
    assert diff.max() <= rgb_tolerance

    # the largest and smallest channels survive within one step
    hi = rgb.argmax(axis=-1)[..., None]
    lo = rgb.argmin(axis=-1)[..., None]
    assert np.take_along_axis(diff, hi, axis=-1).max() <= 1
    assert np.take_along_axis(diff, lo, axis=-1).max() <= 1

def test_round_trip_low_saturation_within_one():
    levels = np.arange(0, 256, 3)
    r, g, b = np.meshgrid(levels, levels, levels, indexing="ij")
    rgb = np.stack([r, g, b], axis=-1)
    spread = rgb.max(axis=-1) - rgb.min(axis=-1)
    # with a spread below 120 half a degree of hue is worth less than half a step
    mask = spread < 120

    hsv = np_rgb_to_hsv(r, g, b)
    rgb_out = np_hsv_to_rgb(hsv[..., 0], hsv[..., 1], hsv[..., 2])

    assert np.abs(rgb_out - rgb)[mask].max() <= 1
