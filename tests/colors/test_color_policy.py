import math
import os
import pickle
import pytest
from huevalue import from_rgb, from_argb, from_hsv, from_ahsv, RangePolicy, DEFAULT_POLICY


def test_default_policy_is_clamp():
    assert DEFAULT_POLICY is RangePolicy.CLAMP

def test_clamp_rgb_inputs():
    color = from_argb(999, 300, -5, 10)
    assert color.argb == (255, 255, 0, 10)
    # 60 * (-10/255) ~ -2.35 -> 357.65
    assert color.h == 358

def test_clamp_hsv_inputs():
    color = from_hsv(0, 1.5, 1.0)
    assert color.s == 1.0
    assert color.rgb == (255, 0, 0)

    color = from_hsv(0, 0.0, 2.0)
    assert color.v == 1.0
    assert color.rgb == (255, 255, 255)

def test_strict_rejects_out_of_range():
    with pytest.raises(ValueError):
        from_rgb(256, 0, 0, policy=RangePolicy.STRICT)
    with pytest.raises(ValueError):
        from_argb(-1, 0, 0, 0, policy="strict")
    with pytest.raises(ValueError):
        from_hsv(0, 1.5, 1.0, policy="strict")
    with pytest.raises(ValueError):
        from_ahsv(255, 0, 0.5, -0.1, policy="STRICT")

def test_strict_accepts_any_hue():
    assert from_hsv(-30, 1.0, 1.0, policy="strict").h == 330

def test_passthrough_wraps_rgb_inputs():
    with pytest.warns(RuntimeWarning):
        color = from_rgb(256, 0, 0, policy=RangePolicy.PASSTHROUGH)
    assert color.rgb == (0, 0, 0)

def test_passthrough_keeps_hsv_inputs():
    with pytest.warns(RuntimeWarning):
        color = from_hsv(0, 0.0, 2.0, policy="passthrough")
    assert color.v == 2.0
    assert color.rgb == (254, 254, 254)

def test_in_range_values_never_warn(recwarn):
    from_rgb(255, 255, 255, policy="passthrough")
    from_hsv(359, 1.0, 1.0, policy="passthrough")
    assert len(recwarn) == 0

def test_invalid_policy_name():
    with pytest.raises(ValueError):
        from_rgb(0, 0, 0, policy="wrap")

def test_type_errors():
    with pytest.raises(TypeError):
        from_rgb(1.5, 0, 0)
    with pytest.raises(TypeError):
        from_rgb(True, 0, 0)
    with pytest.raises(TypeError):
        from_hsv(10.5, 1.0, 1.0)
    with pytest.raises(TypeError):
        from_hsv(10, "1", 1.0)

def test_non_finite_fractions_rejected():
    with pytest.raises(ValueError):
        from_hsv(0, math.nan, 1.0)
    with pytest.raises(ValueError):
        from_hsv(0, 1.0, math.inf, policy="passthrough")

def test_passthrough_wraps_chromatic_channels():
    with pytest.warns(RuntimeWarning):
        color = from_hsv(0, 1.5, 1.0, policy="passthrough")
    assert color.s == 1.5
    assert color.rgb == (255, 128, 128)

def test_color_remembers_its_policy():
    assert from_rgb(1, 2, 3).policy is DEFAULT_POLICY
    assert from_hsv(0, 1.0, 1.0, policy="strict").policy is RangePolicy.STRICT
    # the policy does not take part in equality
    assert from_rgb(1, 2, 3, policy="strict") == from_rgb(1, 2, 3)

def test_passthrough_color_reproduces_itself():
    with pytest.warns(RuntimeWarning):
        color = from_hsv(0, 1.0, 2.0, policy="passthrough")
    assert color.rgb == (254, 0, 0)
    assert color.v == 2.0

    with pytest.warns(RuntimeWarning):
        rebuilt = color.make_rgb()
    assert rebuilt == color
    assert rebuilt.policy is RangePolicy.PASSTHROUGH

    # an explicit policy still wins
    assert color.make_rgb(policy="clamp").rgb == (255, 0, 0)

def test_derived_colors_keep_policy():
    with pytest.warns(RuntimeWarning):
        color = from_hsv(0, 1.0, 2.0, policy="passthrough")

    assert color.with_alpha(10).policy is RangePolicy.PASSTHROUGH
    assert color.make_hsv().policy is RangePolicy.PASSTHROUGH

    with pytest.warns(RuntimeWarning):
        assert color.with_rgb(300, 0, 0).rgb == (44, 0, 0)
    with pytest.warns(RuntimeWarning):
        assert color.with_hsv(0, 0.0, 2.0).rgb == (254, 254, 254)

    strict = from_rgb(1, 2, 3, policy="strict")
    with pytest.raises(ValueError):
        strict.with_rgb(256, 0, 0)
    with pytest.raises(ValueError):
        strict.with_alpha(-1)
    assert strict.with_rgb(256, 0, 0, policy="clamp").r == 255

def test_pickle_keeps_policy():
    color = from_rgb(1, 2, 3, policy="strict")
    restored = pickle.loads(pickle.dumps(color))
    assert restored == color
    assert restored.policy is RangePolicy.STRICT

def test_wrap_warning_points_at_caller():
    with pytest.warns(RuntimeWarning) as record:
        from_hsv(0, 0.0, 2.0, policy="passthrough")
    assert os.path.basename(record[0].filename) == os.path.basename(__file__)

    with pytest.warns(RuntimeWarning) as record:
        from_argb(256, 0, 0, 0, policy="passthrough")
    assert os.path.basename(record[0].filename) == os.path.basename(__file__)
