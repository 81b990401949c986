import numpy as np

from chromastate.conversions.to_hsl import (
    hsv_to_hsl,
    unit_rgb_to_hsl,
    np_hsv_to_hsl,
    np_unit_rgb_to_hsl,
)
from ..samples import samples_hsv_hsl, samples_rgb_hsv

hsl_tolerance = 1e-9


def test_hsv_to_hsl():
    for (h, s, v), (h_exp, s_exp, l_exp) in samples_hsv_hsl.items():
        h_out, s_out, l_out = hsv_to_hsl(h, s, v)

        assert abs(h_out - h_exp) < hsl_tolerance
        assert abs(s_out - s_exp) < hsl_tolerance
        assert abs(l_out - l_exp) < hsl_tolerance


def test_zero_normalizer_gives_zero_saturation():
    # black: l == 0
    assert hsv_to_hsl(0.2, 0.7, 0.0) == (0.2, 0.0, 0.0)
    # white: l == 1, normalizer 2 - 2l == 0
    assert hsv_to_hsl(0.2, 0.0, 1.0) == (0.2, 0.0, 1.0)


def test_unit_rgb_to_hsl():
    assert unit_rgb_to_hsl(1.0, 0.0, 0.0) == (0.0, 1.0, 0.5)
    h, s, l = unit_rgb_to_hsl(0.0, 0.5, 0.5)
    assert abs(h - 0.5) < hsl_tolerance
    assert abs(s - 1.0) < hsl_tolerance
    assert abs(l - 0.25) < hsl_tolerance


def test_hsv_to_hsl_numpy():
    the_matrix = np.array(list(samples_hsv_hsl.keys()))
    expected = np.array(list(samples_hsv_hsl.values()))
    result = np_hsv_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert not np.isnan(result).any()
    assert np.allclose(result, expected, atol=hsl_tolerance)


def test_unit_rgb_to_hsl_numpy():
    rgb = np.array(list(samples_rgb_hsv.keys()))
    result = np_unit_rgb_to_hsl(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    expected = np.array([unit_rgb_to_hsl(*row) for row in rgb])
    assert np.allclose(result, expected)
