import itertools

import numpy as np

from chromastate.conversions.to_hsv import unit_rgb_to_hsv, hsl_to_hsv, np_unit_rgb_to_hsv
from chromastate.conversions.to_rgb import hsv_to_unit_rgb, np_hsv_to_unit_rgb
from chromastate.conversions.to_hsl import hsv_to_hsl
from ..samples import samples_hsv_hsl

rgb_tolerance = 1e-9
hsv_tolerance = 1e-9

grid = np.linspace(0, 1, 11)


def test_round_trip_rgb_hsv_rgb():
    for r, g, b in itertools.product(grid, repeat=3):
        r_out, g_out, b_out = hsv_to_unit_rgb(*unit_rgb_to_hsv(r, g, b))

        assert abs(r - r_out) < rgb_tolerance
        assert abs(g - g_out) < rgb_tolerance
        assert abs(b - b_out) < rgb_tolerance


def test_round_trip_hsv_hsl_hsv():
    for h, s, v in itertools.product(grid, repeat=3):
        h_out, s_out, v_out = hsl_to_hsv(*hsv_to_hsl(h, s, v))

        # black collapses saturation to 0
        s_exp = 0.0 if v == 0 else s
        assert abs(h - h_out) < hsv_tolerance
        assert abs(s_exp - s_out) < hsv_tolerance
        assert abs(v - v_out) < hsv_tolerance


def test_round_trip_hsl_samples():
    for (h, s, v), hsl in samples_hsv_hsl.items():
        assert np.allclose(hsl_to_hsv(*hsl), (h, s if v else 0.0, v))


def test_round_trip_rgb_hsv_rgb_numpy():
    r, g, b = np.meshgrid(grid, grid, grid, indexing="ij")
    hsv = np_unit_rgb_to_hsv(r, g, b)
    rgb = np_hsv_to_unit_rgb(hsv[..., 0], hsv[..., 1], hsv[..., 2])

    assert np.allclose(rgb, np.stack([r, g, b], axis=-1), atol=rgb_tolerance)
