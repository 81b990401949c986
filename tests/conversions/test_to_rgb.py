import numpy as np
import pytest

from chromastate.conversions.to_rgb import (
    SECTOR_TABLE,
    hue_sector,
    hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    np_hsv_to_unit_rgb,
    np_hsl_to_unit_rgb,
)
from ..samples import samples_hsv_rgb, samples_hsl_hsv

rgb_tolerance = 1e-9


def test_hsv_to_unit_rgb():
    for (h, s, v), (r_exp, g_exp, b_exp) in samples_hsv_rgb.items():
        r, g, b = hsv_to_unit_rgb(h, s, v)

        assert abs(r - r_exp) < rgb_tolerance
        assert abs(g - g_exp) < rgb_tolerance
        assert abs(b - b_exp) < rgb_tolerance


def test_hue_one_wraps_to_red():
    assert hsv_to_unit_rgb(1.0, 1.0, 1.0) == (1.0, 0.0, 0.0)


@pytest.mark.parametrize("sector, expected", [
    (0, ("v", "t", "p")),
    (1, ("q", "v", "p")),
    (2, ("p", "v", "t")),
    (3, ("p", "q", "v")),
    (4, ("t", "p", "v")),
    (5, ("v", "p", "q")),
])
def test_sector_permutation(sector, expected):
    v, s, f = 1.0, 0.5, 0.25
    named = {
        "v": v,
        "p": v * (1 - s),
        "q": v * (1 - f * s),
        "t": v * (1 - (1 - f) * s),
    }
    h = (sector + f) / 6

    assert hue_sector(h) == (sector, pytest.approx(f))
    assert hsv_to_unit_rgb(h, s, v) == pytest.approx(tuple(named[k] for k in expected))


def test_sector_table_is_a_permutation_of_channels():
    assert len(SECTOR_TABLE) == 6
    for row in SECTOR_TABLE:
        assert 0 in row  # v always wins one channel
        assert len(set(row)) == 3


def test_hsl_to_unit_rgb():
    assert hsl_to_unit_rgb(0.0, 1.0, 0.5) == pytest.approx((1.0, 0.0, 0.0))
    assert hsl_to_unit_rgb(0.0, 0.0, 1.0) == pytest.approx((1.0, 1.0, 1.0))
    assert hsl_to_unit_rgb(0.5, 1.0, 0.25) == pytest.approx((0.0, 0.5, 0.5))


def test_hsv_to_unit_rgb_numpy():
    the_matrix = np.array(list(samples_hsv_rgb.keys()))
    expected = np.array(list(samples_hsv_rgb.values()))
    result = np_hsv_to_unit_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert result.shape == expected.shape
    assert np.allclose(result, expected, atol=rgb_tolerance)


def test_hsv_to_unit_rgb_numpy_matches_scalar():
    h, s, v = np.meshgrid(
        np.linspace(0, 1, 13), np.linspace(0, 1, 5), np.linspace(0, 1, 5), indexing="ij"
    )
    result = np_hsv_to_unit_rgb(h, s, v)

    for idx in np.ndindex(h.shape):
        expected = hsv_to_unit_rgb(float(h[idx]), float(s[idx]), float(v[idx]))
        assert np.allclose(result[idx], expected)


def test_hsv_to_unit_rgb_numpy_scalar_input():
    result = np_hsv_to_unit_rgb(0.0, 1.0, 1.0)
    assert result.shape == (3,)
    assert np.allclose(result, [1.0, 0.0, 0.0])


def test_hsl_to_unit_rgb_numpy():
    hsl = np.array(list(samples_hsl_hsv.keys()))
    result = np_hsl_to_unit_rgb(hsl[..., 0], hsl[..., 1], hsl[..., 2])
    expected = np.array([hsl_to_unit_rgb(*row) for row in hsl])
    assert np.allclose(result, expected)
