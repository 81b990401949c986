"""HSV/RGB to HSL conversions (unit floats in, unit floats out)."""
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv


def hsv_to_hsl(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSV to HSL.

    When the saturation normalizer ``l <= 1 ? l : 2 - l`` is 0 (black or
    white) the HSL saturation is 0.
    """
    l = (2 - s) * v
    normalizer = l if l <= 1 else 2 - l
    s_out = (s * v) / normalizer if normalizer else 0.0
    return h, s_out, l / 2


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to HSL by way of HSV."""
    return hsv_to_hsl(*unit_rgb_to_hsv(r, g, b))


def np_hsv_to_hsl(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized HSV to HSL."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    l = (2 - s) * v
    normalizer = np.where(l <= 1, l, 2 - l)
    s_out = np.zeros_like(l)
    np.divide(s * v, normalizer, out=s_out, where=normalizer != 0)

    return np.stack([h, s_out, l / 2], axis=-1)


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized RGB to HSL by way of HSV."""
    hsv = np_unit_rgb_to_hsv(r, g, b)
    return np_hsv_to_hsl(hsv[..., 0], hsv[..., 1], hsv[..., 2])
