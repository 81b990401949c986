"""HSV/HSL to RGB conversions (unit floats in, unit floats out)."""
import math
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from .to_hsv import hsl_to_hsv, np_hsl_to_hsv

# Which of (v, p, q, t) lands in r, g, b for each hue sector.
SECTOR_TABLE: Tuple[Tuple[int, int, int], ...] = (
    (0, 3, 1),  # 0: (v, t, p)
    (2, 0, 1),  # 1: (q, v, p)
    (1, 0, 3),  # 2: (p, v, t)
    (1, 2, 0),  # 3: (p, q, v)
    (3, 1, 0),  # 4: (t, p, v)
    (0, 1, 2),  # 5: (v, p, q)
)


def hue_sector(h: float) -> Tuple[int, float]:
    """Return ``(sector, fraction)`` for a unit hue; sector is ``floor(h * 6) mod 6``."""
    h6 = h * 6
    i = math.floor(h6)
    return i % 6, h6 - i


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSV to RGB with the six-sector permutation table.

    Args:
        h: Hue in [0, 1] (1 wraps to red)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    sector, f = hue_sector(h)
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)
    candidates = (v, p, q, t)
    ri, gi, bi = SECTOR_TABLE[sector]
    return candidates[ri], candidates[gi], candidates[bi]


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """Convert HSL to RGB by way of HSV."""
    return hsv_to_unit_rgb(*hsl_to_hsv(h, s, l))


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSV to RGB.

    Args:
        h, s, v: array-like or scalar channels in [0, 1]

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    h6 = h * 6
    i = np.floor(h6)
    f = h6 - i
    sector = i.astype(int) % 6

    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    # candidates[k] matches the (v, p, q, t) ordering used by SECTOR_TABLE
    candidates = np.stack([v, p, q, t], axis=-1)
    table = np.asarray(SECTOR_TABLE)[sector]
    return np.take_along_axis(candidates, table, axis=-1)


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized HSL to RGB by way of HSV."""
    hsv = np_hsl_to_hsv(h, s, l)
    return np_hsv_to_unit_rgb(hsv[..., 0], hsv[..., 1], hsv[..., 2])
