"""RGB/HSL to HSV conversions (unit floats in, unit floats out)."""
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert RGB to HSV.

    Achromatic input (``max == min``) gets hue 0.

    Args:
        r, g, b: Channels in [0, 1]

    Returns:
        (h, s, v) in [0, 1], hue in [0, 1)
    """
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin

    v = cmax
    s = 0.0 if cmax == 0 else delta / cmax

    if cmax == cmin:
        return 0.0, s, v

    if cmax == r:
        h = (g - b) / delta + (6 if g < b else 0)
    elif cmax == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    return h / 6, s, v


def hsl_to_hsv(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert HSL to HSV.

    A zero denominator (black) yields saturation 0 rather than NaN.
    """
    l *= 2
    s *= l if l <= 1 else 2 - l
    denominator = l + s
    s_out = (2 * s) / denominator if denominator else 0.0
    return h, s_out, (l + s) / 2


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized RGB to HSV.

    Args:
        r, g, b: array-like or scalar channels in [0, 1]

    Returns:
        hsv: array of shape (..., 3)
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    cmax = np.maximum.reduce([r, g, b])
    cmin = np.minimum.reduce([r, g, b])
    delta = cmax - cmin

    s = np.zeros_like(cmax)
    np.divide(delta, cmax, out=s, where=cmax > 0)

    safe_delta = np.where(delta > 0, delta, 1.0)
    h = np.where(
        cmax == r,
        (g - b) / safe_delta + np.where(g < b, 6.0, 0.0),
        np.where(
            cmax == g,
            (b - r) / safe_delta + 2,
            (r - g) / safe_delta + 4,
        ),
    )
    h = np.where(delta > 0, h / 6, 0.0)

    return np.stack([h, s, cmax], axis=-1)


def np_hsl_to_hsv(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized HSL to HSV; zero denominators give saturation 0."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    l2 = np.broadcast_to(l, out_shape) * 2
    s = np.broadcast_to(s, out_shape) * np.where(l2 <= 1, l2, 2 - l2)

    denominator = l2 + s
    s_out = np.zeros_like(denominator)
    np.divide(2 * s, denominator, out=s_out, where=denominator != 0)

    return np.stack([h, s_out, denominator / 2], axis=-1)
