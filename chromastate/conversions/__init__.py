"""
Chromastate Color Space Conversions
===================================

Pure conversion functions between HSV, HSL, RGB and hex. Every channel is a
unit float in [0, 1], hue included.

Conversion Functions
-------------------

RGB → HSV:
    unit_rgb_to_hsv(r, g, b)
    np_unit_rgb_to_hsv(r, g, b)

RGB → HSL:
    unit_rgb_to_hsl(r, g, b)
    np_unit_rgb_to_hsl(r, g, b)

HSV → RGB:
    hsv_to_unit_rgb(h, s, v)
        Six-sector permutation table, see SECTOR_TABLE
    np_hsv_to_unit_rgb(h, s, v)

HSL → RGB:
    hsl_to_unit_rgb(h, s, l)
    np_hsl_to_unit_rgb(h, s, l)

HSV ↔ HSL:
    hsv_to_hsl(h, s, v), hsl_to_hsv(h, s, l)
    np_hsv_to_hsl(h, s, v), np_hsl_to_hsv(h, s, l)

Hex:
    unit_rgb_to_hex(r, g, b, a)
    hex_to_unit_rgb(hex_str)
    expand_hex(digits)

High-Level API
-------------
    convert(color, from_space, to_space)
        Tuple converter that also adds or drops alpha

Degenerate cases
----------------
Achromatic RGB gets hue 0. HSV ↔ HSL saturation is 0 whenever its
normalizer is 0 (black, white), never NaN.

Examples
--------
>>> from chromastate.conversions import unit_rgb_to_hsv, hsv_to_unit_rgb
>>> h, s, v = unit_rgb_to_hsv(1.0, 0.5, 0.0)
>>> r, g, b = hsv_to_unit_rgb(h, s, v)
>>>
>>> import numpy as np
>>> from chromastate.conversions import np_unit_rgb_to_hsv
>>> rgb_array = np.array([[1.0, 0.5, 0.0], [0.0, 1.0, 0.5]])
>>> hsv_array = np_unit_rgb_to_hsv(rgb_array[..., 0], rgb_array[..., 1], rgb_array[..., 2])
"""

# RGB → HSV conversions
from .to_hsv import (
    unit_rgb_to_hsv,
    np_unit_rgb_to_hsv,
)

# RGB → HSL conversions
from .to_hsl import (
    unit_rgb_to_hsl,
    np_unit_rgb_to_hsl,
)

# HSV/HSL → RGB conversions
from .to_rgb import (
    SECTOR_TABLE,
    hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    np_hsv_to_unit_rgb,
    np_hsl_to_unit_rgb,
)

# HSV ↔ HSL conversions
from .to_hsv import hsl_to_hsv, np_hsl_to_hsv
from .to_hsl import hsv_to_hsl, np_hsv_to_hsl

# Hex
from .hex import unit_rgb_to_hex, hex_to_unit_rgb, expand_hex

# High-level API
from .wrapper import convert

# Numbers
from .numbers import UnitFloat, clamp01, to_number, round_half_up

__all__ = [
    # RGB → HSV
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',

    # RGB → HSL
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',

    # HSV/HSL → RGB
    'SECTOR_TABLE',
    'hsv_to_unit_rgb',
    'hsl_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'np_hsl_to_unit_rgb',

    # HSV ↔ HSL
    'hsv_to_hsl',
    'hsl_to_hsv',
    'np_hsv_to_hsl',
    'np_hsl_to_hsv',

    # Hex
    'unit_rgb_to_hex',
    'hex_to_unit_rgb',
    'expand_hex',

    # High-level API
    'convert',

    # Numbers
    'UnitFloat',
    'clamp01',
    'to_number',
    'round_half_up',
]
