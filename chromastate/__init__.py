"""Chromastate: a mutable color model with HSV/HSL/RGB/hex conversions."""

from .colors import Color, EventEmitter
from .conversions import (
    hsl_to_hsv,
    hsv_to_hsl,
    unit_rgb_to_hsv,
    unit_rgb_to_hsl,
    hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    unit_rgb_to_hex,
    hex_to_unit_rgb,
    np_hsl_to_hsv,
    np_hsv_to_hsl,
    np_unit_rgb_to_hsv,
    np_unit_rgb_to_hsl,
    np_hsv_to_unit_rgb,
    np_hsl_to_unit_rgb,
    convert,
)
from .errors import ColorError, ColorParseError, HexFallbackWarning
from .strings import format_color, parse_color, matplotlib_resolver, no_resolver
from .types.format_type import StringFormat

__version__ = "0.1.0"

__all__ = [
    "Color",
    "EventEmitter",
    "hsl_to_hsv",
    "hsv_to_hsl",
    "unit_rgb_to_hsv",
    "unit_rgb_to_hsl",
    "hsv_to_unit_rgb",
    "hsl_to_unit_rgb",
    "unit_rgb_to_hex",
    "hex_to_unit_rgb",
    "np_hsl_to_hsv",
    "np_hsv_to_hsl",
    "np_unit_rgb_to_hsv",
    "np_unit_rgb_to_hsl",
    "np_hsv_to_unit_rgb",
    "np_hsl_to_unit_rgb",
    "convert",
    "ColorError",
    "ColorParseError",
    "HexFallbackWarning",
    "format_color",
    "parse_color",
    "matplotlib_resolver",
    "no_resolver",
    "StringFormat",
]
