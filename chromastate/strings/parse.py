"""Color text -> canonical HSVA."""
import math
import warnings
from typing import Optional

from ..conversions.hex import expand_hex, find_hex_digits, hex_to_unit_rgb
from ..conversions.numbers import clamp01, to_number
from ..conversions.to_hsv import hsl_to_hsv, unit_rgb_to_hsv
from ..errors import ColorParseError, HexFallbackWarning
from ..types.color_types import UnitQuad
from ..types.format_type import BYTE_255, HUE_360, PERCENT_100
from .patterns import HSL_PATTERN, HSV_PATTERN, RGB_PATTERN, WHITESPACE
from .resolvers import NamedColorResolver, matplotlib_resolver

BLACK_HEX = "000"


def strip_whitespace(text: str) -> str:
    return WHITESPACE.sub("", text)


def clamp_hsva(h, s, v, a) -> UnitQuad:
    return clamp01(h), clamp01(s), clamp01(v), clamp01(a)


def hsva_from_rgba(r, g, b, a) -> UnitQuad:
    """Clamp RGBA channels and convert them to HSVA."""
    h, s, v = unit_rgb_to_hsv(clamp01(r), clamp01(g), clamp01(b))
    return h, s, v, clamp01(a)


def hsva_from_hsla(h, s, l, a) -> UnitQuad:
    """Clamp HSLA channels and convert them to HSVA."""
    h, s, v = hsl_to_hsv(clamp01(h), clamp01(s), clamp01(l))
    return h, s, v, clamp01(a)


def parse_hex(text: str) -> UnitQuad:
    """
    Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa`` (the ``#`` is optional).

    The first run of hex digits is used. No digits, or a digit count other
    than 3, 4, 6 or 8, reads as opaque black and emits HexFallbackWarning.
    """
    digits = find_hex_digits(strip_whitespace(text))
    expanded = expand_hex(digits) if digits else None
    if expanded is None:
        warnings.warn(
            f"No usable hex digits in {text!r}, falling back to #{BLACK_HEX}",
            HexFallbackWarning,
            stacklevel=2,
        )
        expanded = expand_hex(BLACK_HEX)
    return hsva_from_rgba(*hex_to_unit_rgb(expanded))


def _hue_alpha(raw: Optional[str]) -> float:
    # Missing, unparsable and zero alpha all read as opaque in hsv()/hsl()
    alpha = to_number(raw or 1)
    if math.isnan(alpha) or not alpha:
        return 1.0
    return alpha


def _rgb_alpha(raw: Optional[str]) -> float:
    return 1.0 if raw is None else to_number(raw)


def parse_color(
    text: Optional[str],
    resolver: Optional[NamedColorResolver] = None,
) -> Optional[UnitQuad]:
    """
    Parse color text into ``(h, s, v, a)`` unit floats.

    Grammars are tried in order: hex (leading ``#``), ``hsv()``/``hsva()``,
    ``hsl()``/``hsla()``. Anything else is handed to ``resolver`` (defaults
    to :func:`matplotlib_resolver`), whose ``rgb()``/``rgba()`` answer is
    parsed in turn.

    Args:
        text: Color text; whitespace anywhere is ignored
        resolver: Named-color resolver used as the last resort

    Returns:
        HSVA tuple, or None when ``text`` is empty

    Raises:
        ColorParseError: If no grammar matches and the resolver cannot help.
    """
    if not text:
        return None

    color = strip_whitespace(text)

    if color.startswith("#"):
        return parse_hex(color)

    match = HSV_PATTERN.search(color)
    if match:
        h, s, v, a = match.groups()
        return clamp_hsva(
            int(h) / HUE_360,
            int(s) / PERCENT_100,
            int(v) / PERCENT_100,
            _hue_alpha(a),
        )

    match = HSL_PATTERN.search(color)
    if match:
        h, s, l, a = match.groups()
        return hsva_from_hsla(
            int(h) / HUE_360,
            int(s) / PERCENT_100,
            int(l) / PERCENT_100,
            _hue_alpha(a),
        )

    resolver = resolver or matplotlib_resolver
    resolved = resolver(color)
    match = RGB_PATTERN.search(strip_whitespace(resolved)) if resolved else None
    if match is None:
        raise ColorParseError(text)

    r, g, b, a = match.groups()
    return hsva_from_rgba(
        int(r) / BYTE_255,
        int(g) / BYTE_255,
        int(b) / BYTE_255,
        _rgb_alpha(a),
    )
