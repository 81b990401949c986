"""Canonical HSVA -> color text."""
from typing import List

from ..conversions.hex import unit_rgb_to_hex
from ..conversions.numbers import format_number, round_half_up, round_to
from ..conversions.to_hsl import hsv_to_hsl
from ..conversions.to_rgb import hsv_to_unit_rgb
from ..types.color_types import UnitQuad
from ..types.format_type import (
    ALPHA_DECIMALS,
    BYTE_255,
    HUE_360,
    PERCENT_100,
    StringFormat,
)

OPAQUE_HEX_ALPHA = "ff"


def _percent(x: float) -> str:
    return f"{round_half_up(x * PERCENT_100)}%"


def _channels(space: str, h: float, s: float, v: float) -> List[str]:
    if space == "rgb":
        return [str(round_half_up(c * BYTE_255)) for c in hsv_to_unit_rgb(h, s, v)]
    if space == "hsl":
        h, s, v = hsv_to_hsl(h, s, v)
    return [str(round_half_up(h * HUE_360)), _percent(s), _percent(v)]


def format_color(hsva: UnitQuad, fmt: "StringFormat | str | None" = None) -> str:
    """
    Render ``(h, s, v, a)`` as text.

    ``hex`` drops an opaque ``ff`` alpha, ``hexa`` keeps all eight digits.
    ``rgb``/``hsl``/``hsv`` only grow an alpha segment (and the trailing
    ``a`` on the name) for translucent colors; ``rgba``/``hsla``/``hsva``
    always carry one. Unknown formats render as ``hex``.
    """
    fmt = StringFormat.coerce(fmt)
    h, s, v, a = hsva

    if fmt in (StringFormat.HEX, StringFormat.HEXA):
        value = unit_rgb_to_hex(*hsv_to_unit_rgb(h, s, v), a)
        if fmt is StringFormat.HEX and value[7:] == OPAQUE_HEX_ALPHA:
            return value[:7]
        return value

    alpha = round_to(a, ALPHA_DECIMALS)
    show_alpha = fmt.forces_alpha or alpha != 1
    parts = _channels(fmt.space, h, s, v)
    if show_alpha:
        parts.append(format_number(alpha))
    name = fmt.space + ("a" if show_alpha else "")
    return f"{name}({', '.join(parts)})"
