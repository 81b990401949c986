"""
Named-color resolvers.

A resolver receives color text that none of the built-in grammars recognised
and returns it in ``rgb(r,g,b)`` / ``rgba(r,g,b,a)`` form (channels 0-255),
or None when it cannot resolve the text.
"""
from typing import Callable, Optional

import matplotlib.colors as mcolors

from ..conversions.numbers import format_number, round_half_up
from ..types.format_type import BYTE_255
from .patterns import RGB_PATTERN

NamedColorResolver = Callable[[str], Optional[str]]


def matplotlib_resolver(text: str) -> Optional[str]:
    """
    Resolve CSS4/X11 names, ``tab:`` colors and other matplotlib color specs.

    Text already in ``rgb()``/``rgba()`` form is returned as is.
    """
    if RGB_PATTERN.search(text):
        return text
    try:
        r, g, b, a = mcolors.to_rgba(text)
    except (ValueError, TypeError):
        return None
    channels = ",".join(str(round_half_up(c * BYTE_255)) for c in (r, g, b))
    if a == 1:
        return f"rgb({channels})"
    return f"rgba({channels},{format_number(a)})"


def no_resolver(text: str) -> Optional[str]:
    """Resolver that never resolves anything."""
    return None
