"""Hex string <-> unit RGBA."""
import re
from typing import Optional, Tuple

from ..types.format_type import BYTE_255
from .numbers import round_half_up

HEX_DIGITS = re.compile(r"([0-9a-f]+)", re.IGNORECASE)


def unit_rgb_to_hex(r: float, g: float, b: float, a: float = 1.0) -> str:
    """Render unit RGBA as ``#rrggbbaa`` (lowercase, zero padded)."""
    return "#" + "".join(f"{round_half_up(c * BYTE_255):02x}" for c in (r, g, b, a))


def expand_hex(digits: str) -> Optional[str]:
    """
    Expand a run of hex digits to the eight digit ``rrggbbaa`` form.

    ``rgb`` gains an opaque alpha, ``rgba`` doubles every digit, ``rrggbb``
    gains ``ff``. Any other length returns None.
    """
    if len(digits) == 3:
        digits += "f"
    if len(digits) == 4:
        return "".join(d * 2 for d in digits)
    if len(digits) == 6:
        return digits + "ff"
    if len(digits) == 8:
        return digits
    return None


def find_hex_digits(text: str) -> Optional[str]:
    """Return the first run of hex digits in ``text``, or None."""
    match = HEX_DIGITS.search(text)
    return match.group(1) if match else None


def hex_to_unit_rgb(hex_str: str) -> Tuple[float, float, float, float]:
    """
    Parse eight hex digits (optionally ``#``-prefixed) to unit RGBA.

    Raises:
        ValueError: If ``hex_str`` is not exactly eight hex digits.
    """
    digits = hex_str.lstrip("#")
    if len(digits) != 8:
        raise ValueError(f"Expected 8 hex digits, got {hex_str!r}")
    r, g, b, a = (int(digits[i:i + 2], 16) / BYTE_255 for i in range(0, 8, 2))
    return r, g, b, a
