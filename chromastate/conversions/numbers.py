import math
from typing import Any

RealNumber = int | float


def to_number(value: Any) -> float:
    """
    Coerce an arbitrary value to a float the way loosely typed color input expects.

    Numbers and booleans convert directly, numeric strings are parsed, ``None``
    and blank strings count as 0. Anything else becomes NaN.
    """
    if value is None:
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def clamp01(value: Any) -> float:
    """Clamp ``value`` into ``[0, 1]``; non-numeric values and NaN become 0."""
    number = to_number(value)
    if math.isnan(number):
        return 0.0
    # max(0.0, -0.0) keeps -0.0, so normalise through the addition
    return max(min(number, 1.0), 0.0) + 0.0


def round_half_up(value: RealNumber) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(value + 0.5)


def round_to(value: RealNumber, decimals: int) -> float:
    """Round to ``decimals`` places with :func:`round_half_up` semantics."""
    factor = 10 ** decimals
    return round_half_up(value * factor) / factor


def format_number(value: RealNumber) -> str:
    """Render without a trailing ``.0`` for integral values (``1.0`` -> ``"1"``)."""
    return f"{value:g}"


class UnitFloat(float):
    """A floating-point number clamped to the inclusive range ``[0, 1]``."""

    def __new__(cls, value: Any):
        return super().__new__(cls, clamp01(value))

    def __repr__(self):
        return f"UnitFloat({float(self)})"
