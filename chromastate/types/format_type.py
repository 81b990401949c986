# No dependencies
from __future__ import annotations
from enum import Enum


class StringFormat(str, Enum):
    HEX = "hex"
    HEXA = "hexa"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    HSV = "hsv"
    HSVA = "hsva"

    @property
    def space(self) -> str:
        """Color space rendered by this format ("hex" for both hex variants)."""
        return self.value.rstrip("a") if self.value != "hexa" else "hex"

    @property
    def forces_alpha(self) -> bool:
        """True for the a-suffixed formats that always carry an alpha segment."""
        return self in (StringFormat.RGBA, StringFormat.HSLA, StringFormat.HSVA)

    @classmethod
    def coerce(cls, name: "StringFormat | str | None") -> "StringFormat":
        """Map any format name to a member; unknown or missing names mean HEX."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            return DEFAULT_FORMAT


DEFAULT_FORMAT = StringFormat.HEX

HUE_360 = 360
PERCENT_100 = 100
BYTE_255 = 255
ALPHA_DECIMALS = 2

