from __future__ import annotations
from typing import Any, ClassVar, Optional, Self, Tuple

from ..conversions.hex import unit_rgb_to_hex
from ..conversions.numbers import clamp01
from ..conversions.to_hsl import hsv_to_hsl
from ..conversions.to_rgb import hsv_to_unit_rgb
from ..conversions.wrapper import convert
from ..strings.format import format_color
from ..strings.parse import hsva_from_hsla, hsva_from_rgba, parse_color, parse_hex
from ..strings.resolvers import NamedColorResolver, matplotlib_resolver
from ..types.color_types import HSLADict, HSVADict, RGBADict, UnitQuad
from ..types.format_type import StringFormat
from .events import EventEmitter

CHANGE = "change"


def _alpha(a: Any) -> Any:
    return 1 if a is None else a


class Color(EventEmitter):
    """
    A mutable color stored as unit HSV plus alpha.

    Every ``from_*`` mutator clamps its input, commits the new value and
    fires ``"change"`` (no arguments) only when the stored value actually
    changed. ``to_*`` accessors derive their views on demand.

    >>> color = Color("#f00")
    >>> color.to_string("rgb")
    'rgb(255, 0, 0)'
    >>> color.on("change", lambda: print("changed")).from_hsv(0.5, 1, 1).to_hex()
    changed
    '#00ffffff'
    """

    null_value: ClassVar[UnitQuad] = (0.0, 0.0, 0.0, 1.0)

    def __init__(
        self,
        color: Optional[str] = None,
        *,
        resolver: NamedColorResolver = matplotlib_resolver,
    ) -> None:
        if color is not None and not isinstance(color, str):
            raise TypeError(f"Color expects a color string, got {type(color).__name__}")
        super().__init__()
        self._resolver = resolver
        self._h, self._s, self._v, self._a = self.null_value
        if color is not None:
            self.from_string(color)

    # ------------------ CANONICAL STORE ------------------
    def _commit(self, hsva: UnitQuad) -> Self:
        before = self.hsva
        self._h, self._s, self._v, self._a = hsva
        if self.hsva != before:
            self.trigger(CHANGE)
        return self

    @property
    def hsva(self) -> UnitQuad:
        """The canonical ``(h, s, v, a)`` tuple."""
        return self._h, self._s, self._v, self._a

    @property
    def hue(self) -> float:
        return self._h

    @property
    def saturation(self) -> float:
        return self._s

    @property
    def value(self) -> float:
        return self._v

    @property
    def alpha(self) -> float:
        return self._a

    @property
    def resolver(self) -> NamedColorResolver:
        return self._resolver

    # ------------------ MUTATORS ------------------
    def from_hsv(self, h: Any, s: Any, v: Any, a: Any = None) -> Self:
        """Set from unit HSV (alpha defaults to 1)."""
        return self._commit((clamp01(h), clamp01(s), clamp01(v), clamp01(_alpha(a))))

    def from_hsl(self, h: Any, s: Any, l: Any, a: Any = None) -> Self:
        """Set from unit HSL (alpha defaults to 1)."""
        return self._commit(hsva_from_hsla(h, s, l, _alpha(a)))

    def from_rgb(self, r: Any, g: Any, b: Any, a: Any = None) -> Self:
        """Set from unit RGB (alpha defaults to 1)."""
        return self._commit(hsva_from_rgba(r, g, b, _alpha(a)))

    def from_hex(self, color: str) -> Self:
        """Set from ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``."""
        return self._commit(parse_hex(color))

    def from_string(self, color: Optional[str]) -> Self:
        """
        Set from any supported color text.

        Empty text leaves the color alone. Unparseable text raises
        ColorParseError and leaves the color alone too.
        """
        hsva = parse_color(color, self._resolver)
        if hsva is None:
            return self
        return self._commit(hsva)

    # ------------------ ACCESSORS ------------------
    def to_hsv(self) -> HSVADict:
        return {"h": self._h, "s": self._s, "v": self._v, "a": self._a}

    def to_hsl(self) -> HSLADict:
        h, s, l = hsv_to_hsl(self._h, self._s, self._v)
        return {"h": h, "s": s, "l": l, "a": self._a}

    def to_rgb(self) -> RGBADict:
        r, g, b = hsv_to_unit_rgb(self._h, self._s, self._v)
        return {"r": r, "g": g, "b": b, "a": self._a}

    def to_hex(self) -> str:
        """Eight digit ``#rrggbbaa``."""
        return unit_rgb_to_hex(*hsv_to_unit_rgb(self._h, self._s, self._v), self._a)

    def to_string(self, fmt: "StringFormat | str | None" = None) -> str:
        """Render as hex, hexa, rgb, rgba, hsl, hsla, hsv or hsva (default hex)."""
        return format_color(self.hsva, fmt)

    def to_tuple(self, space: str = "hsva") -> Tuple[float, ...]:
        """Channels of ``space`` (rgb/hsv/hsl, alpha with the ``a`` suffix)."""
        return convert(self.hsva, "hsva", space)  # type: ignore[arg-type]

    # ------------------ PYTHON PROTOCOLS ------------------
    def copy(self) -> "Color":
        """Same value and resolver, no listeners."""
        clone = Color(resolver=self._resolver)
        clone._h, clone._s, clone._v, clone._a = self.hsva
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.hsva == other.hsva

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_hex()!r})"
