from __future__ import annotations
from typing import Literal, Tuple, TypedDict

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
UnitTriple = Tuple[float, float, float]
UnitQuad = Tuple[float, float, float, float]
ColorSpace = Literal["rgb", "rgba", "hsv", "hsva", "hsl", "hsla"]


class RGBADict(TypedDict):
    r: float
    g: float
    b: float
    a: float


class HSVADict(TypedDict):
    h: float
    s: float
    v: float
    a: float


class HSLADict(TypedDict):
    h: float
    s: float
    l: float
    a: float
