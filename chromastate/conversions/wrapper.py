from typing import Callable, Dict, Tuple

from ..types.color_types import ColorSpace, ScalarVector, UnitTriple
from .to_hsl import hsv_to_hsl, unit_rgb_to_hsl
from .to_hsv import hsl_to_hsv, unit_rgb_to_hsv
from .to_rgb import hsl_to_unit_rgb, hsv_to_unit_rgb

CONVERT_SCALAR: Dict[Tuple[str, str], Callable[[float, float, float], UnitTriple]] = {
    ("rgb", "hsv"): unit_rgb_to_hsv,
    ("rgb", "hsl"): unit_rgb_to_hsl,
    ("hsv", "rgb"): hsv_to_unit_rgb,
    ("hsv", "hsl"): hsv_to_hsl,
    ("hsl", "rgb"): hsl_to_unit_rgb,
    ("hsl", "hsv"): hsl_to_hsv,
}

BASE_SPACES = {"rgb", "hsv", "hsl"}


def _split_space(space: str) -> Tuple[str, bool]:
    space = space.lower()
    has_alpha = space.endswith("a")
    base = space[:-1] if has_alpha else space
    if base not in BASE_SPACES:
        raise ValueError(f"Unknown space: {space}")
    return base, has_alpha


def convert(
    color: ScalarVector,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> Tuple[float, ...]:
    """
    Convert a unit-float color tuple between rgb/hsv/hsl (with or without alpha).

    Alpha passes through unchanged, defaults to 1.0 when the source has none,
    and is dropped when the target has none.

    Args:
        color: Channel tuple in [0, 1]
        from_space: Source space, e.g. "rgb" or "hsla"
        to_space: Target space

    Returns:
        Channel tuple in the target space
    """
    from_base, alpha_in = _split_space(from_space)
    to_base, alpha_out = _split_space(to_space)

    expected = 4 if alpha_in else 3
    if len(color) != expected:
        raise ValueError(f"{from_space} expects {expected} channels, got {len(color)}")

    a, b, c = (float(x) for x in color[:3])
    if from_base == to_base:
        channels: UnitTriple = (a, b, c)
    else:
        channels = CONVERT_SCALAR[(from_base, to_base)](a, b, c)

    if not alpha_out:
        return tuple(channels)
    alpha = float(color[3]) if alpha_in else 1.0
    return (*channels, alpha)
