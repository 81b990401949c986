"""Basic chromastate usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from chromastate import Color, ColorParseError, no_resolver, np_unit_rgb_to_hsv


def demonstrate_color() -> None:
    # Parse, convert and render a single color.
    accent = Color("hsl(20, 100%, 63%)")
    print("HSL -> hex:", accent.to_string())
    print("HSL -> rgb:", accent.to_string("rgb"))
    print("As unit RGB:", accent.to_rgb())

    accent.from_rgb(0.2, 0.4, 0.8, 0.5)
    print("Translucent rgb:", accent.to_string("rgb"))
    print("Always-alpha hsva:", accent.to_string("hsva"))


def demonstrate_change_events() -> None:
    # Listeners only hear about real changes.
    swatch = Color("#336699")
    swatch.on("change", lambda: print("changed to", swatch.to_string()))
    swatch.from_string("#369")        # same color, silent
    swatch.from_string("rebeccapurple")


def demonstrate_resolvers() -> None:
    # Named colors come from the resolver; swap it to restrict parsing.
    strict = Color(resolver=no_resolver)
    try:
        strict.from_string("tomato")
    except ColorParseError as exc:
        print("Strict parsing:", exc)


def demonstrate_arrays() -> None:
    # Batch conversion with numpy.
    rgb = np.array([[1.0, 0.5, 0.0], [0.0, 1.0, 0.5]])
    print("RGB -> HSV array:\n", np_unit_rgb_to_hsv(rgb[..., 0], rgb[..., 1], rgb[..., 2]))


if __name__ == "__main__":
    demonstrate_color()
    demonstrate_change_events()
    demonstrate_resolvers()
    demonstrate_arrays()
