"""
Color text grammars.

Parsing understands ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``,
``hsv()``/``hsva()``, ``hsl()``/``hsla()`` and, through a pluggable
named-color resolver, anything the resolver can turn into ``rgb()``.

Formatting renders hex, hexa, rgb, rgba, hsl, hsla, hsv and hsva.
"""
from .format import format_color
from .parse import parse_color, parse_hex
from .resolvers import NamedColorResolver, matplotlib_resolver, no_resolver

__all__ = [
    'format_color',
    'parse_color',
    'parse_hex',
    'NamedColorResolver',
    'matplotlib_resolver',
    'no_resolver',
]
