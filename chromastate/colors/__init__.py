"""
Chromastate Color Object
========================

:class:`Color` holds one color as unit HSV plus alpha and derives RGB, HSL
and hex views on demand.

Usage
-----
>>> from chromastate.colors import Color
>>>
>>> color = Color("hsv(120, 100%, 50%)")
>>> color.to_string()  # '#008000'
>>> color.to_rgb()     # {'r': 0.0, 'g': 0.5, 'b': 0.0, 'a': 1.0}
>>>
>>> # Observe changes
>>> color.on("change", lambda: print(color.to_string("rgb")))
>>> color.from_rgb(1, 0, 0)  # prints rgb(255, 0, 0)
>>> color.from_rgb(1, 0, 0)  # same value, prints nothing
>>>
>>> # Named colors go through the resolver
>>> Color("rebeccapurple").to_string()  # '#663399'

Notes
-----
- All channel inputs are clamped to [0, 1]; non-numeric input reads as 0
- "change" fires only when (h, s, v, a) differs from before the call
- Listener exceptions propagate and stop the remaining listeners
"""

from .color import Color, CHANGE
from .events import EventEmitter

__all__ = ['Color', 'CHANGE', 'EventEmitter']
