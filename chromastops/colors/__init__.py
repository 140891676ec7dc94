"""
chromastops color model
=======================

Immutable ``Color`` values and the ``parse`` entry point that turns hex
strings, CSS names, functional notations, channel mappings and tuples into
colors.

>>> from chromastops.colors import parse
>>> red = parse("red")
>>> red.to_rgb()
RGBA(r=255, g=0, b=0, a=1.0)
>>> red.to_rgb_string()
'rgb(255, 0, 0)'
"""

from .color import Color
from .parse import parse, ColorInput
from .model import ColorModel, DefaultColorModel, DEFAULT_COLOR_MODEL

__all__ = [
    "Color",
    "parse",
    "ColorInput",
    "ColorModel",
    "DefaultColorModel",
    "DEFAULT_COLOR_MODEL",
]
