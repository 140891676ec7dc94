"""
chromastops - color gradients between positioned stops
======================================================

Compute smooth color gradients between an ordered sequence of color stops,
each optionally anchored to a position in [0, 1].

Key Features
------------
- Evenly spaced or explicitly positioned stops
- RGBa and HSVa interpolation, with clockwise, counter-clockwise,
  shortest and longest hue traversal
- Exact step distribution across irregularly spaced stops
- Continuous sampling at any position
- CSS ``linear-gradient`` / ``radial-gradient`` output

Quick Start
-----------
>>> from chromastops import gradient
>>> grad = gradient([{"color": "red", "pos": 0}, {"color": "yellow", "pos": 0.25},
...                  {"color": "blue", "pos": 1}])
>>> colors = grad.to_sequence(10, "hsv", "short")
>>> len(colors)
10
>>> grad.sample_at(0.5).to_hex_string()
'#aaaa55'
"""
import logging

from .colors import Color, ColorModel, DefaultColorModel, DEFAULT_COLOR_MODEL, parse
from .exceptions import (
    GradientError,
    InvalidStopCount,
    MixedStopFormat,
    PositionOutOfRange,
    PositionOutOfOrder,
    InvalidStepCount,
    InvalidColor,
)
from .gradients import Gradient, gradient, Stop, compute_substeps
from .interpolation import (
    HueMode,
    stepize,
    interpolate,
    hue_difference,
    hue_step,
    resolve_trigonometric,
)
from .types import RGBA, HSVA, RGBA_MAX, HSVA_MAX, ColorSpace

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # gradients
    "Gradient",
    "gradient",
    "Stop",
    "compute_substeps",
    # colors
    "Color",
    "ColorModel",
    "DefaultColorModel",
    "DEFAULT_COLOR_MODEL",
    "parse",
    # interpolation engine
    "HueMode",
    "stepize",
    "interpolate",
    "hue_difference",
    "hue_step",
    "resolve_trigonometric",
    # channel types
    "RGBA",
    "HSVA",
    "RGBA_MAX",
    "HSVA_MAX",
    "ColorSpace",
    # errors
    "GradientError",
    "InvalidStopCount",
    "MixedStopFormat",
    "PositionOutOfRange",
    "PositionOutOfOrder",
    "InvalidStepCount",
    "InvalidColor",
    # version
    "__version__",
]
