"""
chromastops color space conversions
===================================

RGB <-> HSV conversion on unit floats. RGB to HSV also comes in a
numpy-vectorized form used for array output.

Examples
--------
>>> from chromastops.conversions import unit_rgb_to_hsv, hsv_to_unit_rgb
>>> h, s, v = unit_rgb_to_hsv(1.0, 0.5, 0.0)
>>> r, g, b = hsv_to_unit_rgb(h, s, v)
"""

from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_rgb import hsv_to_unit_rgb

__all__ = [
    "unit_rgb_to_hsv",
    "np_unit_rgb_to_hsv",
    "hsv_to_unit_rgb",
]
