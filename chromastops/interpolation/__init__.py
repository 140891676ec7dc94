"""
chromastops interpolation engine
================================

Pure functions computing per-channel step deltas, interpolated channel
tuples with channel-specific wrap-around, and hue traversal direction.

>>> from chromastops.interpolation import stepize, interpolate
>>> from chromastops.types import RGBA, RGBA_MAX
>>> step = stepize(RGBA(255, 0, 0, 1), RGBA(0, 0, 255, 1), 4)
>>> interpolate(step, RGBA(255, 0, 0, 1), 2, RGBA_MAX)
RGBA(r=127.5, g=0.0, b=127.5, a=1.0)
"""

from .engine import stepize, interpolate
from .hue import (
    HueMode,
    HueModeLike,
    hue_difference,
    hue_step,
    resolve_trigonometric,
)

__all__ = [
    "stepize",
    "interpolate",
    "HueMode",
    "HueModeLike",
    "hue_difference",
    "hue_step",
    "resolve_trigonometric",
]
