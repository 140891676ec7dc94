"""
Hue direction handling for HSV interpolation.

The hue circle can be walked clockwise (increasing hue, the default) or in
trigonometric order (decreasing hue). ``HueMode.SHORT`` and ``HueMode.LONG``
pick one of those two directions per segment from the relative position of
the two hues.
"""
from __future__ import annotations
from enum import Enum
from typing import Optional, Union

HUE_360 = 360


class HueMode(str, Enum):
    """
    Hue interpolation modes for cyclical color space.

    CW:    Clockwise (increasing hue direction)
    CCW:   Counterclockwise / trigonometric (decreasing hue direction)
    SHORT: Shortest arc between the two hues
    LONG:  Longest arc between the two hues
    """
    CW = "cw"
    CCW = "ccw"
    SHORT = "short"
    LONG = "long"

    @classmethod
    def coerce(cls, mode: "HueModeLike") -> "HueMode":
        """Convert booleans, aliases and ``None`` to a ``HueMode``."""
        if mode is None or mode is False:
            return cls.CW
        if mode is True:
            return cls.CCW
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            found = _ALIASES.get(mode.lower())
            if found is not None:
                return found
        raise ValueError(f"Invalid hue mode: {mode!r}")


HueModeLike = Optional[Union[HueMode, str, bool]]

_ALIASES = {
    "cw": HueMode.CW,
    "clockwise": HueMode.CW,
    "ccw": HueMode.CCW,
    "counterclockwise": HueMode.CCW,
    "trigonometric": HueMode.CCW,
    "short": HueMode.SHORT,
    "shortest": HueMode.SHORT,
    "long": HueMode.LONG,
    "longest": HueMode.LONG,
}


def hue_difference(h1: float, h2: float, trigonometric: bool) -> float:
    """Angular distance from ``h1`` to ``h2`` walking in the given direction."""
    if (h1 <= h2 and not trigonometric) or (h1 >= h2 and trigonometric):
        return h2 - h1
    if trigonometric:
        return HUE_360 - h2 + h1
    return HUE_360 - h1 + h2


def hue_step(h1: float, h2: float, steps: float, trigonometric: bool) -> float:
    """Signed per-step hue delta; negative when walking in trigonometric order."""
    if steps == 0:
        return 0.0
    sign = -1 if trigonometric else 1
    return sign * abs(hue_difference(h1, h2, trigonometric)) / steps


def resolve_trigonometric(h1: float, h2: float, mode: HueModeLike = None) -> bool:
    """
    Decide whether a segment from ``h1`` to ``h2`` is walked in trigonometric order.

    Args:
        h1: Start hue in degrees [0, 360)
        h2: End hue in degrees [0, 360)
        mode: ``HueMode`` or any value ``HueMode.coerce`` accepts

    Returns:
        True for counter-clockwise traversal
    """
    mode = HueMode.coerce(mode)
    if mode is HueMode.CW:
        return False
    if mode is HueMode.CCW:
        return True

    trig_shortest = (h1 < h2 and h2 - h1 < 180) or (h1 > h2 and h1 - h2 > 180)
    if mode is HueMode.LONG:
        return trig_shortest
    return not trig_shortest
