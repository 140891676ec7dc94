# No dependencies
from typing import NamedTuple, Union


class RGBA(NamedTuple):
    """Red, green and blue on the 0..255 scale, alpha on 0..1."""
    r: float
    g: float
    b: float
    a: float = 1.0


class HSVA(NamedTuple):
    """Hue in degrees [0, 360), saturation, value and alpha on 0..1."""
    h: float
    s: float
    v: float
    a: float = 1.0


ChannelTuple = Union[RGBA, HSVA]

# Wrap-around bound of each channel. Channels bounded by 1 are never wrapped.
RGBA_MAX = RGBA(256, 256, 256, 1)
HSVA_MAX = HSVA(360, 1, 1, 1)
