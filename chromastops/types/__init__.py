from .channel_types import RGBA, HSVA, RGBA_MAX, HSVA_MAX, ChannelTuple
from .color_types import ColorSpace, ColorSpaceLike, HUE_SPACES, is_hue_space

__all__ = [
    "RGBA",
    "HSVA",
    "RGBA_MAX",
    "HSVA_MAX",
    "ChannelTuple",
    "ColorSpace",
    "ColorSpaceLike",
    "HUE_SPACES",
    "is_hue_space",
]
