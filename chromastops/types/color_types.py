# No dependencies
from enum import Enum
from typing import Union


class ColorSpace(str, Enum):
    RGB = "rgb"
    HSV = "hsv"

    @classmethod
    def coerce(cls, value: "ColorSpaceLike") -> "ColorSpace":
        """Accept enum members or case-insensitive names like ``"RGB"``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise ValueError(f"Unsupported color space: {value!r}")


ColorSpaceLike = Union[ColorSpace, str]
HUE_SPACES = {ColorSpace.HSV}


def is_hue_space(color_space: ColorSpaceLike) -> bool:
    """
    Check if the given color space is hue-based.

    Args:
        color_space: Color space member or name
    Returns:
        True if hue-based, False otherwise
    """
    return ColorSpace.coerce(color_space) in HUE_SPACES
