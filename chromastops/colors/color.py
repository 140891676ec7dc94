from __future__ import annotations
from typing import ClassVar, Tuple

from boundednumbers import clamp
from boundednumbers.functions import cyclic_wrap_float

from ..conversions import unit_rgb_to_hsv, hsv_to_unit_rgb
from ..types.channel_types import RGBA, HSVA
from ..utils import round_half_up, format_number


class Color:
    """
    Immutable RGBA color.

    Red, green and blue are kept as floats on the 0..255 scale so that
    interpolated values survive a round trip through ``to_hsv()``; they are
    only rounded when read back through ``to_rgb()`` or formatted.
    """
    __slots__ = ('_value', '_is_frozen')  # no instance __dict__, writes go through __setattr__

    maxima: ClassVar[Tuple[float, float, float, float]] = (255.0, 255.0, 255.0, 1.0)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: float, g: float, b: float, a: float = 1.0) -> None:
        value = tuple(
            float(clamp(float(v), 0.0, m)) for v, m in zip((r, g, b, a), self.maxima)
        )
        self._value = RGBA(*value)

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgb(cls, channels: RGBA) -> Color:
        """Build a color from an RGBA channel tuple (RGB on 0..255)."""
        r, g, b, a = channels
        return cls(r, g, b, a)

    @classmethod
    def from_hsv(cls, channels: HSVA) -> Color:
        """Build a color from an HSVA channel tuple; the hue is wrapped into [0, 360)."""
        h, s, v, a = channels
        h = cyclic_wrap_float(float(h), 0.0, 360.0)
        r, g, b = hsv_to_unit_rgb(h, clamp(s, 0.0, 1.0), clamp(v, 0.0, 1.0))
        return cls(r * 255.0, g * 255.0, b * 255.0, a)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> RGBA:
        return self._value

    @property
    def alpha(self) -> float:
        return self._value.a

    @property
    def has_alpha(self) -> bool:
        """True when the color is not fully opaque."""
        return self._value.a < 1.0

    # ------------------ CHANNEL VIEWS ------------------
    def to_rgb(self) -> RGBA:
        """RGB rounded to integers, alpha unrounded."""
        r, g, b, a = self._value
        return RGBA(round_half_up(r), round_half_up(g), round_half_up(b), a)

    def to_hsv(self) -> HSVA:
        r, g, b, a = self._value
        h, s, v = unit_rgb_to_hsv(r / 255.0, g / 255.0, b / 255.0)
        return HSVA(h, s, v, a)

    # ------------------ FORMATTING ------------------
    def to_rgb_string(self) -> str:
        r, g, b, a = self.to_rgb()
        # alpha printed with two decimals, rounded half up
        a = round_half_up(a * 100) / 100
        if a == 1:
            return f"rgb({r}, {g}, {b})"
        return f"rgba({r}, {g}, {b}, {format_number(a)})"

    def to_hex_string(self) -> str:
        r, g, b, _ = self.to_rgb()
        return f"#{r:02x}{g:02x}{b:02x}"

    def __str__(self) -> str:
        return self.to_rgb_string()

    def __repr__(self) -> str:
        return f"Color({self.to_rgb_string()!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_rgb() == other.to_rgb()

    def __hash__(self) -> int:
        return hash(self.to_rgb())
