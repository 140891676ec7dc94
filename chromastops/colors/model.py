from __future__ import annotations
from typing import Any, Protocol, runtime_checkable

from ..types.channel_types import RGBA, HSVA
from .color import Color
from .parse import parse


@runtime_checkable
class ColorModel(Protocol):
    """Capabilities a gradient needs from its color component."""

    def parse(self, value: Any) -> Color: ...

    def from_rgb(self, channels: RGBA) -> Color: ...

    def from_hsv(self, channels: HSVA) -> Color: ...


class DefaultColorModel:
    """``ColorModel`` backed by ``chromastops.colors``."""
    __slots__ = ()

    def parse(self, value: Any) -> Color:
        return parse(value)

    def from_rgb(self, channels: RGBA) -> Color:
        return Color.from_rgb(channels)

    def from_hsv(self, channels: HSVA) -> Color:
        return Color.from_hsv(channels)

    def __repr__(self) -> str:
        return "DefaultColorModel()"


DEFAULT_COLOR_MODEL = DefaultColorModel()
