from __future__ import annotations

import logging
import numbers
import warnings
from typing import Any, Iterator, List, Optional, Sequence, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..colors import Color, ColorModel, DEFAULT_COLOR_MODEL
from ..conversions import np_unit_rgb_to_hsv
from ..exceptions import PositionOutOfRange
from ..interpolation import HueModeLike, HueMode, interpolate, stepize
from ..types.channel_types import RGBA_MAX, HSVA_MAX
from ..types.color_types import ColorSpace, ColorSpaceLike, is_hue_space
from ..utils import format_number, round_half_up, value_or_default
from .segments import interpolate_rgb, interpolate_hsv_segment
from .stops import Stop, normalize_stops, reverse_stops
from .substeps import compute_substeps

# Segment-local positions are quantized on this many subdivisions when sampling.
SAMPLE_RESOLUTION = 100

CSS_MODES = ("linear", "radial")
CSS_DEFAULT_DIRECTIONS = {
    "linear": "to right",
    "radial": "ellipse at center",
}

_logger = logging.getLogger('chromastops.gradient')


class Gradient:
    """
    A color gradient over ordered stops on [0, 1].

    Stops are either bare colors, spread evenly, or positioned stops
    (``Stop``, ``{"color": ..., "pos": ...}``). Missing boundary stops at 0
    and 1 are filled in with the nearest color. Instances are immutable.

    Example:
        >>> grad = Gradient.from_colors(["red", "blue"])
        >>> [c.to_hex_string() for c in grad.to_sequence(3)]
        ['#ff0000', '#800080', '#0000ff']
    """
    __slots__ = ('_stops', '_color_model')

    def __init__(self, stops: Sequence[Any], *, color_model: Optional[ColorModel] = None) -> None:
        model = value_or_default(color_model, DEFAULT_COLOR_MODEL)
        self._init(normalize_stops(stops, model), model)

    def _init(self, stops: Tuple[Stop, ...], color_model: ColorModel) -> None:
        object.__setattr__(self, '_stops', stops)
        object.__setattr__(self, '_color_model', color_model)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def _build(cls, stops: Tuple[Stop, ...], color_model: ColorModel) -> Gradient:
        gradient = cls.__new__(cls)
        gradient._init(stops, color_model)
        return gradient

    @classmethod
    def from_colors(cls, colors: Sequence[Any], *, color_model: Optional[ColorModel] = None) -> Gradient:
        """
        Gradient of evenly spaced colors.

        Raises:
            MixedStopFormat: if any input carries a position
        """
        model = value_or_default(color_model, DEFAULT_COLOR_MODEL)
        return cls._build(normalize_stops(colors, model, expect_positions=False), model)

    @classmethod
    def from_stops(cls, stops: Sequence[Any], *, color_model: Optional[ColorModel] = None) -> Gradient:
        """
        Gradient of explicitly positioned stops.

        Each stop is a ``Stop``, a ``{"color": ..., "pos": ...}`` mapping or a
        ``(color, pos)`` pair.

        Raises:
            MixedStopFormat: if any input lacks a position
        """
        model = value_or_default(color_model, DEFAULT_COLOR_MODEL)
        return cls._build(normalize_stops(stops, model, expect_positions=True, pairs=True), model)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def stops(self) -> Tuple[Stop, ...]:
        return self._stops

    @property
    def color_model(self) -> ColorModel:
        return self._color_model

    def __len__(self) -> int:
        return len(self._stops)

    def __iter__(self) -> Iterator[Stop]:
        return iter(self._stops)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Gradient):
            return NotImplemented
        return self._stops == other._stops

    def __hash__(self) -> int:
        return hash(self._stops)

    def __repr__(self) -> str:
        inner = ", ".join(f"{stop.color.to_rgb_string()} {format_number(stop.pos)}" for stop in self._stops)
        return f"Gradient([{inner}])"

    # ------------------ OPERATIONS ------------------
    def reversed(self) -> Gradient:
        """New gradient with mirrored stops; this one is left untouched."""
        stops = normalize_stops(reverse_stops(self._stops), self._color_model, expect_positions=True)
        return self._build(stops, self._color_model)

    def substeps(self, steps: int) -> List[int]:
        """Number of colors each segment contributes to a sequence of ``steps`` colors."""
        return compute_substeps(self._stops, steps)

    def to_sequence(
        self,
        steps: int,
        color_space: ColorSpaceLike = ColorSpace.RGB,
        mode: HueModeLike = None,
    ) -> List[Color]:
        """
        Generate ``steps`` colors along the gradient.

        Args:
            steps: Total number of colors, at least 2 and at least the number of stops
            color_space: ``"rgb"`` or ``"hsv"``
            mode: HSV hue direction: ``False``/``"cw"`` (default) clockwise,
                ``True``/``"ccw"`` trigonometric, ``"short"`` or ``"long"``.
                Ignored for rgb.

        Returns:
            List of colors, first and last being the boundary stop colors

        Raises:
            InvalidStepCount: if ``steps`` cannot be distributed over the stops
        """
        color_space = ColorSpace.coerce(color_space)
        if is_hue_space(color_space):
            mode = HueMode.coerce(mode)
        substeps = compute_substeps(self._stops, steps)

        colors: List[Color] = []
        for i, count in enumerate(substeps):
            start, end = self._stops[i], self._stops[i + 1]
            if color_space is ColorSpace.RGB:
                colors.extend(interpolate_rgb(start, end, count, self._color_model))
            else:
                colors.extend(interpolate_hsv_segment(start, end, count, mode, self._color_model))

        colors.append(self._stops[-1].color)
        return colors

    def rgb(self, steps: int) -> List[Color]:
        """Sequence of ``steps`` colors with RGBa interpolation."""
        return self.to_sequence(steps, ColorSpace.RGB)

    def hsv(self, steps: int, mode: HueModeLike = None) -> List[Color]:
        """Sequence of ``steps`` colors with HSVa interpolation."""
        return self.to_sequence(steps, ColorSpace.HSV, mode)

    def to_array(
        self,
        steps: int,
        color_space: ColorSpaceLike = ColorSpace.RGB,
        mode: HueModeLike = None,
        channels: ColorSpaceLike = ColorSpace.RGB,
    ) -> NDArray:
        """
        ``to_sequence`` as a ``(steps, 4)`` float array.

        ``channels`` picks the layout of each row: ``"rgb"`` gives RGBA with
        RGB on 0..255, ``"hsv"`` gives HSVA with the hue in degrees.
        """
        channels = ColorSpace.coerce(channels)
        colors = self.to_sequence(steps, color_space, mode)
        values = np.array([color.value for color in colors], dtype=np.float64)
        if channels is ColorSpace.RGB:
            return values

        unit_rgb = values[:, :3] / 255.0
        hsv = np_unit_rgb_to_hsv(unit_rgb[:, 0], unit_rgb[:, 1], unit_rgb[:, 2])
        return np.concatenate([hsv, values[:, 3:]], axis=1)

    def sample_at(self, pos: float, color_space: ColorSpaceLike = ColorSpace.RGB) -> Color:
        """
        Color at position ``pos`` in [0, 1].

        The position inside its segment is quantized on
        ``SAMPLE_RESOLUTION`` subdivisions.

        Raises:
            PositionOutOfRange: if ``pos`` is outside [0, 1]
        """
        color_space = ColorSpace.coerce(color_space)
        if isinstance(pos, bool) or not isinstance(pos, numbers.Real) or not 0 <= pos <= 1:
            raise PositionOutOfRange(f"Position must be between 0 and 1, got {pos!r}")
        pos = float(pos)

        start = end = self._stops[-1]
        for left, right in zip(self._stops, self._stops[1:]):
            if left.pos <= pos < right.pos:
                start, end = left, right
                break

        if color_space is ColorSpace.RGB:
            start_channels, end_channels = start.color.to_rgb(), end.color.to_rgb()
            maxima, build = RGBA_MAX, self._color_model.from_rgb
        else:
            start_channels, end_channels = start.color.to_hsv(), end.color.to_hsv()
            maxima, build = HSVA_MAX, self._color_model.from_hsv

        step = stepize(start_channels, end_channels, (end.pos - start.pos) * SAMPLE_RESOLUTION)
        index = round_half_up((pos - start.pos) * SAMPLE_RESOLUTION)
        return build(interpolate(step, start_channels, index, maxima))

    def rgb_at(self, pos: float) -> Color:
        return self.sample_at(pos, ColorSpace.RGB)

    def hsv_at(self, pos: float) -> Color:
        return self.sample_at(pos, ColorSpace.HSV)

    def to_css_string(self, mode: str = "linear", direction: Optional[str] = None) -> str:
        """
        CSS3 gradient (no vendor prefix) listing every stop.

        >>> Gradient.from_colors(["red", "blue"]).to_css_string()
        'linear-gradient(to right, rgb(255, 0, 0) 0%, rgb(0, 0, 255) 100%)'
        """
        mode = value_or_default(mode, "linear")
        if mode not in CSS_MODES:
            raise ValueError(f"Invalid CSS gradient mode: {mode!r}, expected one of {CSS_MODES}")
        direction = value_or_default(direction, CSS_DEFAULT_DIRECTIONS[mode])

        parts = [direction]
        parts.extend(
            f"{stop.color.to_rgb_string()} {format_number(stop.pos * 100)}%"
            for stop in self._stops
        )
        return f"{mode}-gradient({', '.join(parts)})"

    css = to_css_string

    # ------------------ DEPRECATED ALIASES ------------------
    def reverse(self) -> Gradient:
        """Deprecated: use ``reversed()``."""
        warnings.warn(
            "Gradient.reverse is deprecated. Use Gradient.reversed instead.",
            DeprecationWarning,
            stacklevel=2
        )
        return self.reversed()

    def rgbAt(self, pos: float) -> Color:
        """Deprecated: use ``rgb_at()``."""
        warnings.warn(
            "Gradient.rgbAt is deprecated. Use Gradient.rgb_at instead.",
            DeprecationWarning,
            stacklevel=2
        )
        return self.rgb_at(pos)

    def hsvAt(self, pos: float) -> Color:
        """Deprecated: use ``hsv_at()``."""
        warnings.warn(
            "Gradient.hsvAt is deprecated. Use Gradient.hsv_at instead.",
            DeprecationWarning,
            stacklevel=2
        )
        return self.hsv_at(pos)


def gradient(*stops: Any, color_model: Optional[ColorModel] = None) -> Gradient:
    """
    Build a ``Gradient`` from one list of stops or from the stops as arguments.

    >>> gradient("red", "green", "blue") == gradient(["red", "green", "blue"])
    True
    """
    if len(stops) == 1:
        if not isinstance(stops[0], (list, tuple)):
            raise TypeError(f"stops must be a list, got {type(stops[0]).__name__}")
        stops = tuple(stops[0])
    _logger.debug("Building gradient from %d stops", len(stops))
    return Gradient(stops, color_model=color_model)
