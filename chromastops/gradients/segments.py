from __future__ import annotations

import logging
from typing import List

from ..colors import Color, ColorModel
from ..interpolation import (
    HueModeLike,
    hue_step,
    interpolate,
    resolve_trigonometric,
    stepize,
)
from ..types.channel_types import RGBA_MAX, HSVA_MAX
from .stops import Stop

_logger = logging.getLogger('chromastops.segments')


def interpolate_rgb(start_stop: Stop, end_stop: Stop, steps: int, color_model: ColorModel) -> List[Color]:
    """
    Colors of one segment with RGBa interpolation.

    Returns ``steps`` colors: the start stop color included, the end stop
    color excluded (it opens the next segment).
    """
    start = start_stop.color.to_rgb()
    end = end_stop.color.to_rgb()
    step = stepize(start, end, steps)

    colors = [start_stop.color]
    for i in range(1, steps):
        colors.append(color_model.from_rgb(interpolate(step, start, i, RGBA_MAX)))
    return colors


def interpolate_hsv(
    start_stop: Stop,
    end_stop: Stop,
    steps: int,
    trigonometric: bool,
    color_model: ColorModel,
) -> List[Color]:
    """
    Colors of one segment with HSVa interpolation.

    The hue delta walks clockwise, or in trigonometric order when
    ``trigonometric`` is True. Start included, end excluded.
    """
    start = start_stop.color.to_hsv()
    end = end_stop.color.to_hsv()
    step = stepize(start, end, steps)
    step = step._replace(h=hue_step(start.h, end.h, steps, trigonometric))

    colors = [start_stop.color]
    for i in range(1, steps):
        colors.append(color_model.from_hsv(interpolate(step, start, i, HSVA_MAX)))
    return colors


def interpolate_hsv_segment(
    start_stop: Stop,
    end_stop: Stop,
    steps: int,
    mode: HueModeLike,
    color_model: ColorModel,
) -> List[Color]:
    """HSV segment, falling back to RGB when either end has no hue."""
    start = start_stop.color.to_hsv()
    end = end_stop.color.to_hsv()

    if start.s == 0 or end.s == 0:
        _logger.debug("Achromatic segment %s -> %s, using rgb", start_stop.color, end_stop.color)
        return interpolate_rgb(start_stop, end_stop, steps, color_model)

    trigonometric = resolve_trigonometric(start.h, end.h, mode)
    return interpolate_hsv(start_stop, end_stop, steps, trigonometric, color_model)
