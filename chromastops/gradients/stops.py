from __future__ import annotations

import logging
import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable, List, Sequence, Tuple

from ..colors import Color, ColorModel
from ..exceptions import (
    InvalidStopCount,
    MixedStopFormat,
    PositionOutOfOrder,
    PositionOutOfRange,
)

_logger = logging.getLogger('chromastops.stops')


@dataclass(frozen=True)
class Stop:
    """A color anchored at a position in [0, 1] along the gradient."""
    color: Color
    pos: float

    def reversed(self) -> Stop:
        return Stop(self.color, 1 - self.pos)


def _is_positioned(stop: Any) -> bool:
    if isinstance(stop, Stop):
        return True
    if isinstance(stop, Mapping):
        return "pos" in stop
    return False


def _split_positioned(stop: Any) -> Tuple[Any, Any]:
    if isinstance(stop, Stop):
        return stop.color, stop.pos
    return stop["color"], stop["pos"]


def _as_pair(stop: Any) -> Any:
    """Turn ``(color, pos)`` 2-tuples into stop mappings."""
    if (
        isinstance(stop, tuple)
        and len(stop) == 2
        and isinstance(stop[1], numbers.Real)
        and not isinstance(stop[1], bool)
    ):
        return {"color": stop[0], "pos": stop[1]}
    return stop


def _check_position(pos: Any, previous: float) -> float:
    if isinstance(pos, bool) or not isinstance(pos, numbers.Real):
        raise PositionOutOfRange(f"Color stop position must be a number, got {pos!r}")
    pos = float(pos)
    if not 0.0 <= pos <= 1.0:
        raise PositionOutOfRange(f"Color stop positions must be between 0 and 1, got {pos}")
    if pos <= previous:
        raise PositionOutOfOrder(
            f"Color stop positions are not strictly increasing: {pos} after {previous}"
        )
    return pos


def normalize_stops(
    stops: Sequence[Any],
    color_model: ColorModel,
    *,
    expect_positions: bool | None = None,
    pairs: bool = False,
) -> Tuple[Stop, ...]:
    """
    Parse and validate caller stops.

    Args:
        stops: Bare colors, or stops carrying a position (``Stop`` or a
            mapping with ``color`` and ``pos`` keys)
        color_model: Parses every color input
        expect_positions: Force positioned (True) or bare (False) input;
            None infers it from the first stop
        pairs: Also read ``(color, pos)`` 2-tuples as positioned stops

    Returns:
        Tuple of stops starting at 0 and ending at 1

    Raises:
        InvalidStopCount: fewer than 2 stops
        MixedStopFormat: positioned and bare stops mixed
        PositionOutOfRange: a position outside [0, 1]
        PositionOutOfOrder: positions not strictly increasing
    """
    stops = list(stops)
    if len(stops) < 2:
        raise InvalidStopCount(f"Invalid number of stops ({len(stops)} < 2)")
    if pairs:
        stops = [_as_pair(stop) for stop in stops]

    having_positions = _is_positioned(stops[0]) if expect_positions is None else expect_positions
    count = len(stops)
    previous = -1.0
    result: List[Stop] = []

    for i, stop in enumerate(stops):
        if _is_positioned(stop) != having_positions:
            raise MixedStopFormat("Cannot mix positioned and unpositioned color stops")

        if having_positions:
            color, pos = _split_positioned(stop)
            pos = _check_position(pos, previous)
            previous = pos
            result.append(Stop(color_model.parse(color), pos))
        else:
            result.append(Stop(color_model.parse(stop), i / (count - 1)))

    if result[0].pos != 0:
        _logger.debug("Adding stop at 0 for first stop at %s", result[0].pos)
        result.insert(0, Stop(result[0].color, 0.0))
    if result[-1].pos != 1:
        _logger.debug("Adding stop at 1 for last stop at %s", result[-1].pos)
        result.append(Stop(result[-1].color, 1.0))

    return tuple(result)


def reverse_stops(stops: Iterable[Stop]) -> List[Stop]:
    """Mirror stop positions around 0.5, last stop first."""
    return [stop.reversed() for stop in reversed(list(stops))]
