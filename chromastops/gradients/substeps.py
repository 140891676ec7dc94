from __future__ import annotations

import logging
import math
import numbers
from typing import Any, List, Sequence

from ..exceptions import InvalidStepCount
from ..utils import is_close_to_int, round_half_up
from .stops import Stop

_logger = logging.getLogger('chromastops.substeps')


def validate_steps(steps: Any, stop_count: int) -> int:
    """
    Check a requested total step count.

    Any integral real is accepted (``10``, ``10.0``, ``np.int64(10)``);
    booleans and fractional values are not.
    """
    if isinstance(steps, bool) or not isinstance(steps, numbers.Real):
        raise InvalidStepCount(f"Invalid number of steps: {steps!r}")
    if not isinstance(steps, numbers.Integral):
        if not math.isfinite(steps) or not is_close_to_int(steps):
            raise InvalidStepCount(f"Number of steps must be an integer, got {steps}")
        steps = round(steps)
    steps = int(steps)
    if steps < 2:
        raise InvalidStepCount(f"Invalid number of steps ({steps} < 2)")
    if steps < stop_count:
        raise InvalidStepCount(
            f"Too few steps: {steps} steps cannot be inferior to {stop_count} stops"
        )
    return steps


def compute_substeps(stops: Sequence[Stop], steps: Any) -> List[int]:
    """
    Distribute ``steps - 1`` intervals across the segments between stops.

    Each segment gets a share proportional to its width, rounded half up
    and never below 1. The rounding drift is then absorbed one unit at a
    time: missing units go to the first smallest segment, excess units are
    taken from the first largest segment that can still shrink.

    Args:
        stops: Normalized stops (positions from 0 to 1, strictly increasing)
        steps: Total number of colors requested

    Returns:
        One integer per segment, summing to ``steps - 1``

    Raises:
        InvalidStepCount: steps < 2, steps < len(stops), or no segment can
            give up a unit during rebalancing
    """
    steps = validate_steps(steps, len(stops))

    substeps = [
        max(1, round_half_up((steps - 1) * (stops[i + 1].pos - stops[i].pos)))
        for i in range(len(stops) - 1)
    ]

    total = sum(substeps) + 1
    if total != steps:
        _logger.debug("Rebalancing substeps %s from %d to %d", substeps, total, steps)

    while total != steps:
        if total < steps:
            smallest = min(substeps)
            substeps[substeps.index(smallest)] += 1
            total += 1
        else:
            largest = max(substeps)
            if largest <= 1:
                raise InvalidStepCount(
                    f"Cannot fit {len(substeps)} segments in {steps} steps"
                )
            substeps[substeps.index(largest)] -= 1
            total -= 1

    return substeps
