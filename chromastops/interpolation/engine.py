"""
Per-channel step computation and interpolation.

Both functions work on any channel tuple shape (``RGBA``, ``HSVA``) and
return a fresh tuple of the same type; nothing is mutated.
"""
from __future__ import annotations
from typing import TypeVar

from ..types.channel_types import ChannelTuple

T = TypeVar("T", bound=tuple)


def _check_shape(start: ChannelTuple, other: ChannelTuple, what: str) -> None:
    if type(start) is not type(other) or len(start) != len(other):
        raise ValueError(
            f"{what} must share the channel set of start: "
            f"{type(start).__name__} vs {type(other).__name__}"
        )


def stepize(start: T, end: T, steps: float) -> T:
    """
    Linear step size between ``start`` and ``end`` for each channel.

    Args:
        start: Channel tuple at index 0
        end: Channel tuple at index ``steps``
        steps: Number of steps between them (not necessarily integral)

    Returns:
        Tuple of per-channel deltas, all 0 when ``steps`` is 0
    """
    _check_shape(start, end, "end")
    if steps == 0:
        return type(start)(*(0.0 for _ in start))
    return type(start)(*((e - s) / steps for s, e in zip(start, end)))


def interpolate(step: T, start: T, i: float, maxima: T) -> T:
    """
    Channel tuple at index ``i`` along ``step`` from ``start``.

    Negative results are lifted by the channel maximum, channels whose
    maximum is not 1 wrap modulo that maximum (hue, 0..255 RGB) and
    channels bounded by 1 (saturation, value, alpha) are left as they are.
    """
    _check_shape(start, step, "step")
    _check_shape(start, maxima, "maxima")
    return type(start)(*(
        _wrap(d * i + s, m) for d, s, m in zip(step, start, maxima)
    ))


def _wrap(raw: float, maximum: float) -> float:
    if raw < 0:
        return raw + maximum
    if maximum != 1:
        return raw % maximum
    return raw
