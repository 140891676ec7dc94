"""
Exceptions raised by chromastops.

Every error is a deterministic input validation failure. They all derive from
``GradientError``, which is itself a ``ValueError`` so callers that only catch
``ValueError`` keep working.
"""


class GradientError(ValueError):
    """Base class for all chromastops validation errors."""


class InvalidStopCount(GradientError):
    """Fewer than two color stops were supplied."""


class MixedStopFormat(GradientError):
    """Positioned and unpositioned stops were mixed in one construction."""


class PositionOutOfRange(GradientError):
    """A position lies outside the unit interval [0, 1]."""


class PositionOutOfOrder(GradientError):
    """Stop positions are not strictly increasing."""


class InvalidStepCount(GradientError):
    """The requested number of steps cannot be distributed over the stops."""


class InvalidColor(GradientError):
    """A color input could not be parsed."""

    def __init__(self, value, reason: str = "") -> None:
        self.value = value
        message = f"Invalid color: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
