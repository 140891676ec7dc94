import math


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (``2.5 -> 3``, ``-2.5 -> -2``)."""
    return math.floor(value + 0.5)


def format_number(value: float) -> str:
    """Render integral floats without a decimal part (``100.0 -> "100"``)."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
