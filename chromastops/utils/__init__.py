from .num_utils import is_close_to_int, round_half_up, format_number
from .default import value_or_default

__all__ = [
    "is_close_to_int",
    "round_half_up",
    "format_number",
    "value_or_default",
]
