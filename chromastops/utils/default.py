from typing import Optional, TypeVar

T = TypeVar('T')


def value_or_default(value: Optional[T], default: T) -> T:
    """Return ``value`` unless it is None (empty strings count as missing too)."""
    if value is None or value == "":
        return default
    return value
