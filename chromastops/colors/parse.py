"""
Color input parsing.

``parse`` turns the loose inputs a caller may hand to a gradient into a
``Color``:

- ``Color`` instances (returned as-is)
- hex strings: ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa`` (``#`` optional)
- CSS named colors and ``transparent``
- functional strings: ``rgb()``, ``rgba()``, ``hsv()``, ``hsva()``
- mappings with ``r, g, b[, a]`` or ``h, s, v[, a]`` keys
- 3 or 4 element tuples/lists of RGB (0..255) plus optional alpha
"""
from __future__ import annotations

import numbers
import re
from collections.abc import Mapping
from typing import Any, Sequence, Tuple, Union

import grapefruit

from ..exceptions import InvalidColor
from ..types.channel_types import RGBA, HSVA
from .color import Color

ColorInput = Union[Color, str, Mapping, Sequence[float]]

TRANSPARENT = "transparent"

_ALPHA_HEX_RE = re.compile(r"^#?([0-9a-f]{4}|[0-9a-f]{8})$")
_FUNC_RE = re.compile(r"^(rgba?|hsva?)\s*\(\s*(.*?)\s*\)$")
_NUMBER_RE = re.compile(r"^[-+]?(\d+(\.\d*)?|\.\d+)(e[-+]?\d+)?%?$")


def parse(value: ColorInput) -> Color:
    """
    Parse a color input.

    Raises:
        InvalidColor: if the input cannot be interpreted as a color
    """
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        return _parse_string(value)
    if isinstance(value, Mapping):
        return _parse_mapping(value)
    if isinstance(value, (tuple, list)):
        return _parse_sequence(value)
    raise InvalidColor(value, f"unsupported type {type(value).__name__}")


def _parse_string(value: str) -> Color:
    text = value.strip().lower()
    if not text:
        raise InvalidColor(value, "empty string")

    if text == TRANSPARENT:
        return Color(0, 0, 0, 0)

    match = _FUNC_RE.match(text)
    if match:
        return _parse_function(value, match.group(1), match.group(2))

    return _parse_html(value, text)


def _parse_html(original: str, text: str) -> Color:
    """Hex notation or CSS color name, read by grapefruit."""
    html, a = _split_hex_alpha(text)
    try:
        rgb = grapefruit.Color.NewFromHtml(html).rgb
    except ValueError as exc:
        raise InvalidColor(original, str(exc)) from exc
    r, g, b = (channel * 255.0 for channel in rgb)
    return Color(r, g, b, a)


def _split_hex_alpha(text: str) -> Tuple[str, float]:
    """Strip the alpha digits of ``#rgba`` / ``#rrggbbaa``; grapefruit only reads the color part."""
    match = _ALPHA_HEX_RE.match(text)
    if not match:
        return text, 1.0
    digits = match.group(1)
    if len(digits) == 4:
        return "#" + digits[:3], int(digits[3] * 2, 16) / 255.0
    return "#" + digits[:6], int(digits[6:], 16) / 255.0


def _parse_function(original: str, name: str, body: str) -> Color:
    parts = [p for p in re.split(r"\s*[,\s/]\s*", body) if p]
    has_alpha = name.endswith("a")
    expected = 4 if has_alpha else 3
    if len(parts) != expected or not all(_NUMBER_RE.match(p) for p in parts):
        raise InvalidColor(original, f"{name}() expects {expected} numeric components")

    if name.startswith("rgb"):
        r, g, b = (_component(p, 255.0) for p in parts[:3])
        a = _component(parts[3], 1.0) if has_alpha else 1.0
        return Color(r, g, b, a)

    h = float(parts[0].rstrip("%"))
    s, v = (_component(p, 1.0) for p in parts[1:3])
    a = _component(parts[3], 1.0) if has_alpha else 1.0
    return Color.from_hsv(HSVA(h, s, v, a))


def _component(text: str, scale: float) -> float:
    """Read a numeric component; ``%`` values are taken relative to ``scale``."""
    if text.endswith("%"):
        return float(text[:-1]) / 100.0 * scale
    return float(text)


def _number(value: Any, original: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidColor(original, f"non-numeric channel {value!r}")
    return float(value)


def _parse_mapping(value: Mapping) -> Color:
    keys = set(value)
    if {"r", "g", "b"} <= keys:
        r, g, b = (_number(value[k], value) for k in "rgb")
        a = _number(value.get("a", 1.0), value)
        return Color.from_rgb(RGBA(r, g, b, a))
    if {"h", "s", "v"} <= keys:
        h, s, v = (_number(value[k], value) for k in "hsv")
        a = _number(value.get("a", 1.0), value)
        return Color.from_hsv(HSVA(h, s, v, a))
    raise InvalidColor(value, "expected r/g/b or h/s/v keys")


def _parse_sequence(value: Sequence) -> Color:
    if len(value) not in (3, 4):
        raise InvalidColor(value, "expected 3 or 4 channels")
    channels = [_number(v, value) for v in value]
    return Color(*channels)
