from typing import Tuple


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Convert HSV (hue in degrees, s and v on 0..1) to unit RGB."""
    h = (h % 360.0) / 60.0
    i = int(h) % 6
    f = h - int(h)
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    return (
        (v, q, p, p, t, v)[i],
        (t, v, v, q, p, p)[i],
        (p, p, t, v, v, q)[i],
    )

