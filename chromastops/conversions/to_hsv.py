import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple
# No dependencies beyond numpy


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB (0..1) to HSV.

    Output:
        h ∈ [0, 360)
        s ∈ [0, 1]
        v ∈ [0, 1]

    Achromatic colors (r == g == b) get hue 0 and saturation 0.
    """
    v = max(r, g, b)
    m = min(r, g, b)
    delta = v - m

    if delta == 0:
        h = 0.0
    elif v == r:
        h = ((g - b) / delta) % 6
    elif v == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    h = (h * 60.0) % 360.0

    s = 0.0 if v == 0 else delta / v
    return h, s, v


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized unit RGB to HSV.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    v = np.maximum.reduce([r, g, b])
    m = np.minimum.reduce([r, g, b])
    delta = v - m

    safe_delta = np.where(delta == 0, 1.0, delta)
    h = np.select(
        [delta == 0, v == r, v == g],
        [
            np.zeros(out_shape),
            ((g - b) / safe_delta) % 6,
            (b - r) / safe_delta + 2,
        ],
        default=(r - g) / safe_delta + 4,
    )
    h = (h * 60.0) % 360.0

    s = np.where(v > 0, delta / np.where(v > 0, v, 1.0), 0.0)

    return np.stack([h, s, v], axis=-1)
