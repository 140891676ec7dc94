from .gradient import Gradient, gradient, SAMPLE_RESOLUTION, CSS_DEFAULT_DIRECTIONS
from .stops import Stop, normalize_stops, reverse_stops
from .substeps import compute_substeps, validate_steps
from .segments import interpolate_rgb, interpolate_hsv, interpolate_hsv_segment

__all__ = [
    "Gradient",
    "gradient",
    "SAMPLE_RESOLUTION",
    "CSS_DEFAULT_DIRECTIONS",
    "Stop",
    "normalize_stops",
    "reverse_stops",
    "compute_substeps",
    "validate_steps",
    "interpolate_rgb",
    "interpolate_hsv",
    "interpolate_hsv_segment",
]
