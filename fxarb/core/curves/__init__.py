"""
Yield curve processing module
"""
from .base import (
    tenor_to_years,
    tenor_label,
    sort_curve_points
)
from .interpolation import (
    interpolate_rate,
    interpolate_curve
)
from .forward import (
    forward_rate,
    calculate_forward_rates
)
from .bootstrap import (
    quotes_to_points,
    simulate_bootstrap
)

__all__ = [
    "tenor_to_years",
    "tenor_label",
    "sort_curve_points",
    "interpolate_rate",
    "interpolate_curve",
    "forward_rate",
    "calculate_forward_rates",
    "quotes_to_points",
    "simulate_bootstrap"
]
