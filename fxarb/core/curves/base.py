import math
from typing import List

from ..models import YieldCurvePoint

_TENOR_UNITS = {
    "D": 365.0,
    "W": 52.0,
    "M": 12.0,
    "Y": 1.0,
}


def tenor_to_years(tenor: str) -> float:
    """
    Convert a tenor label to a year fraction

    Days count against 365 and weeks against 52. Unknown units map to 0.

    Args:
        tenor: Tenor string (e.g., "1D", "2W", "3M", "10Y")

    Returns:
        Year fraction
    """
    tenor = tenor.strip().upper()
    unit = tenor[-1:]
    if unit not in _TENOR_UNITS:
        return 0.0

    try:
        value = float(tenor[:-1])
    except ValueError:
        return 0.0

    return value / _TENOR_UNITS[unit]


def tenor_label(years: float) -> str:
    """
    Build a tenor label for a synthesized curve point

    Months below one year, whole years when integral, otherwise years to
    two decimals.
    """
    if years < 1:
        # half-up, not banker's rounding
        return f"{int(math.floor(years * 12 + 0.5))}M"
    if years == math.floor(years):
        return f"{int(years)}Y"
    return f"{years:.2f}Y"


def sort_curve_points(points: List[YieldCurvePoint]) -> List[YieldCurvePoint]:
    """Return a new list of points ordered by year fraction."""
    return sorted(points, key=lambda p: p.years)
