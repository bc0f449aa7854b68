"""Linear resampling of yield curve points."""

from typing import List, Optional, Union

import numpy as np

from ..errors import CurveError
from ..logging import get_logger
from ..models import CurveMethod, YieldCurvePoint
from .base import sort_curve_points, tenor_label

logger = get_logger(__name__)

# Upper bound on grid intervals accepted from API callers
MAX_RESOLUTION = 10_000


def interpolate_rate(points: List[YieldCurvePoint], years: float) -> float:
    """
    Linearly interpolate the rate at a year fraction

    The bracketing pair is the last adjacent pair with
    ``lower.years <= years <= upper.years``; without one, the first and last
    points are used.

    Args:
        points: Curve points sorted by year fraction
        years: Target year fraction

    Returns:
        Interpolated rate
    """
    if not points:
        raise CurveError("Cannot interpolate an empty curve")

    lower = points[0]
    upper = points[-1]

    for left, right in zip(points, points[1:]):
        if left.years <= years <= right.years:
            lower, upper = left, right

    if upper.years == lower.years:
        return lower.rate

    return lower.rate + (upper.rate - lower.rate) * (years - lower.years) / (upper.years - lower.years)


def interpolate_curve(
    points: List[YieldCurvePoint],
    resolution: int = 100,
    method: Optional[Union[CurveMethod, str]] = CurveMethod.LINEAR
) -> List[YieldCurvePoint]:
    """
    Resample a curve onto an evenly spaced grid

    Produces ``resolution + 1`` points from the shortest to the longest year
    fraction. Every method tag is resampled linearly.

    Args:
        points: Curve points in any order
        resolution: Number of grid intervals
        method: Curve method tag of the source curve

    Returns:
        Resampled points with synthesized tenor labels
    """
    if not points:
        raise CurveError("Curve must contain at least one point")
    if resolution < 1:
        raise CurveError(
            "Resolution must be at least 1",
            details={"resolution": resolution}
        )

    sorted_points = sort_curve_points(points)
    grid = np.linspace(sorted_points[0].years, sorted_points[-1].years, resolution + 1)

    interpolated = []
    for years in grid.tolist():
        interpolated.append(YieldCurvePoint(
            tenor=tenor_label(years),
            years=years,
            rate=interpolate_rate(sorted_points, years)
        ))

    logger.debug(
        "curve_interpolated",
        method=CurveMethod(method).value if method else CurveMethod.LINEAR.value,
        source_points=len(points),
        resolution=resolution
    )
    return interpolated
