"""Forward rate derivation from zero rates."""

from typing import List

from ..errors import CurveError
from ..models import YieldCurvePoint
from .base import sort_curve_points


def forward_rate(t1: float, r1: float, t2: float, r2: float) -> float:
    """
    Forward rate between two annually compounded zero rates

    Args:
        t1: Earlier year fraction
        r1: Zero rate to t1 in percent
        t2: Later year fraction
        r2: Zero rate to t2 in percent

    Returns:
        Forward rate between t1 and t2 in percent
    """
    if t2 == t1:
        raise CurveError(
            "Cannot derive a forward rate between equal year fractions",
            details={"years": t1}
        )

    for years, rate in ((t1, r1), (t2, r2)):
        if 1 + rate / 100 <= 0:
            raise CurveError(
                "Zero rates must be above -100% to compound",
                details={"years": years, "rate": rate}
            )

    try:
        growth = (1 + r2 / 100) ** t2 / (1 + r1 / 100) ** t1
    except (OverflowError, ZeroDivisionError) as e:
        raise CurveError(
            "Forward rate overflows",
            details={"t1": t1, "r1": r1, "t2": t2, "r2": r2}
        ) from e

    return (growth - 1) / (t2 - t1) * 100


def calculate_forward_rates(zero_points: List[YieldCurvePoint]) -> List[YieldCurvePoint]:
    """
    Project one-period forward rates from a zero curve

    The first point is returned unchanged; every later point carries the
    forward rate from its predecessor.

    Args:
        zero_points: Zero rate points (percent) in any order

    Returns:
        Forward rate points sorted by year fraction
    """
    if len(zero_points) < 2:
        raise CurveError(
            "Forward rate derivation needs at least two points",
            details={"points": len(zero_points)}
        )

    sorted_points = sort_curve_points(zero_points)
    forward_points = [sorted_points[0].model_copy()]

    for prev_point, point in zip(sorted_points, sorted_points[1:]):
        forward_points.append(YieldCurvePoint(
            tenor=point.tenor,
            years=point.years,
            rate=forward_rate(prev_point.years, prev_point.rate, point.years, point.rate)
        ))

    return forward_points
