"""Zero curve assembly from deposit and swap quotes."""

from datetime import date
from typing import List, Optional

from ..logging import get_logger
from ..models import (
    BootstrapInput, CalculationSettings, Currency, CurveMethod, CurveType,
    YieldCurveData, YieldCurvePoint
)
from .base import sort_curve_points, tenor_to_years

logger = get_logger(__name__)

BOOTSTRAP_CURVE_NAME = "USD OIS Curve (Bootstrapped)"


def quotes_to_points(quotes: List[BootstrapInput]) -> List[YieldCurvePoint]:
    """Convert the quotes flagged for inclusion into curve points"""
    return [
        YieldCurvePoint(tenor=q.tenor, years=tenor_to_years(q.tenor), rate=q.rate)
        for q in quotes
        if q.include_in_curve
    ]


def simulate_bootstrap(
    deposits: List[BootstrapInput],
    swaps: List[BootstrapInput],
    settings: CalculationSettings,
    as_of: Optional[date] = None
) -> YieldCurveData:
    """
    Build a USD OIS zero curve from deposit and swap quotes

    Quoted rates are placed on the curve at their tenor; no solver is run.

    Args:
        deposits: Short-end deposit quotes
        swaps: Swap quotes
        settings: Calculation conventions for the curve
        as_of: Curve date (defaults to today)

    Returns:
        Zero curve with points sorted by maturity
    """
    if as_of is None:
        as_of = date.today()

    points = sort_curve_points(quotes_to_points(deposits) + quotes_to_points(swaps))

    logger.info(
        "bootstrap_completed",
        deposits=len(deposits),
        swaps=len(swaps),
        points=len(points),
        day_counter=settings.day_counter,
        compounding=settings.compounding
    )

    return YieldCurveData(
        date=as_of,
        name=BOOTSTRAP_CURVE_NAME,
        curve_type=CurveType.ZERO,
        currency=Currency.USD,
        curve_method=CurveMethod.CUBIC,
        points=points
    )
