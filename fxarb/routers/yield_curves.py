from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..core.curves import calculate_forward_rates, interpolate_curve, sort_curve_points
from ..core.curves.interpolation import MAX_RESOLUTION
from ..core.errors import DataFetchError
from ..core.logging import get_logger
from ..core.models import CurveType, YieldCurveData
from ..data.catalog import MarketDataCatalog
from ..data.validation import DataValidator
from ..dependencies import get_catalog
from ..schemas.curve import CurveProcessRequest, CurveProcessResponse
from ..settings import Settings, get_settings

router = APIRouter(prefix="/yield-curve", tags=["yield-curves"])
logger = get_logger(__name__)


def forward_curve_for(curve: YieldCurveData) -> YieldCurveData:
    """Forward curve companion of a zero curve"""
    return curve.model_copy(update={
        "curve_type": CurveType.FORWARD,
        "name": f"{curve.name} (Forward)",
        "points": calculate_forward_rates(curve.points)
    })


@router.get("", response_model=List[YieldCurveData])
async def get_yield_curves(
    id: Optional[str] = Query(None, description="Index of a single sample curve"),
    interpolate: bool = False,
    resolution: Optional[int] = Query(None, ge=1, le=MAX_RESOLUTION),
    forwards: bool = False,
    catalog: MarketDataCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings)
):
    """
    Sample yield curves, optionally resampled and with forward curves

    Forward curves are added after each zero curve and are derived from the
    (possibly resampled) points.
    """
    try:
        curves = catalog.get_yield_curves()
    except FileNotFoundError as e:
        raise DataFetchError("Failed to load yield curves", details={"reason": str(e)}) from e

    if id is not None:
        try:
            index = int(id)
        except ValueError:
            index = -1
        if index < 0 or index >= len(curves):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid curve ID"
            )
        curves = [curves[index]]

    if resolution is None:
        resolution = settings.default_resolution

    processed = []
    for curve in curves:
        if interpolate:
            curve = curve.model_copy(update={
                "points": interpolate_curve(curve.points, resolution, curve.curve_method)
            })
        processed.append(curve)

        if forwards and curve.curve_type == CurveType.ZERO:
            processed.append(forward_curve_for(curve))

    return processed


@router.post("/process", response_model=CurveProcessResponse)
async def process_curve(request: CurveProcessRequest, settings: Settings = Depends(get_settings)):
    """Resample and/or derive forward rates for caller supplied points"""
    validator = DataValidator()
    results = validator.validate_all(request.points)

    if validator.has_errors(results):
        error_messages = validator.get_error_messages(results)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Curve validation failed: {'; '.join(error_messages)}"
        )

    points = request.points
    if request.interpolate:
        resolution = request.resolution if request.resolution is not None else settings.default_resolution
        points = interpolate_curve(points, resolution, request.method)
    else:
        points = sort_curve_points(points)

    forward_points = None
    if request.forwards:
        forward_points = calculate_forward_rates(points)

    logger.info(
        "curve_processed",
        points=len(request.points),
        interpolate=request.interpolate,
        forwards=request.forwards
    )

    return CurveProcessResponse(
        points=points,
        forward_points=forward_points,
        warnings=validator.get_warning_messages(results)
    )
