from typing import List, Optional
from pydantic import Field

from ..core.curves.interpolation import MAX_RESOLUTION
from ..core.models import (
    BootstrapInput, CalculationSettings, CamelModel, CurveMethod,
    YieldCurveData, YieldCurvePoint
)


class BootstrapRequest(CamelModel):
    """Request to bootstrap a zero curve"""
    deposits: Optional[List[BootstrapInput]] = None
    swaps: Optional[List[BootstrapInput]] = None
    settings: Optional[CalculationSettings] = None


class BootstrapInputs(CamelModel):
    """Inputs echoed with a bootstrapped curve"""
    deposits: List[BootstrapInput]
    swaps: List[BootstrapInput]
    settings: CalculationSettings


class BootstrapResponse(CamelModel):
    """Bootstrapped curve with the inputs that produced it"""
    curve: YieldCurveData
    inputs: BootstrapInputs


class CurveProcessRequest(CamelModel):
    """Request to resample and/or derive forwards for custom points"""
    points: List[YieldCurvePoint]
    interpolate: bool = False
    resolution: Optional[int] = Field(
        None, ge=1, le=MAX_RESOLUTION,
        description="Number of grid intervals (defaults to the configured resolution)"
    )
    forwards: bool = False
    method: CurveMethod = CurveMethod.LINEAR


class CurveProcessResponse(CamelModel):
    """Processed curve points"""
    points: List[YieldCurvePoint]
    forward_points: Optional[List[YieldCurvePoint]] = None
    warnings: List[str] = []
