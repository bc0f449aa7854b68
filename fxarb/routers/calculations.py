from fastapi import APIRouter, Depends

from ..core.calculations import calculate_implied_differential, evaluate_pair
from ..core.models import ImpliedDifferentialResult
from ..schemas.calculation import ArbitrageRequest, ArbitrageResponse, ImpliedDifferentialRequest
from ..settings import Settings, get_settings

router = APIRouter(prefix="/calculations", tags=["calculations"])


@router.post("/implied-differential", response_model=ImpliedDifferentialResult)
async def implied_differential(request: ImpliedDifferentialRequest):
    """Implied interest rate differential between two futures contracts"""
    return calculate_implied_differential(
        request.near_price,
        request.far_price,
        request.days_between,
        request.day_count_convention
    )


@router.post("/arbitrage", response_model=ArbitrageResponse)
async def arbitrage(request: ArbitrageRequest, settings: Settings = Depends(get_settings)):
    """
    Evaluate a pair end to end

    Threshold, notional and contract value default to the configured values.
    """
    threshold = request.threshold if request.threshold is not None else settings.arbitrage_threshold_bps
    notional = request.notional if request.notional is not None else settings.default_notional
    contract_value = (
        request.contract_value if request.contract_value is not None else settings.default_contract_value
    )

    evaluation = evaluate_pair(
        near_price=request.near_price,
        far_price=request.far_price,
        days_between=request.days_between,
        day_count_convention=request.day_count_convention,
        base_rate=request.base_rate,
        quote_rate=request.quote_rate,
        fx_basis=request.fx_basis,
        threshold=threshold,
        notional=notional,
        contract_value=contract_value
    )

    return ArbitrageResponse(
        notional=notional,
        contract_value=contract_value,
        **evaluation.to_dict()
    )
