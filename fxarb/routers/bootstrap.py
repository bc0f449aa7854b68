from fastapi import APIRouter, Depends, HTTPException, status

from ..core.curves import quotes_to_points, simulate_bootstrap
from ..core.errors import DataFetchError
from ..core.models import CalculationSettings
from ..data.catalog import MarketDataCatalog
from ..data.validation import DataValidator
from ..dependencies import get_catalog
from ..schemas.curve import BootstrapInputs, BootstrapRequest, BootstrapResponse

router = APIRouter(prefix="/bootstrap", tags=["bootstrap"])


@router.get("", response_model=BootstrapResponse)
async def bootstrap_sample_curve(catalog: MarketDataCatalog = Depends(get_catalog)):
    """Bootstrap the USD OIS curve from the sample deposits and swaps"""
    try:
        deposits = catalog.get_sample_deposits()
        swaps = catalog.get_sample_swaps()
    except FileNotFoundError as e:
        raise DataFetchError("Failed to load bootstrap quotes", details={"reason": str(e)}) from e

    settings = CalculationSettings()
    curve = simulate_bootstrap(deposits, swaps, settings)

    return BootstrapResponse(
        curve=curve,
        inputs=BootstrapInputs(deposits=deposits, swaps=swaps, settings=settings)
    )


@router.post("", response_model=BootstrapResponse)
async def bootstrap_curve(request: BootstrapRequest):
    """Bootstrap a curve from caller supplied deposits and swaps"""
    if request.deposits is None or request.swaps is None or request.settings is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required inputs"
        )

    points = quotes_to_points(request.deposits) + quotes_to_points(request.swaps)
    validator = DataValidator()
    results = validator.validate_unique_maturities(points)

    if validator.has_errors(results):
        error_messages = validator.get_error_messages(results)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Data validation failed: {'; '.join(error_messages)}"
        )

    curve = simulate_bootstrap(request.deposits, request.swaps, request.settings)

    return BootstrapResponse(
        curve=curve,
        inputs=BootstrapInputs(
            deposits=request.deposits,
            swaps=request.swaps,
            settings=request.settings
        )
    )
