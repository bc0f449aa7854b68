from datetime import datetime, timezone
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from ..core.errors import DataFetchError
from ..core.logging import get_logger
from ..core.marketdata.generators import (
    generate_historical_data, generate_market_data, simulate_latency
)
from ..core.models import HistoricalDataPoint
from ..data.catalog import MarketDataCatalog
from ..dependencies import get_catalog
from ..schemas.market import MarketDataResponse
from ..settings import Settings, get_settings

router = APIRouter(tags=["market-data"])
logger = get_logger(__name__)


@router.get("/market-data", response_model=MarketDataResponse)
async def get_market_data(
    catalog: MarketDataCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings)
):
    """Current snapshot with derived differentials for every reference pair"""
    await simulate_latency(settings.simulated_latency_ms)

    try:
        pairs = catalog.get_currency_pairs()
        quotes = catalog.get_market_quotes()
    except FileNotFoundError as e:
        raise DataFetchError("Failed to fetch market data", details={"reason": str(e)}) from e

    now = datetime.now(timezone.utc)
    snapshots = generate_market_data(pairs, quotes, now=now)
    logger.info("market_data_generated", pairs=len(snapshots))

    return MarketDataResponse(data=snapshots, timestamp=now)


@router.get("/historical-data", response_model=List[HistoricalDataPoint])
async def get_historical_data(
    pair: str = Query("EURUSD", description="Pair symbol (e.g., 'EURUSD')"),
    timeframe: str = Query("1M", description="Look-back window: 1W, 1M, 3M, 6M or 1Y"),
    seed: Optional[int] = Query(None, description="Seed for a reproducible series"),
    catalog: MarketDataCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings)
):
    """Synthetic daily differential history for a pair"""
    try:
        params = catalog.get_historical_params()
    except FileNotFoundError as e:
        raise DataFetchError("Failed to generate historical data", details={"reason": str(e)}) from e

    history = generate_historical_data(pair, timeframe, params, seed=seed)
    await simulate_latency(settings.simulated_latency_ms)
    return history
