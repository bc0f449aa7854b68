from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..core.errors import DataFetchError
from ..core.marketdata.generators import build_quote_board, simulate_latency
from ..core.models import CurrencyPair, PairQuote
from ..core.calculations import is_arbitrage_opportunity
from ..data.catalog import MarketDataCatalog
from ..dependencies import get_catalog
from ..settings import Settings, get_settings

router = APIRouter(tags=["currency-pairs"])


def _quote_board(catalog: MarketDataCatalog, settings: Settings) -> List[PairQuote]:
    try:
        board_quotes = catalog.get_board_quotes()
    except FileNotFoundError as e:
        raise DataFetchError("Failed to load quote board", details={"reason": str(e)}) from e
    return build_quote_board(board_quotes, settings.quote_board_threshold)


@router.get("/currency-pairs", response_model=List[PairQuote])
async def get_quote_board(
    catalog: MarketDataCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings)
):
    """Quote board for every tracked pair"""
    await simulate_latency(settings.simulated_latency_ms)
    return _quote_board(catalog, settings)


@router.get("/currency-pairs/reference", response_model=List[CurrencyPair])
async def list_currency_pairs(
    active_only: bool = False,
    catalog: MarketDataCatalog = Depends(get_catalog)
):
    """Futures currency pair reference data"""
    try:
        pairs = catalog.get_currency_pairs()
    except FileNotFoundError as e:
        raise DataFetchError("Failed to load currency pairs", details={"reason": str(e)}) from e

    if active_only:
        pairs = [p for p in pairs if p.is_active]
    return pairs


@router.get("/currency-pairs/reference/{pair_id}", response_model=CurrencyPair)
async def get_currency_pair(pair_id: str, catalog: MarketDataCatalog = Depends(get_catalog)):
    """Reference data for one pair"""
    try:
        pair = catalog.get_currency_pair(pair_id)
    except FileNotFoundError as e:
        raise DataFetchError("Failed to load currency pairs", details={"reason": str(e)}) from e

    if pair is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Currency pair {pair_id} not found"
        )
    return pair


@router.get("/opportunities", response_model=List[PairQuote])
async def get_opportunities(
    threshold: float = Query(0.0, ge=0, description="Minimum absolute basis divergence"),
    catalog: MarketDataCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings)
):
    """Quote board rows whose divergence reaches the threshold, largest first"""
    await simulate_latency(settings.simulated_latency_ms)
    rows = [
        row for row in _quote_board(catalog, settings)
        if is_arbitrage_opportunity(row.basis_divergence, threshold)
    ]
    return sorted(rows, key=lambda r: abs(r.basis_divergence), reverse=True)
