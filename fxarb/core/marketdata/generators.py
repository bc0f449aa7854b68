"""Synthetic market data for the dashboard endpoints.

Snapshots and the quote board come from fixed sample quotes pushed through
the differential calculator. Historical series are random walks around
per-pair anchors, generated with a seedable numpy ``Generator`` so tests
can reproduce them.
"""

import asyncio
from datetime import date, datetime, timezone
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

from ..calculations import (
    calculate_actual_differential,
    calculate_basis_divergence,
    calculate_implied_differential,
    is_arbitrage_opportunity,
)
from ..logging import get_logger
from ..models import (
    CurrencyPair, HistoricalDataPoint, MarketDataSnapshot, PairQuote,
    QuoteStatus, TimeFrame
)

logger = get_logger(__name__)

# Days between consecutive quarterly contracts
DAYS_BETWEEN_CONTRACTS = 91
# Standard futures tenor used for the historical series
DAYS_TO_EXPIRY = 90
DEFAULT_PAIR = "EURUSD"
DEFAULT_DAYS = 30


def generate_market_data(pairs: List[CurrencyPair], quotes: Dict, now: Optional[datetime] = None) -> List[MarketDataSnapshot]:
    """
    Build one snapshot per pair from the sample quotes

    Args:
        pairs: Currency pair reference data
        quotes: Sample quotes keyed by pair id
        now: Snapshot timestamp (defaults to the current UTC time)

    Returns:
        List of MarketDataSnapshot
    """
    if now is None:
        now = datetime.now(timezone.utc)

    stamp = int(now.timestamp() * 1000)
    snapshots = []

    for pair in pairs:
        quote = quotes.get(pair.id)
        if quote is None:
            logger.warning("market_quote_missing", pair_id=pair.id)
            continue

        implied = calculate_implied_differential(
            quote.near_contract_price,
            quote.far_contract_price,
            DAYS_BETWEEN_CONTRACTS,
            pair.day_count_convention
        )
        actual = calculate_actual_differential(quote.base_rate, quote.quote_rate)
        divergence = calculate_basis_divergence(implied.value, actual, quote.fx_basis)

        snapshots.append(MarketDataSnapshot(
            id=f"{pair.id}-{stamp}",
            timestamp=now,
            pair_id=pair.id,
            near_contract_price=quote.near_contract_price,
            far_contract_price=quote.far_contract_price,
            days_between=DAYS_BETWEEN_CONTRACTS,
            base_rate=quote.base_rate,
            quote_rate=quote.quote_rate,
            fx_basis=quote.fx_basis,
            implied_differential=implied.value,
            actual_differential=actual,
            basis_divergence=divergence
        ))

    return snapshots


def build_quote_board(board_quotes: List, threshold: float, now: Optional[datetime] = None) -> List[PairQuote]:
    """
    Build quote board rows, flagging pairs whose divergence reaches the threshold

    Args:
        board_quotes: Sample board rows
        threshold: Divergence threshold for the opportunity status
        now: Last-updated timestamp (defaults to the current UTC time)

    Returns:
        List of PairQuote
    """
    if now is None:
        now = datetime.now(timezone.utc)

    rows = []
    for quote in board_quotes:
        status = (
            QuoteStatus.OPPORTUNITY
            if is_arbitrage_opportunity(quote.basis_divergence, threshold)
            else QuoteStatus.NORMAL
        )
        rows.append(PairQuote(
            symbol=quote.symbol,
            base_currency=quote.base_currency,
            quote_currency=quote.quote_currency,
            spot_rate=quote.spot_rate,
            futures_rate=quote.futures_rate,
            days_to_expiry=quote.days_to_expiry,
            implied_differential=quote.implied_differential,
            actual_differential=quote.actual_differential,
            basis_divergence=quote.basis_divergence,
            last_updated=now,
            status=status
        ))

    return rows


def timeframe_days(timeframe: str) -> int:
    """Length of a look-back window in days; unknown windows fall back to 30."""
    try:
        return TimeFrame(timeframe.upper()).days
    except ValueError:
        return DEFAULT_DAYS


def _fluctuation(rng: np.random.Generator, magnitude: float = 0.05, size=None):
    return (rng.random(size) - 0.5) * magnitude


def generate_historical_data(
    pair: str,
    timeframe: str,
    params: Dict,
    seed: Optional[int] = None,
    end: Optional[date] = None
) -> List[HistoricalDataPoint]:
    """
    Generate a daily differential history for a pair

    Spot follows a linear trend with an occasional one-day shock and daily
    noise; the futures price carries a pair-specific premium over spot with
    its own noise; the actual differential wobbles around its anchor.

    Args:
        pair: Pair symbol (unknown symbols use EURUSD anchors)
        timeframe: Look-back window ("1W", "1M", "3M", "6M", "1Y")
        params: Random walk anchors keyed by pair symbol
        seed: Seed for reproducible series
        end: Last date of the series (defaults to today)

    Returns:
        List of HistoricalDataPoint, oldest first
    """
    if end is None:
        end = date.today()

    days = timeframe_days(timeframe)
    base = params.get(pair.upper()) or params[DEFAULT_PAIR]
    rng = np.random.default_rng(seed)

    trend_direction = 1 if rng.random() > 0.5 else -1
    # Trend and shock sizes are in percent of spot
    trend_magnitude = rng.random() * 0.5
    shock_day = int(rng.integers(0, days))
    has_shock = rng.random() > 0.7
    shock_magnitude = (rng.random() * 0.3 + 0.2) * (1 if rng.random() > 0.5 else -1)

    dates = pd.date_range(end=pd.Timestamp(end), periods=days, freq="D")
    # Days back from the end of the window
    days_back = np.arange(days - 1, -1, -1)

    trend = trend_direction * trend_magnitude * (1 - days_back / days)
    shock = np.where(has_shock & (days_back == shock_day), shock_magnitude, 0.0)
    daily = _fluctuation(rng, size=days)

    spot = base.spot * (1 + (trend + shock + daily) * 0.01)
    futures_noise = daily + _fluctuation(rng, 0.02, size=days)
    futures = spot * (1 + base.futures_adjustment / 100 + futures_noise * 0.01)
    actual_rate = base.actual_rate + _fluctuation(rng, 0.03, size=days)

    frame = pd.DataFrame(
        {"spot": spot, "futures": futures, "actual_rate": actual_rate},
        index=dates
    )

    history = []
    for day, row in frame.iterrows():
        implied = calculate_implied_differential(
            float(row["spot"]),
            float(row["futures"]),
            DAYS_TO_EXPIRY,
            base.day_count_convention
        )
        actual = calculate_actual_differential(float(row["actual_rate"]), 0.0)
        history.append(HistoricalDataPoint(
            date=day.date(),
            implied_differential=implied.value,
            actual_differential=actual,
            basis_divergence=calculate_basis_divergence(implied.value, actual, 0.0)
        ))

    logger.debug("historical_data_generated", pair=pair, timeframe=timeframe, points=len(history))
    return history


async def simulate_latency(milliseconds: int) -> None:
    """Sleep to mimic an upstream market data call."""
    if milliseconds > 0:
        await asyncio.sleep(milliseconds / 1000)
