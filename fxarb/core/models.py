"""Domain models for currency pairs, market snapshots and yield curves."""

from enum import Enum
from typing import Dict, List, Optional
from datetime import date as Date, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys for the dashboard."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Currency(str, Enum):
    """Supported currencies."""
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    CHF = "CHF"
    CAD = "CAD"
    AUD = "AUD"


class CurveType(str, Enum):
    """Yield curve flavours."""
    ZERO = "zero"
    PAR = "par"
    FORWARD = "forward"


class CurveMethod(str, Enum):
    """Curve construction method tags.

    Only ``linear`` corresponds to an algorithm; the others label how the
    sample curves were produced upstream.
    """
    CUBIC = "cubic"
    LINEAR = "linear"
    NSS = "nss"
    SMITH_WILSON = "smithwilson"


class InstrumentType(str, Enum):
    """Bootstrap instrument types."""
    DEPOSIT = "deposit"
    FRA = "fra"
    FUTURE = "future"
    SWAP = "swap"
    BOND = "bond"


class QuoteStatus(str, Enum):
    """Quote board row status."""
    NORMAL = "normal"
    OPPORTUNITY = "opportunity"


class TimeFrame(str, Enum):
    """Historical look-back windows and their length in days."""
    ONE_WEEK = "1W"
    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"

    @property
    def days(self) -> int:
        return _TIMEFRAME_DAYS[self.value]


_TIMEFRAME_DAYS = {"1W": 7, "1M": 30, "3M": 90, "6M": 180, "1Y": 365}


class BenchmarkRateTickers(CamelModel):
    """Benchmark rate identifiers for both legs of a pair."""
    base: str
    quote: str


class CurrencyPair(CamelModel):
    """Reference data for a futures-traded currency pair."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Pair identifier (e.g., 'CADUSD')")
    base_currency: Currency
    quote_currency: Currency
    near_contract_ticker: str
    far_contract_ticker: str
    day_count_convention: int = Field(..., description="360 or 365")
    basis_ticker: str
    benchmark_rate_ticker: BenchmarkRateTickers
    display_name: str
    is_active: bool = True


class MarketDataSnapshot(CamelModel):
    """Point-in-time reading for one pair with its derived differentials."""

    model_config = ConfigDict(frozen=True)

    id: str
    timestamp: datetime
    pair_id: str
    near_contract_price: float
    far_contract_price: float
    days_between: int
    base_rate: float
    quote_rate: float
    fx_basis: float
    implied_differential: float
    actual_differential: float
    basis_divergence: float


class PairQuote(CamelModel):
    """Quote board row."""
    symbol: str
    base_currency: Currency
    quote_currency: Currency
    spot_rate: float
    futures_rate: float
    days_to_expiry: int
    implied_differential: float
    actual_differential: float
    basis_divergence: float
    last_updated: datetime
    status: QuoteStatus = QuoteStatus.NORMAL


class HistoricalDataPoint(CamelModel):
    """One day of a synthetic differential history."""
    date: Date
    implied_differential: float
    actual_differential: float
    basis_divergence: float


class YieldCurvePoint(CamelModel):
    """Single point on a yield curve; rate in percent."""
    tenor: str
    years: float
    rate: float


class YieldCurveData(CamelModel):
    """A named yield curve with its points and construction tags."""
    date: Date
    name: str
    curve_type: CurveType
    currency: Currency
    curve_method: CurveMethod
    points: List[YieldCurvePoint]
    model_parameters: Optional[Dict[str, float]] = None


class BootstrapInput(CamelModel):
    """A market quote offered to the curve bootstrap."""
    type: InstrumentType
    tenor: str
    rate: float
    include_in_curve: bool = True


class CalculationSettings(CamelModel):
    """Curve calculation conventions echoed back with bootstrap results."""
    day_counter: str = "Actual365"
    compounding: str = "Continuous"
    frequency: str = "Annual"
    business_day_convention: str = "ModifiedFollowing"
    end_of_month: bool = True


class DifferentialInputs(CamelModel):
    """Inputs echoed with an implied differential."""
    near_price: float
    far_price: float
    days_between: float
    day_count_convention: int


class ImpliedDifferentialResult(CamelModel):
    """Implied differential with the formula and inputs that produced it."""
    value: float
    formula: str
    inputs: DifferentialInputs
