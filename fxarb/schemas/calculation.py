from typing import Optional
from pydantic import Field

from ..core.models import CamelModel


class ImpliedDifferentialRequest(CamelModel):
    """Inputs for the implied differential"""
    near_price: float = Field(..., description="Near contract price (F1)")
    far_price: float = Field(..., description="Far contract price (F2)")
    days_between: float = Field(..., description="Days between contract expiries")
    day_count_convention: int = Field(..., description="Day count convention (360 or 365)")


class ArbitrageRequest(ImpliedDifferentialRequest):
    """Inputs for a full arbitrage evaluation"""
    base_rate: float = Field(..., description="Base currency benchmark rate")
    quote_rate: float = Field(..., description="Quote currency benchmark rate")
    fx_basis: float = Field(0.0, description="FX basis swap spread")
    threshold: Optional[float] = Field(None, description="Opportunity threshold in basis points")
    notional: Optional[float] = Field(None, description="Notional in base currency", gt=0)
    contract_value: Optional[float] = Field(None, description="Value of one futures contract", gt=0)


class ArbitrageResponse(CamelModel):
    """Result of a full arbitrage evaluation"""
    implied_differential: float
    actual_differential: float
    basis_divergence: float
    is_opportunity: bool
    profit_potential: float
    threshold: float
    notional: float
    contract_value: float
