"""Interest-rate differential calculations for currency futures pairs."""

import math
from dataclasses import dataclass, asdict
from typing import Any, Dict

from .errors import CalculationError
from .logging import get_logger
from .models import DifferentialInputs, ImpliedDifferentialResult

logger = get_logger(__name__)

IMPLIED_DIFFERENTIAL_FORMULA = "[(F2/F1)^(DC/days) - 1] × 100"
SUPPORTED_DAY_COUNTS = (360, 365)
DEFAULT_THRESHOLD_BPS = 5.0


def calculate_implied_differential(
    near_price: float,
    far_price: float,
    days_between: float,
    day_count_convention: int
) -> ImpliedDifferentialResult:
    """
    Calculate the implied interest rate differential between two futures contracts

    Uses [(F2/F1)^(DC/days) - 1] × 100.

    Args:
        near_price: Price of the near-term contract (F1)
        far_price: Price of the far-term contract (F2)
        days_between: Days between the two contract expiries
        day_count_convention: 360 or 365 depending on the currency

    Returns:
        Implied differential with the formula and inputs used
    """
    if near_price <= 0 or far_price <= 0:
        logger.warning("calculation_rejected", reason="non_positive_price",
                       near_price=near_price, far_price=far_price)
        raise CalculationError(
            "Contract prices must be positive",
            details={"near_price": near_price, "far_price": far_price}
        )

    if days_between <= 0:
        logger.warning("calculation_rejected", reason="non_positive_days",
                       days_between=days_between)
        raise CalculationError(
            "Days between contracts must be positive",
            details={"days_between": days_between}
        )

    if day_count_convention not in SUPPORTED_DAY_COUNTS:
        logger.warning("calculation_rejected", reason="unsupported_day_count",
                       day_count_convention=day_count_convention)
        raise CalculationError(
            "Day count convention must be 360 or 365",
            details={"day_count_convention": day_count_convention}
        )

    price_ratio = far_price / near_price
    exponent = day_count_convention / days_between
    try:
        implied = (math.pow(price_ratio, exponent) - 1) * 100
    except OverflowError as e:
        logger.warning("calculation_rejected", reason="overflow",
                       price_ratio=price_ratio, exponent=exponent)
        raise CalculationError(
            "Implied differential overflows",
            details={
                "near_price": near_price,
                "far_price": far_price,
                "days_between": days_between,
                "day_count_convention": day_count_convention
            }
        ) from e

    return ImpliedDifferentialResult(
        value=implied,
        formula=IMPLIED_DIFFERENTIAL_FORMULA,
        inputs=DifferentialInputs(
            near_price=near_price,
            far_price=far_price,
            days_between=days_between,
            day_count_convention=int(day_count_convention)
        )
    )


def calculate_actual_differential(base_rate: float, quote_rate: float) -> float:
    """Actual differential between the base and quote benchmark rates."""
    return base_rate - quote_rate


def calculate_basis_divergence(
    implied_differential: float,
    actual_differential: float,
    fx_basis: float
) -> float:
    """Implied minus actual differential, net of the FX basis swap spread."""
    return implied_differential - actual_differential - fx_basis


def is_arbitrage_opportunity(basis_divergence: float, threshold: float = DEFAULT_THRESHOLD_BPS) -> bool:
    """True when the divergence magnitude reaches the threshold (basis points)."""
    return abs(basis_divergence) >= threshold


def calculate_profit_potential(
    basis_divergence: float,
    notional: float,
    contract_value: float
) -> float:
    """
    Calculate the profit potential of an arbitrage opportunity

    Args:
        basis_divergence: Basis divergence in basis points
        notional: Notional amount in base currency
        contract_value: Value of one futures contract

    Returns:
        Potential profit for the whole number of contracts that fit the notional
    """
    if contract_value <= 0:
        raise CalculationError(
            "Contract value must be positive",
            details={"contract_value": contract_value}
        )

    # 1 bp = 0.0001
    decimal_divergence = abs(basis_divergence) / 10000
    num_contracts = math.floor(notional / contract_value)

    return num_contracts * contract_value * decimal_divergence


@dataclass
class ArbitrageEvaluation:
    """Full differential chain for one set of market inputs"""
    implied_differential: float
    actual_differential: float
    basis_divergence: float
    is_opportunity: bool
    profit_potential: float
    threshold: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def evaluate_pair(
    near_price: float,
    far_price: float,
    days_between: float,
    day_count_convention: int,
    base_rate: float,
    quote_rate: float,
    fx_basis: float,
    threshold: float = DEFAULT_THRESHOLD_BPS,
    notional: float = 1_000_000.0,
    contract_value: float = 100_000.0
) -> ArbitrageEvaluation:
    """
    Run implied, actual, divergence, signal and profit calculations together

    Returns:
        ArbitrageEvaluation for the given inputs
    """
    implied = calculate_implied_differential(near_price, far_price, days_between, day_count_convention)
    actual = calculate_actual_differential(base_rate, quote_rate)
    divergence = calculate_basis_divergence(implied.value, actual, fx_basis)

    return ArbitrageEvaluation(
        implied_differential=implied.value,
        actual_differential=actual,
        basis_divergence=divergence,
        is_opportunity=is_arbitrage_opportunity(divergence, threshold),
        profit_potential=calculate_profit_potential(divergence, notional, contract_value),
        threshold=threshold
    )
