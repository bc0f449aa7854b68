import pandas as pd
from typing import Dict, List, Optional
from pathlib import Path
from datetime import date

from ..core.models import (
    BenchmarkRateTickers, BootstrapInput, CurrencyPair, YieldCurveData,
    YieldCurvePoint
)

_BOOL_VALUES = {"true_values": ["true", "True"], "false_values": ["false", "False"]}


class MarketQuote:
    """Sample futures prices, benchmark rates and FX basis for one pair"""
    def __init__(self, pair_id: str, near_contract_price: float, far_contract_price: float,
                 base_rate: float, quote_rate: float, fx_basis: float):
        self.pair_id = pair_id
        self.near_contract_price = near_contract_price
        self.far_contract_price = far_contract_price
        self.base_rate = base_rate
        self.quote_rate = quote_rate
        self.fx_basis = fx_basis


class BoardQuote:
    """Quote board sample row"""
    def __init__(self, symbol: str, base_currency: str, quote_currency: str, spot_rate: float,
                 futures_rate: float, days_to_expiry: int, implied_differential: float,
                 actual_differential: float, basis_divergence: float):
        self.symbol = symbol
        self.base_currency = base_currency
        self.quote_currency = quote_currency
        self.spot_rate = spot_rate
        self.futures_rate = futures_rate
        self.days_to_expiry = days_to_expiry
        self.implied_differential = implied_differential
        self.actual_differential = actual_differential
        self.basis_divergence = basis_divergence


class HistoricalParams:
    """Random walk anchors for a pair's synthetic history"""
    def __init__(self, pair: str, spot: float, futures_adjustment: float,
                 actual_rate: float, day_count_convention: int):
        self.pair = pair
        self.spot = spot
        self.futures_adjustment = futures_adjustment
        self.actual_rate = actual_rate
        self.day_count_convention = day_count_convention


class MarketDataCatalog:
    """Catalog for loading the sample market data sets"""

    def __init__(self, data_dir: Optional[str] = None):
        if data_dir is None:
            # Default to samples directory
            self.data_dir = Path(__file__).parent / "samples"
        else:
            self.data_dir = Path(data_dir)

    def _read(self, filename: str) -> pd.DataFrame:
        file_path = self.data_dir / filename

        if not file_path.exists():
            raise FileNotFoundError(f"Sample file not found: {file_path}")

        return pd.read_csv(file_path, **_BOOL_VALUES)

    def get_currency_pairs(self) -> List[CurrencyPair]:
        """Get futures currency pair reference data"""
        df = self._read("currency_pairs.csv")

        pairs = []
        for _, row in df.iterrows():
            pairs.append(CurrencyPair(
                id=row['id'],
                base_currency=row['base_currency'],
                quote_currency=row['quote_currency'],
                near_contract_ticker=row['near_contract_ticker'],
                far_contract_ticker=row['far_contract_ticker'],
                day_count_convention=int(row['day_count_convention']),
                basis_ticker=row['basis_ticker'],
                benchmark_rate_ticker=BenchmarkRateTickers(
                    base=row['benchmark_base'],
                    quote=row['benchmark_quote']
                ),
                display_name=row['display_name'],
                is_active=bool(row['is_active'])
            ))

        return pairs

    def get_currency_pair(self, pair_id: str) -> Optional[CurrencyPair]:
        """Get a single currency pair by id"""
        for pair in self.get_currency_pairs():
            if pair.id == pair_id.upper():
                return pair
        return None

    def get_market_quotes(self) -> Dict[str, MarketQuote]:
        """Get sample market quotes keyed by pair id"""
        df = self._read("market_quotes.csv")

        quotes = {}
        for _, row in df.iterrows():
            quotes[row['pair_id']] = MarketQuote(
                pair_id=row['pair_id'],
                near_contract_price=float(row['near_contract_price']),
                far_contract_price=float(row['far_contract_price']),
                base_rate=float(row['base_rate']),
                quote_rate=float(row['quote_rate']),
                fx_basis=float(row['fx_basis'])
            )

        return quotes

    def get_board_quotes(self) -> List[BoardQuote]:
        """Get quote board sample rows"""
        df = self._read("quote_board.csv")

        return [
            BoardQuote(
                symbol=row['symbol'],
                base_currency=row['base_currency'],
                quote_currency=row['quote_currency'],
                spot_rate=float(row['spot_rate']),
                futures_rate=float(row['futures_rate']),
                days_to_expiry=int(row['days_to_expiry']),
                implied_differential=float(row['implied_differential']),
                actual_differential=float(row['actual_differential']),
                basis_divergence=float(row['basis_divergence'])
            )
            for _, row in df.iterrows()
        ]

    def get_historical_params(self) -> Dict[str, HistoricalParams]:
        """Get random walk anchors keyed by pair symbol"""
        df = self._read("historical_params.csv")

        params = {}
        for _, row in df.iterrows():
            params[row['pair']] = HistoricalParams(
                pair=row['pair'],
                spot=float(row['spot']),
                futures_adjustment=float(row['futures_adjustment']),
                actual_rate=float(row['actual_rate']),
                day_count_convention=int(row['day_count_convention'])
            )

        return params

    def get_yield_curves(self, as_of: Optional[date] = None) -> List[YieldCurveData]:
        """
        Get the sample yield curves in catalog order

        Args:
            as_of: Date stamped on every curve (defaults to today)

        Returns:
            List of YieldCurveData
        """
        if as_of is None:
            as_of = date.today()

        curves_df = self._read("yield_curves.csv")
        points_df = self._read("yield_curve_points.csv")
        params_df = self._read("curve_model_parameters.csv")

        curves = []
        for _, row in curves_df.sort_values("curve_id").iterrows():
            curve_id = row['curve_id']
            curve_points = points_df[points_df['curve_id'] == curve_id]
            curve_params = params_df[params_df['curve_id'] == curve_id]

            model_parameters = None
            if not curve_params.empty:
                model_parameters = {
                    p['parameter']: float(p['value']) for _, p in curve_params.iterrows()
                }

            curves.append(YieldCurveData(
                date=as_of,
                name=row['name'],
                curve_type=row['curve_type'],
                currency=row['currency'],
                curve_method=row['curve_method'],
                points=[
                    YieldCurvePoint(tenor=p['tenor'], years=float(p['years']), rate=float(p['rate']))
                    for _, p in curve_points.iterrows()
                ],
                model_parameters=model_parameters
            ))

        return curves

    def get_bootstrap_inputs(self, instrument_type: str) -> List[BootstrapInput]:
        """Get sample bootstrap quotes of one instrument type"""
        df = self._read("bootstrap_quotes.csv")
        df = df[df['type'] == instrument_type]

        return [
            BootstrapInput(
                type=row['type'],
                tenor=row['tenor'],
                rate=float(row['rate']),
                include_in_curve=bool(row['include_in_curve'])
            )
            for _, row in df.iterrows()
        ]

    def get_sample_deposits(self) -> List[BootstrapInput]:
        """Get sample deposit quotes"""
        return self.get_bootstrap_inputs("deposit")

    def get_sample_swaps(self) -> List[BootstrapInput]:
        """Get sample swap quotes"""
        return self.get_bootstrap_inputs("swap")
