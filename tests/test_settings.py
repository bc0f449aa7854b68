"""
Tests for settings and error serialisation
"""
from fxarb.core.errors import AppError, CalculationError, CurveError, DataFetchError, ErrorType
from fxarb.settings import get_settings


class TestSettings:
    """Test configuration loading"""

    def test_defaults(self, monkeypatch):
        """Test default values"""
        monkeypatch.delenv("FXARB_ARBITRAGE_THRESHOLD_BPS", raising=False)
        settings = get_settings()

        assert settings.arbitrage_threshold_bps == 5.0
        assert settings.quote_board_threshold == 0.5
        assert settings.default_resolution == 100
        assert settings.simulated_latency_ms == 0

    def test_environment_override(self, monkeypatch):
        """Test prefixed environment variables override defaults"""
        monkeypatch.setenv("FXARB_ARBITRAGE_THRESHOLD_BPS", "7.5")
        monkeypatch.setenv("FXARB_LOG_FORMAT", "json")

        settings = get_settings()

        assert settings.arbitrage_threshold_bps == 7.5
        assert settings.log_format == "json"


class TestErrors:
    """Test error taxonomy"""

    def test_error_types(self):
        """Test each error carries its category"""
        assert CalculationError("x").error_type == ErrorType.CALCULATION_ERROR
        assert CurveError("x").error_type == ErrorType.CALCULATION_ERROR
        assert DataFetchError("x").error_type == ErrorType.DATA_FETCH_ERROR
        assert AppError("x").error_type == ErrorType.API_ERROR

    def test_to_dict(self):
        """Test serialised payload"""
        error = CurveError("Curve must contain at least one point", details={"points": 0})
        data = error.to_dict()

        assert data["error"] == "Curve must contain at least one point"
        assert data["type"] == "CALCULATION_ERROR"
        assert data["details"] == {"points": 0}
        assert "T" in data["timestamp"]

    def test_value_error_compatibility(self):
        """Test calculator errors are ValueErrors"""
        assert isinstance(CalculationError("x"), ValueError)
        assert isinstance(CurveError("x"), ValueError)
        assert not isinstance(DataFetchError("x"), ValueError)
