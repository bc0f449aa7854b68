"""Error types shared by the calculators, curve processor and routers."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ErrorType(str, Enum):
    """Error categories reported to API clients."""
    DATA_FETCH_ERROR = "DATA_FETCH_ERROR"
    CALCULATION_ERROR = "CALCULATION_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    API_ERROR = "API_ERROR"


class AppError(Exception):
    """Base application error carrying a type, details and a timestamp."""

    error_type: ErrorType = ErrorType.API_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.message,
            "type": self.error_type.value,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }


class CalculationError(AppError, ValueError):
    """Raised when calculator inputs violate their preconditions."""
    error_type = ErrorType.CALCULATION_ERROR


class CurveError(AppError, ValueError):
    """Raised when a curve cannot be resampled or transformed."""
    error_type = ErrorType.CALCULATION_ERROR


class DataFetchError(AppError):
    """Raised when sample market data cannot be loaded."""
    error_type = ErrorType.DATA_FETCH_ERROR
