from datetime import datetime
from typing import List

from ..core.models import CamelModel, MarketDataSnapshot


class MarketDataResponse(CamelModel):
    """Market data snapshots for every reference pair"""
    data: List[MarketDataSnapshot]
    timestamp: datetime
    message: str = "Market data retrieved successfully"
