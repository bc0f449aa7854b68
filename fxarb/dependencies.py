"""FastAPI dependencies shared by the routers."""

from fastapi import Depends

from .data.catalog import MarketDataCatalog
from .settings import Settings, get_settings


def get_catalog(settings: Settings = Depends(get_settings)) -> MarketDataCatalog:
    """Catalog over the configured data directory."""
    return MarketDataCatalog(settings.data_dir)
