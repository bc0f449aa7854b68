"""Application settings and configuration."""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FXARB_",
        case_sensitive=False,
        extra="ignore",
    )

    # Server settings
    port: int = 9000
    host: str = "0.0.0.0"
    debug: bool = False

    # CORS settings
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:8000"
    ]

    # API settings
    api_title: str = "FX Futures Arbitrage API"
    api_description: str = "Currency-futures basis monitoring and yield curve analytics"
    api_version: str = "0.1.0"

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"

    # Signal settings
    arbitrage_threshold_bps: float = 5.0
    quote_board_threshold: float = 0.5
    default_notional: float = 1_000_000.0
    default_contract_value: float = 100_000.0

    # Curve settings
    default_resolution: int = 100

    # Mock data settings
    simulated_latency_ms: int = 0
    data_dir: Optional[str] = None


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
