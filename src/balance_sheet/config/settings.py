"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from balance_sheet.domain.models.enums import PriceSourceType


def get_default_data_dir() -> Path:
    """Return the default data directory (relative to the working directory)."""
    return Path("data")


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Balance Sheet Tracker"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # Data directory (cache file lives here)
    data_dir: Optional[Path] = None
    price_cache_file: str = "price_cache.csv"

    # Price data
    price_source_type: PriceSourceType = PriceSourceType.YAHOO_FINANCE
    csv_prices_path: Path = Path("data/current_prices.csv")
    http_timeout_seconds: float = Field(default=10.0, gt=0)
    cache_duration_hours: int = Field(default=24, ge=0)

    # Reporting
    historical_performance_interval_days: int = Field(default=7, ge=1)

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_price_cache_path(self) -> Path:
        """Get the full path of the persisted price cache."""
        return self.get_data_dir() / self.price_cache_file


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
