from pathlib import Path

from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

# =============================================================================
# PAGINATION DEFAULTS
# =============================================================================

# Items visible before the first "View More"
DEFAULT_PAGE_SIZE = 6

# Items added per "View More"
DEFAULT_PAGE_INCREMENT = 6


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="PREDICTBASE_")

    app_name: str = "PredictBase"
    debug: bool = False

    # Directory holding markets.json, traders.json, leagues.json, activity.json
    # Default: None (packaged predictbase/data directory)
    catalog_dir: Path | None = None

    page_size: PositiveInt = DEFAULT_PAGE_SIZE
    page_increment: PositiveInt = DEFAULT_PAGE_INCREMENT


settings = Settings()
