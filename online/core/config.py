from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    # App Settings
    APP_NAME: str = "Mutual Fund Generator"

    # Catalog Settings (bundled CSV is used when CATALOG_PATH is empty)
    CATALOG_PATH: str | None = None

    # Recommendation Settings
    PAGE_SIZE: int = 10
    TOP_N: int = 3
    DEFAULT_RISK_TIER: str = "medium"
    CURRENCY_SYMBOL: str = "₹"

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

@lru_cache()
def get_settings():
    return Settings()
