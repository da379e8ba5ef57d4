from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str
    db_pool_size: int = 5
    db_max_overflow: int = 10

    # Serverless routing
    function_prefix: str = "/.netlify/functions"

    # Inventory counts
    count_source: Literal["database", "synthetic"] = "database"
    synthetic_ttl_seconds: float = 300.0
    synthetic_max_items: int = 100

    # App
    app_name: str = "Inventario API"
    version: str = "1.0.0"
    debug: bool = False
    cors_origins: list[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    """Load settings from the environment once per process.

    Raises ``pydantic.ValidationError`` when ``DATABASE_URL`` is missing.
    """
    return Settings()
