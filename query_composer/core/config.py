"""Query composer configuration management."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Query composer settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="QUERY_COMPOSER_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=True,
    )

    # Application
    APP_NAME: str = "query-composer"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False

    # Monitoring
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Pagination
    DEFAULT_PER_PAGE: int = Field(default=15, ge=1)
    MAX_PER_PAGE: int = Field(default=100, ge=1)

    # Query string parameter names
    FILTER_PARAM: str = "filter"
    SEARCH_PARAM: str = "search"
    SORT_PARAM: str = "sort"
    DIRECTION_PARAM: str = "direction"
    PAGE_PARAM: str = "page"
    PER_PAGE_PARAM: str = "per_page"

    def clamp_per_page(self, per_page: int) -> int:
        """Clamp a requested page size into ``[1, MAX_PER_PAGE]``."""
        return max(1, min(per_page, self.MAX_PER_PAGE))


settings = Settings()
