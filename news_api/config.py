import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "News Articles API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./news.db"
    cors_origins: list[str] = ["http://localhost:3000"]
    host: str = "0.0.0.0"
    port: int = 3000

    # Listing cache
    cache_default_ttl: int = 300             # seconds
    cache_sweep_interval: int = 0            # seconds, 0 disables the sweeper

    # Pagination
    default_page_size: int = 10
    max_page_size: int = 100

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_cache: str = "INFO"            # in-process listing cache

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def model_post_init(self, __context: object) -> None:
        """Keep pagination and cache bounds usable even when misconfigured."""
        if self.max_page_size < 1:
            _config_logger.warning(
                "max_page_size=%d is invalid, falling back to 100", self.max_page_size
            )
            object.__setattr__(self, "max_page_size", 100)
        if not 1 <= self.default_page_size <= self.max_page_size:
            _config_logger.warning(
                "default_page_size=%d outside [1, %d], clamping",
                self.default_page_size,
                self.max_page_size,
            )
            object.__setattr__(
                self,
                "default_page_size",
                min(max(self.default_page_size, 1), self.max_page_size),
            )
        if self.cache_default_ttl < 0:
            _config_logger.warning("cache_default_ttl cannot be negative, using 0")
            object.__setattr__(self, "cache_default_ttl", 0)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
