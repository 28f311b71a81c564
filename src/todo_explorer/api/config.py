"""Todo API settings."""

from functools import lru_cache
from pathlib import Path
import os

from pydantic_settings import BaseSettings

from todo_explorer.config.settings import config

DEV_ORIGINS = ["http://localhost:8501", "http://localhost:3000", "http://localhost:5173"]


def _parse_allowed_origins() -> list[str]:
    """Comma-separated ``TODO_ALLOWED_ORIGINS``, or the local dev front-ends."""
    raw = os.getenv("TODO_ALLOWED_ORIGINS", "")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or DEV_ORIGINS


class Settings(BaseSettings):
    """API settings, overridable through ``TODO_*`` environment variables."""

    app_name: str = "Todo API"
    version: str = config.app.version

    # Shares TODO_DB_PATH with the seed command
    database_path: Path = config.database.path

    cors_origins: list[str] = _parse_allowed_origins()

    # Listing
    default_page_size: int = 50
    max_page_size: int = 1000

    class Config:
        env_prefix = "TODO_"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
