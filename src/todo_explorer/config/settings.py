"""Application settings and configuration."""

from pathlib import Path
from dataclasses import dataclass, field
from typing import List
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_int_list(name: str, default: str) -> List[int]:
    raw = os.getenv(name, default)
    return [int(part) for part in raw.split(",") if part.strip()]


@dataclass
class DatabaseConfig:
    """Database configuration settings."""

    path: Path = field(
        default_factory=lambda: Path(
            os.getenv("TODO_DB_PATH", str(PROJECT_ROOT / "data" / "todos.duckdb"))
        )
    )


@dataclass
class ApiClientConfig:
    """Settings for talking to the todo API."""

    base_url: str = field(
        default_factory=lambda: os.getenv("TODO_API_URL", "http://localhost:8000")
    )
    timeout: float = field(
        default_factory=lambda: float(os.getenv("TODO_API_TIMEOUT", "10"))
    )
    max_retries: int = 3


@dataclass
class UIConfig:
    """Streamlit console settings."""

    default_page_size: int = field(
        default_factory=lambda: int(os.getenv("TODO_DEFAULT_PAGE_SIZE", "10"))
    )
    page_size_options: List[int] = field(
        default_factory=lambda: _env_int_list("TODO_PAGE_SIZE_OPTIONS", "10,25,50,100")
    )
    auto_submit: bool = field(default_factory=lambda: _env_bool("TODO_AUTO_SUBMIT"))


@dataclass
class AppConfig:
    """Application configuration settings."""

    name: str = field(default_factory=lambda: os.getenv("APP_NAME", "Todo Explorer"))
    version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


@dataclass
class Config:
    """Main configuration container."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    api: ApiClientConfig = field(default_factory=ApiClientConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    app: AppConfig = field(default_factory=AppConfig)


# Global config instance
config = Config()
