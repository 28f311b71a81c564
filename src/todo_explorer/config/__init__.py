"""Configuration module for Todo Explorer."""

from .settings import (
    config,
    Config,
    DatabaseConfig,
    ApiClientConfig,
    UIConfig,
    AppConfig,
)
from .logging_config import setup_logging, get_logger, DEFAULT_LOG_FILE

__all__ = [
    "config",
    "Config",
    "DatabaseConfig",
    "ApiClientConfig",
    "UIConfig",
    "AppConfig",
    "setup_logging",
    "get_logger",
    "DEFAULT_LOG_FILE",
]
