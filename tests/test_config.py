"""Tests for configuration and logging setup."""

import logging

from todo_explorer.api.config import DEV_ORIGINS, Settings, _parse_allowed_origins
from todo_explorer.config import config, get_logger, setup_logging
from todo_explorer.config.settings import UIConfig


class TestLogging:
    """Tests for logger naming and setup."""

    def test_get_logger_prefix(self):
        assert get_logger("filters.pagination").name == "todo_explorer.filters.pagination"
        assert get_logger().name == "todo_explorer"

    def test_setup_logging_file(self, tmp_path):
        log_file = tmp_path / "logs" / "app.log"
        logger = setup_logging("DEBUG", log_file=log_file, log_to_console=False)
        get_logger("test").debug("hello")
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.DEBUG
        assert " | DEBUG    | todo_explorer.test | hello" in log_file.read_text()

        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()


class TestUIConfig:
    """Tests for environment-driven UI settings."""

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("TODO_PAGE_SIZE_OPTIONS", "5,15")
        monkeypatch.setenv("TODO_AUTO_SUBMIT", "true")
        ui = UIConfig()
        assert ui.page_size_options == [5, 15]
        assert ui.auto_submit is True

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TODO_PAGE_SIZE_OPTIONS", raising=False)
        monkeypatch.delenv("TODO_AUTO_SUBMIT", raising=False)
        ui = UIConfig()
        assert ui.page_size_options == [10, 25, 50, 100]
        assert ui.auto_submit is False


class TestApiSettings:
    """Tests for the API settings."""

    def test_allowed_origins_from_env(self, monkeypatch):
        monkeypatch.setenv("TODO_ALLOWED_ORIGINS", "https://a.example, https://b.example,")
        assert _parse_allowed_origins() == ["https://a.example", "https://b.example"]

    def test_allowed_origins_default(self, monkeypatch):
        monkeypatch.delenv("TODO_ALLOWED_ORIGINS", raising=False)
        assert _parse_allowed_origins() == DEV_ORIGINS

    def test_shares_database_path(self):
        assert Settings().database_path == config.database.path
