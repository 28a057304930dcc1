"""Tests for settings and logging setup."""

import logging

import pytest

from statement_import.config import Settings, get_settings
from statement_import.core.logging import setup_logging


class TestSettings:
    """Test settings defaults and environment overrides."""

    def test_defaults(self, settings):
        assert settings.max_total_installments == 72
        assert settings.min_description_length == 3
        assert settings.csv_encoding == "utf-8-sig"
        assert settings.csv_fallback_encoding == "latin-1"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("STATEMENT_IMPORT_MAX_FILE_SIZE_MB", "5")
        assert Settings(_env_file=None).max_file_size_mb == 5

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Test root logger configuration."""

    def test_console_and_file(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "logs" / "import.log"
        setup_logging("DEBUG", log_file=str(log_file))

        logging.getLogger("statement_import.test").debug("hello")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert restore_root_logger.level == logging.DEBUG
        assert "[DEBUG] statement_import.test: hello" in log_file.read_text()

    def test_default_level_from_settings(self, restore_root_logger):
        setup_logging()
        expected = getattr(logging, get_settings().log_level.upper(), logging.INFO)
        assert restore_root_logger.level == expected
