"""Unit tests for the logging system with YAML configuration."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from massbalance.core.logging_system import (
    LoggingError,
    get_logger,
    get_platform_log_dir,
    initialize_logging,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the default logging setup after each test."""
    yield
    shutdown_logging()
    initialize_logging()


class TestPlatformLogDir:
    """Tests for get_platform_log_dir function."""

    def test_macos_log_dir(self) -> None:
        """Test macOS log directory path."""
        with patch("platform.system", return_value="Darwin"):
            assert get_platform_log_dir() == Path.home() / "Library" / "Logs" / "MassBalance"

    def test_linux_log_dir(self) -> None:
        """Test Linux log directory path."""
        with patch("platform.system", return_value="Linux"):
            assert get_platform_log_dir() == Path.home() / ".massbalance" / "logs"

    def test_windows_log_dir(self) -> None:
        """Test Windows log directory path."""
        with patch("platform.system", return_value="Windows"):
            with patch.dict("os.environ", {"APPDATA": "C:/Users/Test/AppData/Roaming"}):
                log_dir = get_platform_log_dir()
                assert "MassBalance" in str(log_dir)
                assert "Logs" in str(log_dir)

    def test_unknown_platform_defaults_to_linux(self) -> None:
        """Test unknown platform defaults to Linux-style path."""
        with patch("platform.system", return_value="FreeBSD"):
            assert ".massbalance" in str(get_platform_log_dir())


class TestLoggingInitialization:
    """Tests for logging system initialization."""

    def test_default_is_console_only(self) -> None:
        """Test the default configuration has no file handler."""
        initialize_logging()

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert not isinstance(handlers[0], logging.FileHandler)

    def test_file_log_in_platform_dir(self, tmp_path: Path) -> None:
        """Test the log file goes to the platform directory when requested."""
        config = tmp_path / "logging.yaml"
        config.write_text("file_log:\n  enabled: true\n  filename: test.log\n", encoding="utf-8")
        log_dir = tmp_path / "platform"

        with patch("massbalance.core.logging_system.get_platform_log_dir", return_value=log_dir):
            initialize_logging(config, use_platform_dir=True)

        get_logger("test").info("Test message")
        shutdown_logging()

        assert "Test message" in (log_dir / "test.log").read_text(encoding="utf-8")

    def test_file_log_in_config_dir(self, tmp_path: Path) -> None:
        """Test the log file goes to log_dir from the configuration."""
        config = tmp_path / "logging.yaml"
        config.write_text(
            f"log_dir: {tmp_path / 'logs'}\nfile_log:\n  enabled: true\n  filename: mb.log\n",
            encoding="utf-8",
        )

        initialize_logging(config)
        get_logger("test").info("Info message")
        shutdown_logging()

        assert "Info message" in (tmp_path / "logs" / "mb.log").read_text(encoding="utf-8")

    def test_initialize_with_missing_config(self) -> None:
        """Test initialization fails with missing config file."""
        with pytest.raises(LoggingError, match="Logging config file not found"):
            initialize_logging(config_path="/nonexistent/config.yaml")

    def test_initialize_with_invalid_config(self, tmp_path: Path) -> None:
        """Test initialization fails with a non-mapping config."""
        config = tmp_path / "logging.yaml"
        config.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(LoggingError):
            initialize_logging(config)

    def test_bundled_config(self) -> None:
        """Test the shipped logging configuration loads."""
        initialize_logging(Path(__file__).parents[2] / "config" / "logging.yaml")

        assert get_logger("massbalance.core.config").level == logging.WARNING


class TestLoggerFunctionality:
    """Tests for logger creation and usage."""

    def test_get_logger_creates_logger(self) -> None:
        """Test that get_logger returns a valid logger."""
        logger = get_logger("test_component")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "test_component"

    def test_get_logger_caches_instances(self) -> None:
        """Test that get_logger returns the same instance."""
        assert get_logger("cached") is get_logger("cached")

    def test_component_level_and_disable(self, tmp_path: Path) -> None:
        """Test per-component configuration."""
        config = tmp_path / "logging.yaml"
        config.write_text(
            "components:\n  noisy:\n    level: ERROR\n  silent:\n    enabled: false\n",
            encoding="utf-8",
        )

        initialize_logging(config)

        assert get_logger("noisy").level == logging.ERROR
        assert get_logger("silent").disabled
