"""Tests for logging configuration."""

import logging
from pathlib import Path
from unittest.mock import patch

from spinframe.logging_config import configure_logging
from spinframe.logging_config import get_log_file_path
from spinframe.logging_config import get_logger
from spinframe.logging_config import resolve_log_level


class TestLogFilePath:
    """Test log file path generation."""

    def test_get_log_file_path_returns_correct_format(self, tmp_path: Path) -> None:
        """Test that log file path has correct naming format."""
        test_dir = tmp_path / "logs"

        with patch("spinframe.logging_config.LOG_DIR", test_dir):
            path = get_log_file_path()
            assert path.parent == test_dir
            assert path.name.startswith("spinframe_")
            assert path.name.endswith(".log")
            # Should contain date pattern (YYYY-MM-DD)
            assert len(path.stem) == len("spinframe_YYYY-MM-DD")

    def test_get_log_file_path_creates_directory(self, tmp_path: Path) -> None:
        """Test the log directory is created."""
        test_dir = tmp_path / ".local" / "share" / "spinframe" / "logs"

        path = get_log_file_path(test_dir)

        assert test_dir.is_dir()
        assert path.parent == test_dir

    def test_get_log_file_path_idempotent(self, tmp_path: Path) -> None:
        """Test asking twice gives the same path."""
        test_dir = tmp_path / "logs"
        test_dir.mkdir()

        assert get_log_file_path(test_dir) == get_log_file_path(test_dir)


class TestResolveLogLevel:
    """Test log level resolution."""

    def test_debug_flag_wins(self) -> None:
        """Test the debug flag overrides LOG_LEVEL."""
        with patch.dict("os.environ", {"LOG_LEVEL": "ERROR"}):
            assert resolve_log_level(debug=True) == logging.DEBUG

    def test_env_var_is_case_insensitive(self) -> None:
        """Test LOG_LEVEL is case insensitive."""
        with patch.dict("os.environ", {"LOG_LEVEL": "warning"}):
            assert resolve_log_level() == logging.WARNING

    def test_unknown_level_falls_back_to_info(self) -> None:
        """Test an unknown level falls back to INFO."""
        with patch.dict("os.environ", {"LOG_LEVEL": "LOUD"}):
            assert resolve_log_level() == logging.INFO


class TestConfigureLogging:
    """Test logging configuration."""

    def test_configure_logging_sets_debug_level(self, tmp_path: Path) -> None:
        """Test that debug=True sets log level to DEBUG."""
        test_dir = tmp_path / "logs"

        with (
            patch("spinframe.logging_config.LOG_DIR", test_dir),
            patch("logging.basicConfig") as mock_basic_config,
            patch("structlog.configure"),
        ):
            configure_logging(debug=True)

            # Check that basicConfig was called with DEBUG level
            call_kwargs = mock_basic_config.call_args[1]
            assert call_kwargs["level"] == 10  # logging.DEBUG
            assert call_kwargs["force"] is True

    def test_configure_logging_respects_env_var(self, tmp_path: Path) -> None:
        """Test that LOG_LEVEL env var is respected."""
        test_dir = tmp_path / "logs"

        with (
            patch("spinframe.logging_config.LOG_DIR", test_dir),
            patch("os.environ", {"LOG_LEVEL": "WARNING"}),
            patch("logging.basicConfig") as mock_basic_config,
            patch("structlog.configure"),
        ):
            configure_logging(debug=False)

            call_kwargs = mock_basic_config.call_args[1]
            assert call_kwargs["level"] == 30  # logging.WARNING

    def test_configure_logging_defaults_to_info(self, tmp_path: Path) -> None:
        """Test that default log level is INFO."""
        test_dir = tmp_path / "logs"

        with (
            patch("spinframe.logging_config.LOG_DIR", test_dir),
            patch("os.environ", {}),
            patch("logging.basicConfig") as mock_basic_config,
            patch("structlog.configure"),
        ):
            configure_logging(debug=False)

            call_kwargs = mock_basic_config.call_args[1]
            assert call_kwargs["level"] == 20  # logging.INFO

    def test_configure_logging_uses_json_renderer(self, tmp_path: Path) -> None:
        """Test that LOG_FORMAT=json selects the JSON renderer."""
        with (
            patch("os.environ", {"LOG_FORMAT": "json"}),
            patch("logging.basicConfig"),
            patch("structlog.configure") as mock_structlog_config,
        ):
            configure_logging(log_dir=tmp_path)

            processors = mock_structlog_config.call_args[1]["processors"]
            assert type(processors[-1]).__name__ == "JSONRenderer"

    def test_configure_logging_returns_log_file(self, tmp_path: Path) -> None:
        """Test configure_logging returns the log file path."""
        with (
            patch("logging.basicConfig"),
            patch("structlog.configure"),
        ):
            log_file = configure_logging(log_dir=tmp_path)

        assert log_file.parent == tmp_path


class TestGetLogger:
    """Test get_logger function."""

    def test_get_logger_with_name(self) -> None:
        """Test that get_logger accepts a name parameter."""
        logger = get_logger("test_module")
        assert logger is not None

    def test_get_logger_without_name(self) -> None:
        """Test that get_logger works without a name."""
        logger = get_logger()
        assert logger is not None


class TestLogFileOutput:
    """Test log file output."""

    def test_log_file_receives_records(self, tmp_path: Path) -> None:
        """Test that log records land in the dated file, not the terminal."""
        log_file = configure_logging(debug=True, log_dir=tmp_path)
        logger = get_logger("test")
        logger.info("Test message", key="value")

        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "Test message" in content
        assert "key=value" in content
