"""Logging configuration for spinframe.

Rendering writes straight to the terminal, so log records go to a dated
file instead of the console they would otherwise interleave with.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path

import structlog

LOG_DIR = Path.home() / ".local" / "share" / "spinframe" / "logs"
DEFAULT_LOG_LEVEL = "INFO"


def get_log_file_path(log_dir: Path | None = None) -> Path:
    """Get log file path with date suffix.

    Returns:
        Path to log file with naming: spinframe_YYYY-MM-DD.log

    Example:
        path = get_log_file_path()
        # Returns: ~/.local/share/spinframe/logs/spinframe_2024-01-15.log
    """
    directory = LOG_DIR if log_dir is None else log_dir
    directory.mkdir(parents=True, exist_ok=True)
    date_str = datetime.now().strftime("%Y-%m-%d")
    return directory / f"spinframe_{date_str}.log"


def resolve_log_level(debug: bool = False) -> int:
    """Return the numeric level from the debug flag, ``LOG_LEVEL`` or the default.

    Unknown level names fall back to INFO.
    """
    name = "DEBUG" if debug else os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(debug: bool = False, log_dir: Path | None = None) -> Path:
    """Configure structlog over stdlib logging with a dated file handler.

    Args:
        debug: If True, log at DEBUG. Otherwise uses the LOG_LEVEL env var
               or defaults to INFO.
        log_dir: Directory for log files, ``LOG_DIR`` by default.

    Returns:
        The path of the log file being written.

    Example:
        configure_logging(debug=True)
        get_logger(__name__).debug("demo started", name="frame")
    """
    log_file = get_log_file_path(log_dir)

    logging.basicConfig(
        format="%(message)s",
        level=resolve_log_level(debug),
        handlers=[logging.FileHandler(log_file, encoding="utf-8")],
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
            if os.environ.get("LOG_FORMAT") == "json"
            else structlog.dev.ConsoleRenderer(colors=False),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return log_file


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name, typically __name__ from the calling module.

    Example:
        logger = get_logger(__name__)
        logger.info("config loaded", path="~/.spinframe.yaml")
    """
    return structlog.get_logger(name)
