"""Configuration management for spinframe.

Reads configuration from environment variables and config files.
Priority: environment variables > config file > defaults
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from spinframe.ansi import Color
from spinframe.config_models import AppConfig
from spinframe.exceptions import ConfigError
from spinframe.logging_config import get_logger
from spinframe.progress.renderer import RENDERERS as PROGRESS_RENDERERS
from spinframe.spinner.renderer import RENDERERS as SPINNER_RENDERERS

logger = get_logger(__name__)

# Environment variable -> (section, key)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "SPINFRAME_FRAME_COLOR": ("frame", "color"),
    "SPINFRAME_FRAME_STYLE": ("frame", "style"),
    "SPINFRAME_SPINNER_COLOR": ("spinner", "color"),
    "SPINFRAME_SPINNER_INTERVAL_MS": ("spinner", "interval_ms"),
    "SPINFRAME_SPINNER_RENDERER": ("spinner", "renderer"),
    "SPINFRAME_SPINNER_SHOW_ELAPSED": ("spinner", "show_elapsed"),
    "SPINFRAME_PROGRESS_COLOR": ("progress", "color"),
    "SPINFRAME_PROGRESS_RENDERER": ("progress", "renderer"),
    "SPINFRAME_PROGRESS_WIDTH": ("progress", "width"),
}


def default_config_paths() -> list[Path]:
    """Default config locations, in priority order."""
    return [
        Path.home() / ".config" / "spinframe" / "config.yaml",
        Path.home() / ".spinframe.yaml",
        Path.cwd() / ".spinframe.yaml",
    ]


class Config:
    """Configuration manager for spinframe.

    Loads configuration from a YAML file and ``SPINFRAME_*`` environment
    variables, then hands out keyword arguments for the components.

    Config file format (YAML):
        frame:
          color: blue
          style: bracket
        spinner:
          renderer: clock
          interval_ms: 80
        progress:
          renderer: dots

    Example:
        config = Config.load()
        with open_frame("Build", **config.frame_options()) as frame:
            Spinner("Compiling...", output=frame, **config.spinner_options())
    """

    def __init__(self, model: AppConfig, path: Path | None = None) -> None:
        self._model = model
        self._path = path

    @classmethod
    def load(cls, path: Path | None = None) -> Config:
        """Load configuration from file and environment.

        Args:
            path: Optional explicit config file path. If not provided,
                  searches default locations.

        Raises:
            ConfigError: If the file cannot be read or parsed, or the
                merged settings fail validation.
        """
        data: dict[str, Any] = {}
        source: Path | None = None

        if path:
            data = cls._load_file(path)
            source = path
        else:
            for config_path in default_config_paths():
                if config_path.exists():
                    logger.debug("Loading config from", path=str(config_path))
                    data = cls._load_file(config_path)
                    source = config_path
                    break

        data = cls._apply_env_vars(data)
        return cls(cls._validate_model(data, source), source)

    @staticmethod
    def _validate_model(data: dict[str, Any], source: Path | None) -> AppConfig:
        try:
            return AppConfig.from_dict(data)
        except ValidationError as e:
            messages = []
            for error in e.errors():
                location = ".".join(str(part) for part in error["loc"])
                messages.append(f"{location}: {error['msg']}")
            raise ConfigError("Invalid config format", source, messages) from e

    @classmethod
    def _load_file(cls, path: Path) -> dict[str, Any]:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to load config file", path=str(path), error=str(e))
            raise ConfigError("Could not read config file", path) from e

        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a mapping", path)
        return data

    @classmethod
    def _apply_env_vars(cls, data: dict[str, Any]) -> dict[str, Any]:
        for env_var, (section, key) in ENV_OVERRIDES.items():
            value = os.getenv(env_var)
            if not value:
                continue
            section_data = data.setdefault(section, {})
            if not isinstance(section_data, dict):
                # leave it for validation to report
                continue
            section_data[key] = value
            logger.debug("Config override from environment", variable=env_var)
        return data

    @property
    def model(self) -> AppConfig:
        return self._model

    @property
    def path(self) -> Path | None:
        """The file the configuration was read from, if any."""
        return self._path

    def frame_options(self) -> dict[str, Any]:
        """Keyword arguments for ``open_frame``."""
        frame = self._model.frame
        return {"color": Color.parse(frame.color), "style": frame.style}

    def spinner_options(self) -> dict[str, Any]:
        """Keyword arguments for ``Spinner``."""
        settings = self._model.spinner
        options: dict[str, Any] = {
            "interval": settings.interval_ms / 1000,
            "renderer": SPINNER_RENDERERS[settings.renderer],
            "show_elapsed": settings.show_elapsed,
        }
        if settings.color is not None:
            options["color"] = Color.parse(settings.color)
        return options

    def progress_options(self) -> dict[str, Any]:
        """Keyword arguments for ``Progress``."""
        settings = self._model.progress
        return {
            "color": Color.parse(settings.color),
            "renderer": PROGRESS_RENDERERS[settings.renderer],
            "width": settings.width,
        }
