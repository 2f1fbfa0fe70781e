"""Pydantic models for spinframe configuration.

Provides validated configuration models with defaults and type safety.
"""

from __future__ import annotations

from typing import Any
from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from spinframe.ansi import Color
from spinframe.frame.frame import FrameStyle


def _check_color(value: str | None) -> str | None:
    if value is None:
        return None
    Color.parse(value)
    return value.strip().lower()


class FrameConfig(BaseModel):
    """Defaults for frames opened by the CLI demos."""

    model_config = ConfigDict(extra="forbid")

    color: str = "cyan"
    style: FrameStyle = FrameStyle.BOX

    @field_validator("color")
    @classmethod
    def validate_color(cls, value: str | None) -> str | None:
        return _check_color(value)


class SpinnerConfig(BaseModel):
    """Spinner settings.

    Leaving ``color`` unset keeps the rotating red/blue/cyan/magenta icon.
    """

    model_config = ConfigDict(extra="forbid")

    color: str | None = None
    interval_ms: int = Field(default=100, gt=0)
    renderer: Literal["dots", "clock", "arrow"] = "dots"
    show_elapsed: bool = True

    @field_validator("color")
    @classmethod
    def validate_color(cls, value: str | None) -> str | None:
        return _check_color(value)


class ProgressConfig(BaseModel):
    """Progress bar settings."""

    model_config = ConfigDict(extra="forbid")

    color: str = "cyan"
    renderer: Literal["bar", "dots", "minimal"] = "bar"
    width: int = Field(default=40, gt=0)

    @field_validator("color")
    @classmethod
    def validate_color(cls, value: str | None) -> str | None:
        return _check_color(value)


class AppConfig(BaseModel):
    """Root application configuration."""

    model_config = ConfigDict(extra="forbid")

    frame: FrameConfig = Field(default_factory=FrameConfig)
    spinner: SpinnerConfig = Field(default_factory=SpinnerConfig)
    progress: ProgressConfig = Field(default_factory=ProgressConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AppConfig:
        """Create AppConfig from dictionary, handling missing keys gracefully."""
        return cls.model_validate(data)
