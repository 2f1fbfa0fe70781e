"""Custom exceptions for spinframe."""


class SpinframeError(Exception):
    """Base exception for spinframe failures."""


class SpinGroupConfigError(SpinframeError, ValueError):
    """Raised when a SpinGroup is run with an invalid configuration."""


class ConfigError(SpinframeError):
    """Raised when a configuration file cannot be loaded or validated."""

    def __init__(self, message: str, path: object = None, errors: list[str] | None = None) -> None:
        self.path = path
        self.errors = errors or []
        details = "".join(f"\n  - {error}" for error in self.errors)
        location = f" ({path})" if path else ""
        super().__init__(f"{message}{location}{details}")
