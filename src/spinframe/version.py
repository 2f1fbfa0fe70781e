"""Version resolution for spinframe."""

from __future__ import annotations

from functools import lru_cache
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

DISTRIBUTION = "spinframe"
FALLBACK_VERSION = "0.0.0+unknown"


@lru_cache(maxsize=1)
def get_version() -> str:
    """Return the installed spinframe version, or ``0.0.0+unknown`` from a bare checkout."""
    try:
        return package_version(DISTRIBUTION)
    except PackageNotFoundError:
        return FALLBACK_VERSION
