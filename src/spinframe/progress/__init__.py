"""Progress bars with pluggable renderers."""

from spinframe.progress.progress import Progress
from spinframe.progress.renderer import BAR
from spinframe.progress.renderer import DOTS
from spinframe.progress.renderer import MINIMAL
from spinframe.progress.renderer import CharRenderer
from spinframe.progress.renderer import MinimalRenderer
from spinframe.progress.renderer import ProgressRenderer
from spinframe.progress.renderer import RenderFunc

__all__ = [
    "BAR",
    "DOTS",
    "MINIMAL",
    "CharRenderer",
    "MinimalRenderer",
    "Progress",
    "ProgressRenderer",
    "RenderFunc",
]
