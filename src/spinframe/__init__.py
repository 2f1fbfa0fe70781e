"""spinframe - nested frames, spinners and progress bars for the terminal."""

from spinframe.ansi import Color
from spinframe.ansi import Style
from spinframe.frame import Frame
from spinframe.frame import FrameStyle
from spinframe.frame import open_frame
from spinframe.logging_config import configure_logging
from spinframe.logging_config import get_logger
from spinframe.progress import Progress
from spinframe.spinner import SpinGroup
from spinframe.spinner import Spinner
from spinframe.spinner import spin
from spinframe.version import get_version

__version__ = get_version()

__all__ = [
    "Color",
    "Frame",
    "FrameStyle",
    "Progress",
    "SpinGroup",
    "Spinner",
    "Style",
    "__version__",
    "configure_logging",
    "get_logger",
    "get_version",
    "open_frame",
    "spin",
]
