"""Bordered frames with nesting, dividers and in-place line replacement."""

from spinframe.frame.aware import FrameAware
from spinframe.frame.aware import FrameReplacer
from spinframe.frame.aware import try_get_replacer
from spinframe.frame.frame import Frame
from spinframe.frame.frame import FrameStyle
from spinframe.frame.frame import open_frame
from spinframe.frame.renderer import BoxRenderer
from spinframe.frame.renderer import BracketRenderer
from spinframe.frame.stack import ColorOverride
from spinframe.frame.stack import FrameStack
from spinframe.frame.stack import color_override
from spinframe.frame.stack import frame_stack
from spinframe.frame.stack import override_color

__all__ = [
    "BoxRenderer",
    "BracketRenderer",
    "ColorOverride",
    "Frame",
    "FrameAware",
    "FrameReplacer",
    "FrameStack",
    "FrameStyle",
    "color_override",
    "frame_stack",
    "open_frame",
    "override_color",
    "try_get_replacer",
]
