"""Animated spinners and the SpinGroup sequential task runner."""

from spinframe.spinner.renderer import ARROW
from spinframe.spinner.renderer import CLOCK
from spinframe.spinner.renderer import DOTS
from spinframe.spinner.renderer import IconCycleRenderer
from spinframe.spinner.renderer import RenderFunc
from spinframe.spinner.renderer import SpinnerRenderer
from spinframe.spinner.spingroup import SpinGroup
from spinframe.spinner.spingroup import Task
from spinframe.spinner.spinner import Spinner
from spinframe.spinner.spinner import SpinnerState
from spinframe.spinner.spinner import spin
from spinframe.spinner.task_component import TaskComponent
from spinframe.spinner.task_component import TaskFunc

__all__ = [
    "ARROW",
    "CLOCK",
    "DOTS",
    "IconCycleRenderer",
    "RenderFunc",
    "SpinGroup",
    "Spinner",
    "SpinnerRenderer",
    "SpinnerState",
    "Task",
    "TaskComponent",
    "TaskFunc",
    "spin",
]
