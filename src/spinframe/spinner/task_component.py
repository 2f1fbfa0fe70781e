"""The capability set shared by every component a SpinGroup can drive."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING
from typing import Any
from typing import Protocol
from typing import runtime_checkable

if TYPE_CHECKING:
    from spinframe.spinner.spingroup import SpinGroup


@runtime_checkable
class TaskComponent(Protocol):
    """Visual indicator for one task.

    ``Spinner`` and ``Progress`` both implement it; any object with these
    four methods can be handed to a ``SpinGroup``.
    """

    def start(self) -> None:
        """Begin showing the component."""
        ...

    def complete(self, message: str = "") -> None:
        """Mark the task as finished successfully."""
        ...

    def fail(self, message: str = "") -> None:
        """Mark the task as failed."""
        ...

    def set_output(self, output: Any) -> None:
        """Redirect future rendering to ``output``."""
        ...


TaskFunc = Callable[[TaskComponent, "SpinGroup"], None]
