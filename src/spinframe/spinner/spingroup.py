"""Sequential task runner with dynamically inserted subtasks.

Tasks run one at a time in list order. A running task may add subtasks
through the group it receives; they are spliced in right after it (and
after any siblings it already added) and run before the next task that
was scheduled originally. The first failing task ends the run.

Example:
    group = SpinGroup("Deployment")

    def deploy(component, group):
        for service in discover_services():
            group.add_subtask(
                f"Deploy {service}",
                Spinner(f"Deploying {service}..."),
                lambda c, g, service=service: deploy_service(service),
            )

    group.add_task("Discover", Spinner("Discovering services..."), deploy)
    group.run_in_frame()
"""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from typing import Any

from spinframe.exceptions import SpinGroupConfigError
from spinframe.frame.frame import open_frame
from spinframe.spinner.task_component import TaskComponent
from spinframe.spinner.task_component import TaskFunc
from spinframe.writer import indented_writer


@dataclass
class Task:
    """One scheduled unit of work.

    ``depth`` is 0 for tasks added with :meth:`SpinGroup.add_task` and one
    more than the parent for subtasks. It only affects indentation.
    """

    name: str
    component: TaskComponent | None
    func: TaskFunc | None
    depth: int = 0


class SpinGroup:
    """Runs tasks sequentially, each rendered by its own component.

    The task list and the insertion cursor are shared with task functions
    that call :meth:`add_subtask`, possibly from threads they spawn, and are
    guarded by one lock. Subtasks added concurrently from several threads
    keep the cursor consistent but run in whatever order they took the lock.

    There is no timeout: a task function that never returns blocks
    :meth:`run` forever.
    """

    def __init__(self, title: str, *, output: Any = None) -> None:
        self._title = title
        self._output = sys.stdout if output is None else output
        self._lock = threading.Lock()
        self._tasks: list[Task] = []
        self._running = False
        self._current_index = 0
        self._subtask_offset = 0

    @property
    def title(self) -> str:
        return self._title

    @property
    def output(self) -> Any:
        return self._output

    @property
    def tasks(self) -> list[Task]:
        """A snapshot of the scheduled tasks."""
        with self._lock:
            return list(self._tasks)

    def task_count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def is_running(self) -> bool:
        with self._lock:
            return self._running

    def add_task(self, name: str, component: TaskComponent, func: TaskFunc) -> None:
        """Append a top-level task."""
        with self._lock:
            self._tasks.append(Task(name=name, component=component, func=func))

    def add_subtask(self, name: str, component: TaskComponent, func: TaskFunc) -> None:
        """Schedule a task to run right after the one currently executing.

        Meant to be called from inside a task function. Successive calls
        from the same task are inserted in call order, one level deeper than
        the calling task.
        """
        with self._lock:
            insert_at = self._current_index + 1 + self._subtask_offset
            parent_depth = 0
            if self._current_index < len(self._tasks):
                parent_depth = self._tasks[self._current_index].depth

            task = Task(name=name, component=component, func=func, depth=parent_depth + 1)
            if insert_at >= len(self._tasks):
                self._tasks.append(task)
            else:
                self._tasks.insert(insert_at, task)
            self._subtask_offset += 1

    def run(self) -> None:
        """Execute every task in order.

        Raises:
            SpinGroupConfigError: If the group or any task is misconfigured.
                Nothing is rendered in that case. A subtask added during the
                run is checked when its turn comes, ending the run there.
            Exception: Whatever the first failing task function raised,
                unchanged, after its component has rendered the failure.
        """
        self._validate()

        with self._lock:
            self._running = True
        try:
            index = 0
            while index < self.task_count():
                self._execute(index)
                index += 1
        finally:
            with self._lock:
                self._running = False
                self._current_index = 0
                self._subtask_offset = 0

    def run_in_frame(self) -> None:
        """Run all tasks inside a frame titled with the group title.

        The frame is closed even when a task fails.
        """
        frame = open_frame(self._title, output=self._output)
        original = self._output
        self._output = frame
        try:
            self.run()
        finally:
            self._output = original
            frame.close()

    def _prepare(self, index: int) -> Task | None:
        with self._lock:
            self._current_index = index
            self._subtask_offset = 0
            if index >= len(self._tasks):
                return None
            return self._tasks[index]

    def _execute(self, index: int) -> None:
        task = self._prepare(index)
        if task is None:
            return

        # subtasks are added after the up-front validation, so check each one again
        component, func = _check_task(task)

        component.set_output(indented_writer(self._output, task.depth))
        component.start()

        try:
            func(component, self)
        except Exception as err:
            component.fail(str(err))
            raise

        component.complete("")

    def _validate(self) -> None:
        with self._lock:
            if not self._title:
                raise SpinGroupConfigError("spingroup title cannot be empty")
            if not self._tasks:
                raise SpinGroupConfigError("spingroup must have at least one task")

            for task in self._tasks:
                _check_task(task)

    def __repr__(self) -> str:
        return f"SpinGroup(title={self._title!r}, tasks={self.task_count()})"


def _check_task(task: Task) -> tuple[TaskComponent, TaskFunc]:
    """Raise SpinGroupConfigError for a misconfigured task, else return what it runs."""
    if not task.name:
        raise SpinGroupConfigError("task name cannot be empty")
    if task.component is None:
        raise SpinGroupConfigError("task component cannot be None")
    if task.func is None:
        raise SpinGroupConfigError("task function cannot be None")
    if task.depth < 0:
        raise SpinGroupConfigError("task depth cannot be negative")
    return task.component, task.func
