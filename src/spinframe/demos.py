"""Example scenarios shown by ``spinframe demo``."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from rich.console import Console

from spinframe import ansi
from spinframe.ansi import Color
from spinframe.config import Config
from spinframe.frame import FrameStyle
from spinframe.frame import open_frame
from spinframe.logging_config import get_logger
from spinframe.progress import MINIMAL
from spinframe.progress import Progress
from spinframe.progress import RenderFunc
from spinframe.spinner import ARROW
from spinframe.spinner import CLOCK
from spinframe.spinner import SpinGroup
from spinframe.spinner import Spinner
from spinframe.spinner import TaskComponent

logger = get_logger(__name__)


class DeploymentError(Exception):
    """Raised by the failure scenario on purpose."""


@dataclass
class DemoContext:
    """What every scenario needs: settings, a console and a pace.

    ``speed`` scales every pause; 0 runs the scenarios without waiting.
    """

    config: Config
    console: Console
    speed: float = 1.0

    def pause(self, seconds: float) -> None:
        if self.speed > 0:
            time.sleep(seconds * self.speed)

    def heading(self, text: str) -> None:
        self.console.rule(f"[bold]{text}")

    def spinner(self, message: str, **overrides: Any) -> Spinner:
        options = self.config.spinner_options()
        if self.speed == 0:
            options["show_elapsed"] = False
        options.update(overrides)
        return Spinner(message, **options)

    def progress(self, title: str, total: int, **overrides: Any) -> Progress:
        options = self.config.progress_options()
        options.update(overrides)
        return Progress(title, total, **options)


def frame_demo(ctx: DemoContext) -> None:
    ctx.heading("Frames")
    frame_options = ctx.config.frame_options()

    with open_frame("Basic Frame Example", **frame_options) as frame:
        frame.println("This is content inside the frame")
        frame.println("Multiple lines of content")

    with open_frame("Outer Frame", color=Color.BLUE) as outer:
        outer.println("Content in outer frame")
        with open_frame("Inner Frame", color=Color.GREEN) as inner:
            inner.println("Content in inner frame")
        outer.println("Back to outer frame content")

    with open_frame("Bracket Style Frame", style=FrameStyle.BRACKET) as frame:
        frame.println("This uses bracket style borders")

    with open_frame("Frame with Dividers", **frame_options) as frame:
        frame.println("Content before divider")
        frame.divider("Section Break")
        frame.println("Content after divider")
        frame.divider()
        frame.print("Content after empty divider")
        frame.println(" (using print + println)")

    with open_frame("{{unicorn:}} Timed Operation", color=Color.YELLOW) as frame:
        frame.println("Simulating some {{bold+cyan:work}}")
        ctx.pause(0.1)
        frame.println("Work {{green:completed}}!")
        frame.println("Progress: %d%% complete", 100)

    rainbow = [Color.RED, Color.BRIGHT_RED, Color.YELLOW, Color.GREEN, Color.BLUE, Color.BRIGHT_BLUE]
    frames = [open_frame(color.sprint("Color"), color=color) for color in rainbow]
    frames[-1].println("Colors of the rainbow...")
    for frame in reversed(frames):
        frame.close()


def spinner_demo(ctx: DemoContext) -> None:
    ctx.heading("Spinners")

    s = ctx.spinner("Loading data...")
    s.start()
    ctx.pause(2)
    s.stop()

    s = ctx.spinner("Processing files...", color=Color.GREEN, renderer=CLOCK, show_elapsed=False)
    s.start()
    ctx.pause(1.5)
    s.update_message("Almost done...")
    ctx.pause(1)
    s.stop()

    with open_frame("Deployment Pipeline", color=Color.MAGENTA) as outer:
        with ctx.spinner("Building application...", output=outer):
            ctx.pause(1.5)

        with open_frame("Database Migration", color=Color.GREEN) as inner:
            with ctx.spinner("Running migrations...", output=inner, renderer=ARROW):
                ctx.pause(1.5)

        with ctx.spinner("Deploying to production...", output=outer, color=Color.RED):
            ctx.pause(1.5)
        outer.println("Deployment completed!")


def progress_demo(ctx: DemoContext) -> None:
    ctx.heading("Progress bars")

    p = ctx.progress("Building", 8, color=Color.MAGENTA)
    p.start()
    for step in range(8):
        ctx.pause(0.2)
        p.increment(f"step {step + 1}")
    p.complete("Build finished")

    p = ctx.progress("Minimal", 15, renderer=MINIMAL, color=Color.BLUE)
    for done in range(0, 16, 3):
        p.update(done, "working")
        ctx.pause(0.1)
    p.complete("Done")

    with open_frame("Download", color=Color.CYAN) as frame:
        p = ctx.progress("Archive", 0, output=frame)
        p.start()
        ctx.pause(0.2)
        # the size only becomes known after the first response
        p.set_total(1024)
        for received in range(0, 1025, 128):
            p.update(received, f"{received} KiB")
            ctx.pause(0.1)
        p.complete("Downloaded archive")

    fancy = RenderFunc(
        lambda prog, out: out.write(
            f"{ansi.ROCKET if prog.percentage() >= 50 else ansi.HOURGLASS} "
            f"{prog.title}: {prog.percentage():.0f}%"
        )
    )
    p = ctx.progress("Launch", 4, renderer=fancy)
    for _ in range(4):
        ctx.pause(0.2)
        p.increment()
    p.complete("Lift off")


def spingroup_demo(ctx: DemoContext) -> None:
    ctx.heading("SpinGroups")

    group = SpinGroup("Deployment Pipeline")
    group.add_task("Migrate", ctx.spinner("Migrating database schema..."), _sleeper(ctx, 1))

    def download(component: TaskComponent, _group: SpinGroup) -> None:
        if not isinstance(component, Progress):
            return
        component.set_total(10)
        for chunk in range(11):
            component.update(chunk, f"chunk {chunk}")
            ctx.pause(0.1)

    group.add_task("Download", ctx.progress("Artifacts", 0), download)

    def discover(component: TaskComponent, group: SpinGroup) -> None:
        for service in ("web", "api", "worker"):
            group.add_subtask(
                f"Deploy {service}",
                ctx.spinner(f"Deploying {service} service..."),
                _sleeper(ctx, 0.5),
            )
        ctx.pause(0.5)

    group.add_task("Discover services", ctx.spinner("Discovering services..."), discover)
    group.add_task("Health check", ctx.spinner("Verifying system health..."), _sleeper(ctx, 0.8))
    group.run_in_frame()

    failing = SpinGroup("Release")
    failing.add_task("Package", ctx.spinner("Packaging release..."), _sleeper(ctx, 0.5))

    def upload(component: TaskComponent, _group: SpinGroup) -> None:
        if isinstance(component, Progress):
            component.update(3, "uploading")
            ctx.pause(0.5)
        raise DeploymentError("upload rejected by registry")

    failing.add_task("Upload", ctx.progress("Upload", 10), upload)
    failing.add_task("Announce", ctx.spinner("Announcing release..."), _sleeper(ctx, 0.5))

    try:
        failing.run_in_frame()
    except DeploymentError as e:
        logger.info("Failure scenario finished", error=str(e))
        ctx.console.print(f"[red]Release failed:[/red] {e}")


def _sleeper(ctx: DemoContext, seconds: float) -> Callable[[TaskComponent, SpinGroup], None]:
    def task(component: TaskComponent, group: SpinGroup) -> None:
        ctx.pause(seconds)

    return task


DEMOS: dict[str, Callable[[DemoContext], None]] = {
    "frame": frame_demo,
    "spinner": spinner_demo,
    "progress": progress_demo,
    "spingroup": spingroup_demo,
}


def run_demo(name: str, ctx: DemoContext) -> None:
    """Run one scenario by name, or every scenario for ``"all"``."""
    if name == "all":
        selected = list(DEMOS.values())
    else:
        try:
            selected = [DEMOS[name]]
        except KeyError:
            raise ValueError(f"Unknown demo: {name}") from None

    for demo in selected:
        logger.debug("Running demo", demo=demo.__name__)
        demo(ctx)
