"""Entry point for spinframe.

Run the demos with: python -m spinframe demo all
"""

import typing as t
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console

from spinframe import __version__
from spinframe import configure_logging
from spinframe import get_logger
from spinframe.config import Config
from spinframe.demos import DemoContext
from spinframe.demos import run_demo
from spinframe.exceptions import ConfigError

app = typer.Typer(
    help="Nested frames, spinners and progress bars for the terminal",
    no_args_is_help=True,
)


class DemoName(str, Enum):
    FRAME = "frame"
    SPINNER = "spinner"
    PROGRESS = "progress"
    SPINGROUP = "spingroup"
    ALL = "all"


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit", callback=version_callback
    ),
) -> None:
    pass


@app.command()
def demo(
    name: t.Annotated[DemoName, typer.Argument(help="Scenario to run")] = DemoName.ALL,
    config_path: t.Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to a YAML config file"),
    ] = None,
    debug: t.Annotated[bool, typer.Option("--debug", help="Enable debug logging")] = False,
    fast: t.Annotated[bool, typer.Option("--fast", help="Skip all pauses")] = False,
) -> None:
    """Run the example scenarios."""
    configure_logging(debug=debug)
    logger = get_logger()
    logger.info("Starting demo", version=__version__, demo=name.value, debug_mode=debug)

    try:
        config = Config.load(config_path)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    ctx = DemoContext(config=config, console=Console(), speed=0.0 if fast else 1.0)
    run_demo(name.value, ctx)


if __name__ == "__main__":
    app()
