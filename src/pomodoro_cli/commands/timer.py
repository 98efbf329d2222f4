"""Pomodoro timer commands.

``main`` exposes these as the ``start`` and ``presets`` commands.
"""

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from pomodoro_cli.config import AppConfig, ConfigManager, parse_preset
from pomodoro_cli.exceptions import PresetConfigError, TerminalError
from pomodoro_cli.models.focus.keyboard import KeyboardHandler
from pomodoro_cli.models.focus.loop import FocusLoop, TickScheduler
from pomodoro_cli.models.focus.state import TimerState
from pomodoro_cli.models.focus.ui import TimerDisplay
from pomodoro_cli.utils.exit_codes import ERROR_CONFIG, ERROR_TERMINAL, get_exit_code_name
from pomodoro_cli.utils.logger import get_logger
from pomodoro_cli.utils.ui.console import get_console

console = get_console()
err_console = get_console(stderr=True)

ConfigOption = typer.Option(
    None, "--config", "-c", help="Path to a config.json with presets", dir_okay=False
)
PresetOption = typer.Option(
    None,
    "--preset",
    "-p",
    help="Preset as FOCUS/BREAK minutes, e.g. 25/5 (repeatable, replaces configured presets)",
)


def load_config(config_path: Path | None, presets: list[str] | None) -> AppConfig:
    """Load the config file and apply command-line presets on top."""
    config = ConfigManager(config_path).config
    if presets:
        config = config.model_copy(
            update={"presets": [parse_preset(p) for p in presets], "default_preset": 0}
        )
    return config


def _fail(message: str, code: int, exc: Exception) -> typer.Exit:
    get_logger().error("%s: %s (exit %s)", message, exc, get_exit_code_name(code))
    err_console.print(f"[red]{message}: {escape(str(exc))}[/red]")
    return typer.Exit(code)


def start_timer(config_path: Path | None = None, presets: list[str] | None = None):
    """Pick a preset and run the focus/break countdown."""
    try:
        config = load_config(config_path, presets)
        selector = config.build_selector()
    except PresetConfigError as e:
        raise _fail("Invalid preset configuration", ERROR_CONFIG, e) from e

    logger = get_logger(config.log_level)
    try:
        keyboard = KeyboardHandler()
    except TerminalError as e:
        raise _fail("Terminal initialisation failed", ERROR_TERMINAL, e) from e

    logger.info(
        "Timer started with presets %s",
        ", ".join(p.label for p in selector.presets),
    )
    loop = FocusLoop(
        TimerState.initial(selector),
        TimerDisplay(console=console),
        keyboard,
        scheduler=TickScheduler(interval=config.tick_seconds),
        logger=logger,
    )
    try:
        result = loop.run()
    except TerminalError as e:
        raise _fail("Terminal output failed", ERROR_TERMINAL, e) from e

    logger.info("Timer quit: %s", result.summary)
    console.print(result.summary)
    raise typer.Exit(result.code)


def list_presets(config_path: Path | None = None, presets: list[str] | None = None):
    """Show the presets offered at selection time."""
    try:
        selector = load_config(config_path, presets).build_selector()
    except PresetConfigError as e:
        raise _fail("Invalid preset configuration", ERROR_CONFIG, e) from e

    table = Table(title="Pomodoro presets", show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Focus", justify="right", style="red")
    table.add_column("Break", justify="right", style="cyan")
    table.add_column("Default", justify="center")

    for index, preset in enumerate(selector.presets):
        table.add_row(
            str(index + 1),
            f"{preset.focus_minutes} min",
            f"{preset.break_minutes} min",
            "[green]✓[/green]" if index == selector.default_index else "",
        )

    console.print(table)
