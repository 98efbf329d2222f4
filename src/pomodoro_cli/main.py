"""Main entry point for Pomodoro CLI."""

from pathlib import Path

import typer
from rich.console import Console

from pomodoro_cli import __version__
from pomodoro_cli.commands import timer

app = typer.Typer(
    name="pomodoro",
    help="A terminal Pomodoro timer: pick a preset, focus, take a break, repeat",
)

console = Console()


def _with_root_options(
    ctx: typer.Context, config_path: Path | None, presets: list[str] | None
) -> tuple[Path | None, list[str] | None]:
    """Fall back to ``--config``/``--preset`` given before the command name."""
    root = ctx.obj or {}
    return config_path or root.get("config_path"), presets or root.get("presets")


@app.callback(invoke_without_command=True)
def default(
    ctx: typer.Context,
    config_path: Path | None = timer.ConfigOption,
    presets: list[str] | None = timer.PresetOption,
) -> None:
    """Start the timer when no command is given."""
    ctx.obj = {"config_path": config_path, "presets": presets}
    if ctx.invoked_subcommand is None:
        timer.start_timer(config_path=config_path, presets=presets)


@app.command()
def start(
    ctx: typer.Context,
    config_path: Path | None = timer.ConfigOption,
    presets: list[str] | None = timer.PresetOption,
) -> None:
    """Pick a preset and run the focus/break countdown."""
    config_path, presets = _with_root_options(ctx, config_path, presets)
    timer.start_timer(config_path=config_path, presets=presets)


@app.command("presets")
def show_presets(
    ctx: typer.Context,
    config_path: Path | None = timer.ConfigOption,
    presets: list[str] | None = timer.PresetOption,
) -> None:
    """Show the presets offered at selection time."""
    config_path, presets = _with_root_options(ctx, config_path, presets)
    timer.list_presets(config_path=config_path, presets=presets)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Pomodoro CLI[/bold] version [cyan]{__version__}[/cyan]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
