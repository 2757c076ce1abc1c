"""Main entry point for the tomato CLI."""

from dataclasses import replace
from typing import Optional

import typer

from tomato_cli import __version__
from tomato_cli.commands import config
from tomato_cli.commands.decorators import AppError, command_wrapper
from tomato_cli.config import get_config_manager
from tomato_cli.models.timer import (
    TerminalError,
    TimerConfig,
    TimerController,
    TimerDisplay,
    TimerEngine,
    get_keyboard_handler,
)
from tomato_cli.services.notifier import DesktopNotifier
from tomato_cli.utils.exit_codes import ERROR_TERMINAL
from tomato_cli.utils.logger import get_logger
from tomato_cli.utils.ui.console import get_console

app = typer.Typer(
    name="tomato",
    help="A terminal Pomodoro timer",
    no_args_is_help=True,
)

console = get_console()

app.add_typer(config.app, name="config", help="Configuration inspection")


def build_engine(
    focus: Optional[int] = None,
    short_break: Optional[int] = None,
    long_break: Optional[int] = None,
    interval: Optional[int] = None,
    stop_on_finish: bool = False,
    notify: bool = True,
) -> TimerEngine:
    """Create the engine from the config file with command-line overrides."""
    settings = get_config_manager().config
    timer_config = TimerConfig.from_settings(settings.timer)

    overrides = {
        "focus_minutes": focus,
        "short_break_minutes": short_break,
        "long_break_minutes": long_break,
        "long_break_interval": interval,
    }
    timer_config = replace(
        timer_config, **{k: v for k, v in overrides.items() if v is not None}
    )
    if stop_on_finish:
        timer_config.auto_advance = False

    notifier = DesktopNotifier(
        app_name=settings.notifications.app_name,
        enabled=notify and settings.notifications.enabled,
    )
    return TimerEngine(config=timer_config, notifier=notifier)


@app.command()
@command_wrapper
def run(
    focus: Optional[int] = typer.Option(
        None, "--focus", "-f", min=1, max=120, help="Focus duration in minutes"
    ),
    short_break: Optional[int] = typer.Option(
        None, "--short-break", "-s", min=1, max=60, help="Short break in minutes"
    ),
    long_break: Optional[int] = typer.Option(
        None, "--long-break", "-l", min=1, max=60, help="Long break in minutes"
    ),
    interval: Optional[int] = typer.Option(
        None, "--interval", "-i", min=1, help="Focus sessions before a long break"
    ),
    stop_on_finish: bool = typer.Option(
        False,
        "--stop-on-finish",
        help="Pause when a phase ends and wait for the next-phase key",
    ),
    notify: bool = typer.Option(
        True, "--notify/--no-notify", help="Send desktop notifications"
    ),
) -> None:
    """Start the fullscreen Pomodoro timer."""
    ui_config = get_config_manager().config.ui
    engine = build_engine(
        focus=focus,
        short_break=short_break,
        long_break=long_break,
        interval=interval,
        stop_on_finish=stop_on_finish,
        notify=notify,
    )
    controller = TimerController(engine, adjust_step=ui_config.adjust_step)
    display = TimerDisplay(console, poll_interval=ui_config.poll_interval)

    try:
        keyboard = get_keyboard_handler()
        result = display.run(controller, keyboard)
    except TerminalError as e:
        raise AppError(str(e), exit_code=ERROR_TERMINAL) from e

    get_logger().info(
        "timer %s after %d pomodoro(s)", result, engine.pomodoro_count
    )
    console.print(
        f"[bold green]🍅 {engine.pomodoro_count} pomodoro(s) completed.[/bold green]"
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]tomato[/bold] version [cyan]{__version__}[/cyan]")


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
