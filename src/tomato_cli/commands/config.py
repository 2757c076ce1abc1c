"""Configuration inspection commands."""

import typer
from pydantic import BaseModel

from tomato_cli.commands.decorators import AppError, command_wrapper
from tomato_cli.config import get_config_manager
from tomato_cli.utils.exit_codes import ERROR_CONFIG, ERROR_INVALID_ARGS
from tomato_cli.utils.ui.console import get_console
from tomato_cli.utils.ui.formatters import OUTPUT_FORMATS, format_output

app = typer.Typer(help="Configuration inspection commands")
console = get_console()


def _check_output(output: str) -> None:
    if output not in OUTPUT_FORMATS:
        raise AppError(
            f"Unknown output format '{output}' (choose from {', '.join(OUTPUT_FORMATS)})",
            exit_code=ERROR_INVALID_ARGS,
        )


@app.command("view")
@command_wrapper
def view_config(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """View the effective configuration."""
    _check_output(output)
    config_manager = get_config_manager()
    format_output(config_manager.config.model_dump(), output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., timer.focus_minutes)"),
) -> None:
    """Get a configuration value."""
    value = get_config_manager().get(key)
    if value is None:
        raise AppError(f"Configuration key '{key}' not found", exit_code=ERROR_CONFIG)
    if isinstance(value, BaseModel):
        format_output(value.model_dump())
    else:
        console.print(value)


@app.command("path")
@command_wrapper
def config_path() -> None:
    """Show where the configuration file is read from."""
    config_manager = get_config_manager()
    status = "" if config_manager.config_file.exists() else " [dim](not created)[/dim]"
    console.print(f"{config_manager.config_file}{status}")
