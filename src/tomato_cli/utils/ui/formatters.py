"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.table import Table

from tomato_cli.utils.ui.console import get_console

console = get_console()

OUTPUT_FORMATS = ("table", "json", "yaml")


def flatten_dict(data: dict, prefix: str = "") -> dict[str, Any]:
    """Flatten nested dictionaries into dot-separated keys."""
    flat: dict[str, Any] = {}
    for key, value in data.items():
        dotted = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            flat.update(flatten_dict(value, dotted))
        else:
            flat[dotted] = value
    return flat


def format_value(value: Any) -> str:
    """Render a scalar for table output."""
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    if value is None:
        return "-"
    return str(value)


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    else:
        format_table(data)


def format_table(data: Any) -> None:
    """Format a (possibly nested) mapping as a key/value table."""
    if not data:
        console.print("[yellow]No data to display[/yellow]")
        return

    if not isinstance(data, dict):
        console.print(data)
        return

    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in flatten_dict(data).items():
        table.add_row(key, format_value(value))

    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")
