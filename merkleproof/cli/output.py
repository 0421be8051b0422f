"""Shared output formatting with ASCII boxes. NO class - just functions."""

import json

import click

BOX_WIDTH = 60


def print_json(data: dict) -> None:
    """Print JSON data formatted."""
    click.echo(json.dumps(data, indent=2, sort_keys=True))


def _truncate(text: str, max_len: int = 50) -> str:
    """Truncate text with ellipsis if too long."""
    return text[:max_len-3] + "..." if len(text) > max_len else text


def _box_top(title: str) -> str:
    return f"╭─ {title} " + "─" * max(BOX_WIDTH - len(title) - 4, 0) + "╮"


def _box_row(text: str) -> str:
    line = f"│ {text}"
    return line + " " * max(BOX_WIDTH - len(line), 0) + "│"


def _box_bottom() -> str:
    return "╰" + "─" * (BOX_WIDTH - 1) + "╯"


def success_box(title: str, rows: list[tuple[str, str]], next_cmd: str | None = None) -> None:
    """Print success box with optional Next: suggestion."""
    click.echo(click.style(_box_top(title), fg="green"))
    for label, value in rows:
        click.echo(_box_row(f"{label}: {_truncate(str(value), BOX_WIDTH - len(label) - 6)}"))
    click.echo(click.style(_box_bottom(), fg="green"))
    if next_cmd:
        click.echo(f"Next: {next_cmd}")


def error_box(title: str, message: str, fix_cmd: str | None = None) -> None:
    """Print error box with optional Fix: suggestion."""
    click.echo(click.style(_box_top(title), fg="red"), err=True)
    click.echo(_box_row(_truncate(message, BOX_WIDTH - 4)), err=True)
    click.echo(click.style(_box_bottom(), fg="red"), err=True)
    if fix_cmd:
        click.echo(f"Fix: {fix_cmd}", err=True)
