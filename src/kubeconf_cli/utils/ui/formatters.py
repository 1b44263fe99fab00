"""Output formatters for kubeconf commands."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.markup import escape
from rich.table import Table

from kubeconf_cli.utils.ui.console import get_console


def quote_name(value: str) -> str:
    """Double-quote a name for messages, escaping quotes and control characters."""
    return json.dumps(value, ensure_ascii=False)


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(
        f"[bold red]Error:[/bold red] {escape(message)}", highlight=False, emoji=False
    )


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    get_console().print(
        f"[bold yellow]Warning:[/bold yellow] {escape(message)}", emoji=False
    )


def format_hint(message: str) -> None:
    """Display a dimmed follow-up hint, e.g. where to find help."""
    get_console().print(f"[dim]{escape(message)}[/dim]", emoji=False)


def format_table(columns: list[str], rows: list[list[str]]) -> None:
    """Render rows as a borderless kubectl-style table."""
    table = Table(box=None, show_edge=False, pad_edge=False, header_style="bold")
    for column in columns:
        table.add_column(column, overflow="fold")
    for row in rows:
        table.add_row(*(escape(cell) for cell in row))
    get_console().print(table)


def format_output(data: Any, output_format: str) -> None:
    """Dump structured data as json or yaml."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), end="")
    else:
        raise ValueError(f"unsupported output format: {output_format}")
