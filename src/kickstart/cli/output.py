"""
Output formatting utilities for the CLI.

Provides consistent output formatting across all CLI commands.
"""

from typing import Any

from rich.console import Console
from rich.table import Table

from kickstart.wizard.answers import Answers, answers_to_dict
from kickstart.wizard.ui.rich_renderer import summary_lines

# Global console instance
console = Console()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]i[/blue] {message}")


def print_table(
    headers: list[str],
    rows: list[list[Any]],
    title: str | None = None,
) -> None:
    """Print a table."""
    table = Table(title=title)

    for header in headers:
        table.add_column(header)

    for row in rows:
        table.add_row(*[str(cell) for cell in row])

    console.print(table)


def print_answers_table(answers: Answers, title: str = "Project setup") -> None:
    """Print the collected answers as a two-column table."""
    table = Table(title=title)
    table.add_column("Option", style="bold")
    table.add_column("Value")

    for label, value, color in summary_lines(answers):
        table.add_row(label, f"[{color}]{value}[/{color}]")

    console.print(table)


def print_answers_json(answers: Answers) -> None:
    """Print the collected answers as JSON on stdout."""
    console.print_json(data=answers_to_dict(answers))
