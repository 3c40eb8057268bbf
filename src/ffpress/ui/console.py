"""Rich console output and logging setup for ffpress."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

# Global console instance for consistent output
console = Console()


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the ffpress package.

    Log records are rendered through the shared Rich console. Calling this
    again replaces the handler rather than stacking a second one.

    Args:
        verbose: If True, enable DEBUG level logging; otherwise WARNING level.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            RichHandler(console=console, show_time=False, show_path=verbose),
        ],
        force=True,
    )


def print_success(message: str) -> None:
    """Print a success message.

    Args:
        message: The message to print.
    """
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message.

    Args:
        message: The message to print.
    """
    console.print(f"[red]✗[/red] {escape(message)}", style="red")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]→[/blue] {escape(message)}")
