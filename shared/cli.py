"""Console helpers shared by the tool CLIs."""

import functools
import sys
from typing import Any, Callable

from rich.console import Console

# Status lines go to stderr so stdout stays clean for piped output
console = Console(stderr=True, highlight=False)


def info(message: str) -> None:
    """Print an informational message."""
    console.print(f"[cyan]i[/cyan] {message}")


def success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]✓[/bold green] {message}")


def error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]✗[/bold red] {message}")


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorate a CLI entry point with last-resort error handling.

    Ctrl-C is reported on stderr and exits with status 130 instead of
    dumping a traceback.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            error("Interrupted")
            sys.exit(130)

    return wrapper
