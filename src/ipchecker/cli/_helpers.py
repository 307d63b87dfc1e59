"""Shared helpers for CLI commands."""

from pydantic import ValidationError
from rich.console import Console

console = Console()
err_console = Console(stderr=True)


def print_validation_error(exc: ValidationError) -> None:
    """Print pydantic validation errors one per line."""
    err_console.print("[red]Error:[/red] Invalid configuration")
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "settings"
        err_console.print(f"  {field}: {error['msg']}")
