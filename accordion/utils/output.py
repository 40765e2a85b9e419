"""Shared console output utilities."""

from rich.console import Console

# Shared console instance for all CLI output
console = Console(force_terminal=True, color_system="auto")


def print_error(message: str) -> None:
    """Print an error line in the CLI's error style."""
    console.print(f"❌ Error: {message}", style="red")
