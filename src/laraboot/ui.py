"""Console output shared by the CLI and the installer."""

from rich.console import Console

console = Console()


def info(message: str) -> None:
    """Print a progress message in green, preceded by a blank line."""
    console.print()
    console.print(message, style="green", markup=False, highlight=False, soft_wrap=True)


def error(message: str) -> None:
    """Print an error message in bright red with the alarm marker."""
    console.print(f"🚨🚨🚨 {message}", style="bright_red", markup=False, highlight=False, soft_wrap=True)
