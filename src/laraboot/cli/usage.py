"""Help screen for the setup assistant."""

from rich.console import Console
from rich.text import Text

from laraboot import __version__
from laraboot.installer.steps import STEPS

LOGO = r"""
 ███████╗ ███████╗████████╗██╗   ██╗██████╗
 ██╔════╝ ██╔════╝╚══██╔══╝██║   ██║██╔══██╗
 ███████╗ █████╗     ██║   ██║   ██║██████╔╝
 ╚════██║ ██╔══╝     ██║   ██║   ██║██╔═══╝
 ███████║ ███████╗   ██║   ╚██████╔╝██║
 ╚══════╝ ╚══════╝   ╚═╝    ╚═════╝ ╚═╝
"""

OPTIONS = [
    ("--without COMMAND1,COMMAND2", "Skip specified commands"),
    ("--skip COMMAND1,COMMAND2", "Skip specified commands (alias for --without)"),
    ("--only COMMAND1,COMMAND2", "Run only specified commands"),
    ("--config PATH", "Read settings from PATH instead of .laraboot.yaml"),
    ("--dry-run", "Show which commands would run, then stop"),
    ("-v, --verbose", "Print debug diagnostics"),
    ("-h, --help", "Display this help message"),
]

OPTION_WIDTH = 32
COMMAND_WIDTH = 30


def _dotted(label: str, width: int) -> str:
    return (label + " ").ljust(width, ".")


def print_usage(console: Console) -> None:
    """Print the logo, options and the list of available commands."""
    title = f" Laravel Project Setup Assistant v{__version__}"
    console.print(Text(LOGO + "\n" + title + "\n " + "-" * (len(title) - 1), style="yellow"))

    console.print("Usage:")
    console.print(Text("  laraboot [options]\n", style="green"))

    console.print("Options:")
    for flag, description in OPTIONS:
        line = Text("  ")
        line.append(_dotted(flag, OPTION_WIDTH) + " ", style="green")
        line.append(description)
        console.print(line)
    console.print()

    console.print("Available Commands:")
    for step in STEPS:
        line = Text("  ")
        line.append(f"▶ {_dotted(step.name, COMMAND_WIDTH)} ", style="green")
        line.append(step.description)
        console.print(line)
