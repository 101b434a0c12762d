import os
import sys

from rich.console import Console


def is_ci_environment():
    return (
        os.getenv('CI') is not None or
        os.getenv('GITHUB_ACTIONS') is not None or
        not sys.stdout.isatty()
    )


def get_console() -> Console:
    """Detect environment and create console."""
    if is_ci_environment():
        # Piped or automated: plain text, no markup highlighting
        return Console(force_terminal=False, no_color=True, highlight=False)
    return Console(highlight=False)


def print_success(console: Console, message: str) -> None:
    console.print(message, style="green", markup=False)


def print_warning(console: Console, message: str) -> None:
    console.print(message, style="yellow", markup=False)


def print_error(console: Console, message: str) -> None:
    console.print(message, style="red", markup=False)
