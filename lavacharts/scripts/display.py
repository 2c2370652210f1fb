"""Display helpers for CLI output."""

from click import echo, style


def print_info(message: str):
    """Print info message with styling."""
    echo(style(message, fg="blue", bold=True))


def print_header(message: str):
    """Print header message with styling."""
    echo(style(message, fg="magenta", bold=True))


def print_error(message: str):
    """Print error message with styling."""
    echo(style(message, fg="red", bold=True), err=True)
