"""Rich-based console output utilities.

Every message printed through these helpers is also written to the
log file when logging is enabled.
"""

from rich.console import Console
from rich.theme import Theme

from repoinit import REQUIRED_TOOLS, __version__

custom_theme = Theme(
    {
        "error": "bold red",
        "success": "bold green",
        "warning": "bold yellow",
        "info": "bold blue",
        "header": "bold magenta",
        "step": "bold cyan",
        "highlight": "bold white",
    }
)

console = Console(theme=custom_theme)
console_err = Console(theme=custom_theme, stderr=True)


def print_error(message: str) -> None:
    """Print error message in red.

    Args:
        message: Error message to display
    """
    from repoinit.utils.logging import log_message

    console_err.print(f"[error][[ERROR]][/error] [red]{message}[/red]")
    log_message(f"ERROR: {message}")


def print_success(message: str) -> None:
    """Print success message in green.

    Args:
        message: Success message to display
    """
    from repoinit.utils.logging import log_message

    console.print(f"[success][[SUCCESS]][/success] [green]{message}[/green]")
    log_message(f"SUCCESS: {message}")


def print_warning(message: str) -> None:
    """Print warning message in yellow.

    Args:
        message: Warning message to display
    """
    from repoinit.utils.logging import log_message

    console.print(f"[warning][[WARNING]][/warning] [yellow]{message}[/yellow]")
    log_message(f"WARNING: {message}")


def print_info(message: str) -> None:
    """Print info message in blue/cyan.

    Args:
        message: Info message to display
    """
    from repoinit.utils.logging import log_message

    console.print(f"[info][[INFO]][/info] [cyan]{message}[/cyan]")
    log_message(f"INFO: {message}")


def print_header(title: str) -> None:
    """Print section header in magenta."""
    console.print()
    console.print(f"[header]=== {title} ===[/header]")
    console.print()


def print_step(message: str) -> None:
    """Print step indicator with arrow."""
    console.print(f"[step]➜[/step] {message}")


def print_plain(message: str) -> None:
    """Print text verbatim, without markup interpretation."""
    console.print(message, markup=False, highlight=False)


def show_banner() -> None:
    """Display the startup banner."""
    console.print()
    console.print("[bold magenta]repoinit[/bold magenta] [white]v{}[/white]".format(__version__))
    console.print("[bold cyan]Create and publish a new GitHub repository[/bold cyan]")
    console.print()


def show_version() -> None:
    """Display version information."""
    console.print(f"[bold]REPOINIT[/bold] v{__version__}")
    console.print()
    console.print("Requirements:")
    for tool in REQUIRED_TOOLS:
        console.print(f"  - {tool} on PATH")
    console.print()


__all__ = [
    "console",
    "console_err",
    "custom_theme",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "print_step",
    "print_plain",
    "show_banner",
    "show_version",
]
