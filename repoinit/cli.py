"""CLI interface for REPOINIT.

This module provides the Typer-based command-line interface. It loads the
configuration, runs the provisioning workflow and turns errors into exit
codes. It is the only place where RepoInitError is caught.
"""

from contextlib import suppress
from typing import Annotated

import typer

from repoinit.config.manager import ConfigManager
from repoinit.config.settings import Settings
from repoinit.ui.prompts import prompt_enter
from repoinit.utils.console import console, print_error, print_info, show_banner, show_version
from repoinit.utils.errors import ExitCode, ProcessFailedError, RepoInitError, UserCancelledError
from repoinit.utils.logging import setup_logging
from repoinit.workflow.runner import run_provisioning

app = typer.Typer(
    name="repoinit",
    help="REPOINIT - Create a git repository here and publish it to GitHub",
    add_completion=False,
    no_args_is_help=False,
)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        show_version()
        raise typer.Exit()


def _report_error(error: RepoInitError) -> None:
    """Print a fatal error with its hint and captured command output."""
    print_error(str(error))
    if isinstance(error, ProcessFailedError) and error.output.strip():
        console.print(error.output.strip(), style="dim", markup=False, highlight=False)
    if error.hint:
        print_info(error.hint)


def _pause_before_exit(settings: Settings) -> None:
    """Keep the terminal open until the user has read the error."""
    if not settings.pause_on_error:
        return
    with suppress(UserCancelledError):
        prompt_enter("Press any key to exit...")


@app.command()
def main(
    show_config: Annotated[
        bool,
        typer.Option(
            "--show-config",
            help="Show current configuration and exit",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """REPOINIT - Create a git repository here and publish it to GitHub.

    Checks that git and the GitHub CLI are ready, lets you choose a
    .gitignore template, writes a README, commits everything and creates
    the GitHub repository.
    """
    setup_logging()

    settings = Settings()

    try:
        config = ConfigManager()
        settings = config.load()

        if show_config:
            config.show()
            raise typer.Exit()

        show_banner()
        run_provisioning(settings)

    except UserCancelledError as e:
        print_info(f"\n{e}")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e

    except RepoInitError as e:
        _report_error(e)
        _pause_before_exit(settings)
        raise typer.Exit(e.exit_code) from e

    except KeyboardInterrupt as e:
        print_info("\nOperation cancelled by user")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e


__all__ = ["app", "main"]
