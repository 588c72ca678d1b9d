"""Checks that the external tools REPOINIT drives are installed."""

import shutil
from collections.abc import Iterable

from repoinit import REQUIRED_TOOLS
from repoinit.utils.console import print_success
from repoinit.utils.errors import MissingDependencyError
from repoinit.utils.logging import log_message

INSTALL_HINTS: dict[str, str] = {
    "git": "Install Git from https://git-scm.com/downloads and make sure 'git' is on PATH.",
    "gh": "Install the GitHub CLI from https://cli.github.com/ and make sure 'gh' is on PATH.",
}


def check_required_tools(tools: Iterable[str] = REQUIRED_TOOLS) -> None:
    """Verify every tool resolves on PATH.

    Args:
        tools: Executable names to look up

    Raises:
        MissingDependencyError: For the first tool that is missing
    """
    for tool in tools:
        path = shutil.which(tool)
        if path is None:
            raise MissingDependencyError(tool, hint=INSTALL_HINTS.get(tool, ""))
        log_message(f"Found {tool} at {path}")

    print_success("All required tools are installed")


__all__ = ["INSTALL_HINTS", "check_required_tools"]
