"""REPOINIT - Interactive provisioning of a new GitHub repository.

This package provides a Python CLI that checks the required tools, lets
the user pick a .gitignore template, initializes a local git repository,
commits the initial tree and publishes it through the GitHub CLI.
"""

__version__ = "1.0.0"
SCRIPT_NAME = "REPOINIT"
REQUIRED_TOOLS = ("git", "gh")

__all__ = [
    "__version__",
    "SCRIPT_NAME",
    "REQUIRED_TOOLS",
]
