"""GitHub CLI ('gh') operations for REPOINIT."""

import json

from repoinit.integrations.process import ProcessOutcome, run_command
from repoinit.utils.console import print_success
from repoinit.utils.errors import NotAuthenticatedError


def check_authenticated() -> None:
    """Verify that 'gh' has an authenticated session.

    Raises:
        NotAuthenticatedError: If 'gh auth status' fails
    """
    outcome = run_command(["gh", "auth", "status"])
    if not outcome.success:
        raise NotAuthenticatedError(
            "The GitHub CLI is not authenticated.",
            hint="Run 'gh auth login' and try again.",
        )
    print_success("GitHub CLI is authenticated")


def create_repository(
    name: str,
    visibility_flag: str,
    remote_name: str = "origin",
) -> ProcessOutcome:
    """Create the hosted repository from the current directory and push it.

    The remote README is disabled so the local one is not overwritten.

    Args:
        name: Repository name
        visibility_flag: "--public" or "--private"
        remote_name: Name of the git remote to add
    """
    return run_command(
        [
            "gh",
            "repo",
            "create",
            name,
            visibility_flag,
            "--source=.",
            f"--remote={remote_name}",
            "--push",
            "--add-readme=false",
        ]
    )


def get_user_login() -> str | None:
    """Get the login of the authenticated user.

    Returns:
        The login, or None if the lookup failed
    """
    outcome = run_command(["gh", "api", "user"])
    if not outcome.success:
        return None
    try:
        login = json.loads(outcome.stdout).get("login")
    except (ValueError, AttributeError):
        return None
    return login or None


__all__ = [
    "check_authenticated",
    "create_repository",
    "get_user_login",
]
