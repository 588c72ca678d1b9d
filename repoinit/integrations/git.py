"""Git operations for REPOINIT.

Thin wrappers around the git commands used to create the initial commit.
They never raise on a failed command; callers inspect the returned
ProcessOutcome and decide whether the failure is recoverable.
"""

from pathlib import Path

from repoinit.integrations.process import ProcessOutcome, run_command


def init_repository(initial_branch: str = "") -> ProcessOutcome:
    """Run 'git init' in the current directory.

    Args:
        initial_branch: Optional name for the initial branch
    """
    command = ["git", "init"]
    if initial_branch:
        command.append(f"--initial-branch={initial_branch}")
    return run_command(command)


def stage_all(excluded: list[str]) -> ProcessOutcome:
    """Stage every file except the excluded paths.

    Args:
        excluded: Paths that must never be staged
    """
    pathspecs = ["."] + [f":!{path}" for path in excluded]
    return run_command(["git", "add", "--all", "--", *pathspecs])


def commit(message: str) -> ProcessOutcome:
    """Commit the staged changes.

    Args:
        message: Commit message
    """
    return run_command(["git", "commit", "-m", message])


def add_safe_directory(directory: Path) -> ProcessOutcome:
    """Mark a directory as trusted in the global git configuration.

    Args:
        directory: Directory git rejected because of its owner
    """
    return run_command(
        ["git", "config", "--global", "--add", "safe.directory", directory.as_posix()]
    )


def set_local_identity(name: str, email: str) -> list[ProcessOutcome]:
    """Set the author identity for the current repository only.

    Returns:
        Outcomes of the user.name and user.email writes
    """
    return [
        run_command(["git", "config", "user.name", name]),
        run_command(["git", "config", "user.email", email]),
    ]


__all__ = [
    "init_repository",
    "stage_all",
    "commit",
    "add_safe_directory",
    "set_local_identity",
]
