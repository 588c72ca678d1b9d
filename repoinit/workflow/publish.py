"""Initial commit and publication of the repository.

Staging and committing each have one known recoverable failure:

- git refuses a directory owned by another user ("dubious ownership");
  the directory is added to the global safe.directory list.
- git has no author identity configured; a temporary identity is set
  for this repository only and the commit message names the template.
"""

from pathlib import Path

from repoinit.config.settings import Settings
from repoinit.integrations import git, github
from repoinit.integrations.process import ProcessOutcome
from repoinit.utils.console import print_info, print_step, print_success, print_warning
from repoinit.utils.errors import (
    CommitFailedError,
    RemoteCreateFailedError,
    StageFailedError,
)
from repoinit.workflow.descriptor import RepositoryDescriptor
from repoinit.workflow.recovery import RecoveryRule, run_with_recovery

DUBIOUS_OWNERSHIP_SIGNATURE = "detected dubious ownership"
MISSING_IDENTITY_SIGNATURES = ("Please tell me who you are", "Author identity unknown")


def _stage_rules(directory: Path) -> list[RecoveryRule]:
    return [
        RecoveryRule(
            signature=DUBIOUS_OWNERSHIP_SIGNATURE,
            description=f"Git does not trust {directory}, adding it to safe.directory...",
            repair=lambda: git.add_safe_directory(directory),
        ),
    ]


def _commit_rules(descriptor: RepositoryDescriptor, settings: Settings) -> list[RecoveryRule]:
    retry_message = template_commit_message(settings.commit_message, descriptor.template)
    return [
        RecoveryRule(
            signature=signature,
            description="Git has no author identity, using a temporary one for this repository...",
            repair=lambda: git.set_local_identity(settings.identity_name, settings.identity_email),
            retry=lambda: git.commit(retry_message),
        )
        for signature in MISSING_IDENTITY_SIGNATURES
    ]


def template_commit_message(message: str, template: str) -> str:
    """Commit message qualified with the template name."""
    return f"{message} ({template} .gitignore template)"


def stage_files(settings: Settings, directory: Path | None = None) -> ProcessOutcome:
    """Stage all files except the tool's own artifacts.

    Raises:
        StageFailedError: If staging fails and cannot be recovered
    """
    directory = directory or Path.cwd()
    print_step("Staging files...")
    outcome = run_with_recovery(
        lambda: git.stage_all(settings.excluded_path_list),
        _stage_rules(directory),
        StageFailedError,
        "Failed to stage files.",
    )
    print_success("Staged files")
    return outcome


def commit_files(descriptor: RepositoryDescriptor, settings: Settings) -> ProcessOutcome:
    """Create the initial commit.

    Raises:
        CommitFailedError: If committing fails and cannot be recovered
    """
    print_step("Creating initial commit...")
    outcome = run_with_recovery(
        lambda: git.commit(settings.commit_message),
        _commit_rules(descriptor, settings),
        CommitFailedError,
        "Failed to create the initial commit.",
    )
    print_success("Created initial commit")
    return outcome


def publish_repository(descriptor: RepositoryDescriptor, settings: Settings) -> None:
    """Create the hosted repository and push the initial commit.

    Raises:
        RemoteCreateFailedError: If 'gh repo create' fails
    """
    visibility = "private" if descriptor.private else "public"
    print_step(f"Creating {visibility} repository '{descriptor.name}' on GitHub...")
    outcome = github.create_repository(
        descriptor.name,
        descriptor.visibility_flag,
        remote_name=settings.remote_name,
    )
    if not outcome.success:
        raise RemoteCreateFailedError(
            f"Failed to create the repository '{descriptor.name}'.",
            output=outcome.output,
            hint="A repository with this name probably already exists on your account.",
        )
    print_success(f"Created and pushed repository '{descriptor.name}'")


def report_repository_url(descriptor: RepositoryDescriptor, settings: Settings) -> str | None:
    """Print the URL of the new repository.

    Returns:
        The URL, or None if the user login could not be determined
    """
    login = github.get_user_login()
    if login is None:
        print_warning("Could not determine your GitHub login to show the repository URL.")
        return None

    url = f"{settings.host_url.rstrip('/')}/{login}/{descriptor.name}"
    print_info(f"Repository URL: {url}")
    return url


__all__ = [
    "DUBIOUS_OWNERSHIP_SIGNATURE",
    "MISSING_IDENTITY_SIGNATURES",
    "template_commit_message",
    "stage_files",
    "commit_files",
    "publish_repository",
    "report_repository_url",
]
