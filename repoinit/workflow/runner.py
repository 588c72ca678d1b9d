"""Provisioning workflow runner.

Runs the provisioning steps strictly in order. Any step failure raises a
RepoInitError subclass; recoverable failures are handled inside the steps.
"""

from collections.abc import Callable
from pathlib import Path

from repoinit.config.settings import Settings
from repoinit.integrations.github import check_authenticated
from repoinit.integrations.templates import fetch_template_catalog
from repoinit.integrations.tools import check_required_tools
from repoinit.ui.prompts import prompt_confirm, prompt_input
from repoinit.ui.selector import select_template
from repoinit.utils.console import print_header, print_success
from repoinit.utils.logging import log_message
from repoinit.workflow.descriptor import RepositoryDescriptor
from repoinit.workflow.initializer import GITIGNORE_FILE, initialize_repository
from repoinit.workflow.publish import (
    commit_files,
    publish_repository,
    report_repository_url,
    stage_files,
)


def prompt_repository_name(prompt: Callable[[str], str] = prompt_input) -> str:
    """Ask for the repository name until a non-empty one is given."""
    while True:
        name = prompt("Repository name").strip()
        if name:
            return name


def run_provisioning(
    settings: Settings,
    directory: Path | None = None,
    prompt: Callable[[str], str] = prompt_input,
    confirm: Callable[..., bool] = prompt_confirm,
) -> RepositoryDescriptor:
    """Provision and publish a new repository from the current directory.

    Args:
        settings: Loaded configuration
        directory: Project directory (defaults to the current directory)
        prompt: Function reading one line of input
        confirm: Function asking a yes/no question

    Returns:
        Descriptor of the published repository

    Raises:
        RepoInitError: If any step fails
    """
    directory = directory or Path.cwd()
    log_message(f"Provisioning repository in {directory}")

    print_header("Checking Prerequisites")
    check_required_tools()
    check_authenticated()

    print_header("Select .gitignore Template")
    catalog = fetch_template_catalog(
        settings.template_list_url,
        timeout=settings.http_timeout_seconds,
    )
    template = select_template(catalog, directory / GITIGNORE_FILE, prompt=prompt)

    print_header("Repository Details")
    name = prompt_repository_name(prompt)
    private = confirm("Make the repository private?", default=False)
    descriptor = RepositoryDescriptor(name=name, private=private, template=template)

    print_header("Initializing Repository")
    initialize_repository(descriptor, settings, directory=directory, prompt=prompt)

    print_header("Publishing Repository")
    stage_files(settings, directory=directory)
    commit_files(descriptor, settings)
    publish_repository(descriptor, settings)
    report_repository_url(descriptor, settings)

    print_success("All done!")
    return descriptor


__all__ = ["prompt_repository_name", "run_provisioning"]
