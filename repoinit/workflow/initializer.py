"""Local repository initialization.

Creates the git repository and writes the two generated files:
.gitignore (from the selected template) and README.md.
"""

from collections.abc import Callable
from pathlib import Path

from repoinit.config.settings import Settings
from repoinit.integrations import git
from repoinit.integrations.templates import download_template
from repoinit.ui.prompts import prompt_input
from repoinit.utils.console import print_info, print_step, print_success, print_warning
from repoinit.utils.errors import InitFailedError, TemplateDownloadError
from repoinit.utils.files import normalize_file, write_text_crlf
from repoinit.workflow.descriptor import RepositoryDescriptor

GITIGNORE_FILE = ".gitignore"
README_FILE = "README.md"
README_END = "END"


def init_local_repository(settings: Settings) -> None:
    """Run 'git init' in the current directory.

    Raises:
        InitFailedError: If git init fails
    """
    print_step("Initializing git repository...")
    outcome = git.init_repository(settings.default_branch)
    if not outcome.success:
        raise InitFailedError("Failed to initialize the git repository.", output=outcome.output)
    print_success("Initialized git repository")


def write_gitignore(descriptor: RepositoryDescriptor, settings: Settings, path: Path) -> None:
    """Write the ignore file for the selected template.

    A failed download is not fatal; the file is left empty instead.
    """
    if descriptor.has_template:
        print_step(f"Downloading {descriptor.template} .gitignore template...")
        try:
            content = download_template(
                descriptor.template,
                raw_url=settings.template_raw_url,
                timeout=settings.http_timeout_seconds,
            )
        except TemplateDownloadError as e:
            print_warning(f"{e}. Creating an empty .gitignore instead.")
            content = ""
        path.write_text(content, encoding="utf-8", newline="")

    normalize_file(path)
    print_success(f"Wrote {path.name}")


def collect_readme_lines(prompt: Callable[[str], str] = prompt_input) -> list[str]:
    """Read README lines until the END sentinel.

    The sentinel line itself is not part of the result.
    """
    print_info(f"Enter the README text line by line. Type {README_END} on its own line to finish.")
    lines: list[str] = []
    while True:
        line = prompt(">")
        if line == README_END:
            return lines
        lines.append(line)


def write_readme(descriptor: RepositoryDescriptor, path: Path) -> None:
    write_text_crlf(path, descriptor.readme_text())
    print_success(f"Wrote {path.name}")


def initialize_repository(
    descriptor: RepositoryDescriptor,
    settings: Settings,
    directory: Path | None = None,
    prompt: Callable[[str], str] = prompt_input,
) -> None:
    """Create the local repository and its generated files.

    Args:
        descriptor: The repository being provisioned; readme_lines is filled in
        settings: Loaded configuration
        directory: Project directory (defaults to the current directory)
        prompt: Function reading one line of input

    Raises:
        InitFailedError: If git init fails
    """
    directory = directory or Path.cwd()

    init_local_repository(settings)
    write_gitignore(descriptor, settings, directory / GITIGNORE_FILE)

    descriptor.readme_lines = collect_readme_lines(prompt)
    write_readme(descriptor, directory / README_FILE)


__all__ = [
    "GITIGNORE_FILE",
    "README_FILE",
    "README_END",
    "init_local_repository",
    "write_gitignore",
    "collect_readme_lines",
    "write_readme",
    "initialize_repository",
]
