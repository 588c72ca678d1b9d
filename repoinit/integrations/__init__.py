"""External integrations for REPOINIT.

This package contains:
- process: Running external commands and capturing their outcome
- tools: Required tool availability checks
- git: Git command wrappers
- github: GitHub CLI command wrappers
- templates: .gitignore template catalog and downloads
"""

from repoinit.integrations.github import (
    check_authenticated,
    create_repository,
    get_user_login,
)
from repoinit.integrations.process import ProcessOutcome, run_command
from repoinit.integrations.templates import (
    FALLBACK_TEMPLATES,
    NO_TEMPLATE,
    download_template,
    fetch_template_catalog,
    template_download_url,
)
from repoinit.integrations.tools import check_required_tools

__all__ = [
    # Process
    "ProcessOutcome",
    "run_command",
    # Tools
    "check_required_tools",
    # GitHub
    "check_authenticated",
    "create_repository",
    "get_user_login",
    # Templates
    "FALLBACK_TEMPLATES",
    "NO_TEMPLATE",
    "download_template",
    "fetch_template_catalog",
    "template_download_url",
]
