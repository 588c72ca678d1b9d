"""Utility modules for REPOINIT.

This package contains:
- console: Rich-based terminal output utilities
- errors: Custom exceptions and exit codes
- logging: Logging configuration
"""

from repoinit.utils.console import (
    console,
    print_error,
    print_header,
    print_info,
    print_plain,
    print_step,
    print_success,
    print_warning,
    show_banner,
)
from repoinit.utils.errors import (
    CommitFailedError,
    ExitCode,
    InitFailedError,
    MissingDependencyError,
    NotAuthenticatedError,
    RemoteCreateFailedError,
    RepoInitError,
    StageFailedError,
    UserCancelledError,
)
from repoinit.utils.logging import log_command, log_message, setup_logging

__all__ = [
    # Console
    "console",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "print_step",
    "print_plain",
    "show_banner",
    # Errors
    "ExitCode",
    "RepoInitError",
    "MissingDependencyError",
    "NotAuthenticatedError",
    "InitFailedError",
    "StageFailedError",
    "CommitFailedError",
    "RemoteCreateFailedError",
    "UserCancelledError",
    # Logging
    "setup_logging",
    "log_message",
    "log_command",
]
