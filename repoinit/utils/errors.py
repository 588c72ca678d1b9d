"""Custom exceptions and exit codes for REPOINIT.

This module defines the exit codes and exception hierarchy used throughout
the application. Every fatal condition of the provisioning run maps to one
exception type; the CLI is the only place that turns them into exit codes.
"""

from enum import IntEnum
from typing import ClassVar


class ExitCode(IntEnum):
    """Process exit codes.

    Every fatal provisioning failure exits with GENERAL_ERROR so that
    calling scripts only need to check for a non-zero status.
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USER_CANCELLED = 130  # Matches the shell convention for SIGINT


class RepoInitError(Exception):
    """Base exception for REPOINIT errors.

    All custom exceptions in this application should inherit from this class.
    Each exception type has an associated exit code for proper error reporting.

    Attributes:
        exit_code: The exit code to use when this exception causes program termination
        hint: Optional remediation text shown below the error message
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GENERAL_ERROR

    def __init__(
        self,
        message: str,
        hint: str = "",
        exit_code: ExitCode | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message describing what went wrong
            hint: Optional remediation text for the user
            exit_code: Optional override for the default exit code
        """
        super().__init__(message)
        self.hint = hint
        self._exit_code = exit_code

    @property
    def exit_code(self) -> ExitCode:
        """Get the exit code for this exception.

        Returns:
            The instance exit code if set, otherwise the class default exit code.
        """
        if self._exit_code is not None:
            return self._exit_code
        return self.__class__._default_exit_code


class MissingDependencyError(RepoInitError):
    """A required external tool is not available on PATH.

    Attributes:
        tool: Name of the missing executable
    """

    def __init__(self, tool: str, hint: str = "") -> None:
        self.tool = tool
        super().__init__(f"Required tool '{tool}' was not found on PATH.", hint=hint)


class NotAuthenticatedError(RepoInitError):
    """The GitHub CLI has no authenticated session."""


class ProcessFailedError(RepoInitError):
    """An external command of the provisioning pipeline failed.

    Attributes:
        output: Combined stdout/stderr captured from the failed command
    """

    def __init__(self, message: str, output: str = "", hint: str = "") -> None:
        super().__init__(message, hint=hint)
        self.output = output


class InitFailedError(ProcessFailedError):
    """'git init' failed."""


class StageFailedError(ProcessFailedError):
    """'git add' failed, after the ownership recovery if it applied."""


class CommitFailedError(ProcessFailedError):
    """'git commit' failed, after the identity recovery if it applied."""


class RemoteCreateFailedError(ProcessFailedError):
    """'gh repo create' failed."""


class ConfigError(RepoInitError):
    """A configuration file could not be read."""


class TemplateDownloadError(RepoInitError):
    """Downloading a .gitignore template failed.

    Never fatal: the initializer falls back to an empty ignore file.
    """


class UserCancelledError(RepoInitError):
    """User cancelled the operation.

    Raised when:
    - User presses Ctrl+C or Ctrl+D at a prompt
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.USER_CANCELLED


__all__ = [
    "ExitCode",
    "RepoInitError",
    "MissingDependencyError",
    "NotAuthenticatedError",
    "ProcessFailedError",
    "InitFailedError",
    "StageFailedError",
    "CommitFailedError",
    "RemoteCreateFailedError",
    "ConfigError",
    "TemplateDownloadError",
    "UserCancelledError",
]
