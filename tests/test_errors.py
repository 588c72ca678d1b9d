"""Tests for repoinit.utils.errors module."""

import pytest

from repoinit.utils.errors import (
    CommitFailedError,
    ExitCode,
    InitFailedError,
    MissingDependencyError,
    NotAuthenticatedError,
    ProcessFailedError,
    RemoteCreateFailedError,
    RepoInitError,
    StageFailedError,
    TemplateDownloadError,
    UserCancelledError,
)


class TestExitCode:
    """Tests for ExitCode enum."""

    def test_success_is_zero(self):
        """SUCCESS exit code is 0."""
        assert ExitCode.SUCCESS == 0

    def test_general_error_is_one(self):
        """GENERAL_ERROR exit code is 1."""
        assert ExitCode.GENERAL_ERROR == 1

    def test_user_cancelled_matches_sigint_convention(self):
        """USER_CANCELLED exit code is 130."""
        assert ExitCode.USER_CANCELLED == 130


class TestRepoInitError:
    """Tests for the RepoInitError base class."""

    def test_default_exit_code(self):
        """Defaults to GENERAL_ERROR."""
        error = RepoInitError("boom")

        assert error.exit_code == ExitCode.GENERAL_ERROR
        assert str(error) == "boom"
        assert error.hint == ""

    def test_exit_code_override(self):
        """Instance exit code overrides the class default."""
        error = RepoInitError("boom", exit_code=ExitCode.USER_CANCELLED)

        assert error.exit_code == ExitCode.USER_CANCELLED

    def test_hint_is_kept(self):
        """Hint text is stored on the exception."""
        error = RepoInitError("boom", hint="try again")

        assert error.hint == "try again"


class TestFatalErrors:
    """Every fatal provisioning error exits with code 1."""

    @pytest.mark.parametrize(
        "error",
        [
            MissingDependencyError("git"),
            NotAuthenticatedError("not logged in"),
            InitFailedError("init"),
            StageFailedError("stage"),
            CommitFailedError("commit"),
            RemoteCreateFailedError("create"),
        ],
    )
    def test_exit_code_is_general_error(self, error):
        """Fatal errors use GENERAL_ERROR."""
        assert isinstance(error, RepoInitError)
        assert error.exit_code == ExitCode.GENERAL_ERROR

    def test_missing_dependency_names_tool(self):
        """MissingDependencyError mentions the tool."""
        error = MissingDependencyError("gh", hint="install it")

        assert error.tool == "gh"
        assert "'gh'" in str(error)
        assert error.hint == "install it"

    def test_process_failure_keeps_output(self):
        """Process failures carry the captured output."""
        error = StageFailedError("stage", output="fatal: nope")

        assert isinstance(error, ProcessFailedError)
        assert error.output == "fatal: nope"


class TestUserCancelledError:
    """Tests for UserCancelledError."""

    def test_exit_code(self):
        """Uses USER_CANCELLED exit code."""
        assert UserCancelledError("bye").exit_code == ExitCode.USER_CANCELLED


class TestTemplateDownloadError:
    """Tests for TemplateDownloadError."""

    def test_is_repoinit_error(self):
        """Inherits from RepoInitError."""
        assert issubclass(TemplateDownloadError, RepoInitError)
