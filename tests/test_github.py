"""Tests for repoinit.integrations.github module."""

import pytest

from repoinit.integrations.github import (
    check_authenticated,
    create_repository,
    get_user_login,
)
from repoinit.utils.errors import NotAuthenticatedError
from tests.helpers import completed


class TestCheckAuthenticated:
    """Tests for check_authenticated function."""

    def test_passes_when_logged_in(self, mock_subprocess):
        """No error when 'gh auth status' succeeds."""
        check_authenticated()

        assert mock_subprocess.call_args[0][0] == ["gh", "auth", "status"]

    def test_raises_when_not_logged_in(self, mock_subprocess):
        """NotAuthenticatedError when 'gh auth status' fails."""
        mock_subprocess.return_value = completed(1, stderr="You are not logged into any GitHub hosts.")

        with pytest.raises(NotAuthenticatedError) as exc_info:
            check_authenticated()

        assert "gh auth login" in exc_info.value.hint

    def test_does_not_retry(self, mock_subprocess):
        """Authentication is checked exactly once."""
        mock_subprocess.return_value = completed(1)

        with pytest.raises(NotAuthenticatedError):
            check_authenticated()

        assert mock_subprocess.call_count == 1


class TestCreateRepository:
    """Tests for create_repository function."""

    def test_command_line(self, mock_subprocess):
        """Builds the full 'gh repo create' command."""
        create_repository("demo", "--public")

        assert mock_subprocess.call_args[0][0] == [
            "gh",
            "repo",
            "create",
            "demo",
            "--public",
            "--source=.",
            "--remote=origin",
            "--push",
            "--add-readme=false",
        ]

    def test_private_and_custom_remote(self, mock_subprocess):
        """Visibility flag and remote name are passed through."""
        create_repository("demo", "--private", remote_name="upstream")

        command = mock_subprocess.call_args[0][0]
        assert "--private" in command
        assert "--remote=upstream" in command


class TestGetUserLogin:
    """Tests for get_user_login function."""

    def test_returns_login(self, mock_subprocess):
        """Parses the login from 'gh api user'."""
        mock_subprocess.return_value = completed(0, stdout='{"login": "octocat", "id": 1}')

        assert get_user_login() == "octocat"
        assert mock_subprocess.call_args[0][0] == ["gh", "api", "user"]

    def test_ignores_stderr_noise(self, mock_subprocess):
        """Only stdout is parsed as JSON."""
        mock_subprocess.return_value = completed(
            0, stdout='{"login": "octocat"}', stderr="warning: something"
        )

        assert get_user_login() == "octocat"

    def test_failed_command_returns_none(self, mock_subprocess):
        """A failed lookup returns None."""
        mock_subprocess.return_value = completed(1, stderr="HTTP 401")

        assert get_user_login() is None

    def test_invalid_json_returns_none(self, mock_subprocess):
        """Unparseable output returns None."""
        mock_subprocess.return_value = completed(0, stdout="not json")

        assert get_user_login() is None
