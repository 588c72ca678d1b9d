"""Tests for repoinit.integrations.tools module."""

from unittest.mock import patch

import pytest

from repoinit.integrations.tools import INSTALL_HINTS, check_required_tools
from repoinit.utils.errors import ExitCode, MissingDependencyError


class TestCheckRequiredTools:
    """Tests for check_required_tools function."""

    @patch("repoinit.integrations.tools.shutil.which")
    def test_passes_when_all_tools_exist(self, mock_which):
        """No error when every tool resolves."""
        mock_which.side_effect = lambda tool: f"/usr/bin/{tool}"

        check_required_tools()

        assert [c.args[0] for c in mock_which.call_args_list] == ["git", "gh"]

    @patch("repoinit.integrations.tools.shutil.which")
    def test_missing_git(self, mock_which):
        """Missing git raises MissingDependencyError naming git."""
        mock_which.return_value = None

        with pytest.raises(MissingDependencyError) as exc_info:
            check_required_tools()

        assert exc_info.value.tool == "git"
        assert exc_info.value.hint == INSTALL_HINTS["git"]
        assert exc_info.value.exit_code == ExitCode.GENERAL_ERROR

    @patch("repoinit.integrations.tools.shutil.which")
    def test_missing_gh(self, mock_which):
        """Missing gh is reported after git was found."""
        mock_which.side_effect = lambda tool: "/usr/bin/git" if tool == "git" else None

        with pytest.raises(MissingDependencyError) as exc_info:
            check_required_tools()

        assert exc_info.value.tool == "gh"
        assert "cli.github.com" in exc_info.value.hint
