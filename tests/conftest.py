"""Shared pytest fixtures for REPOINIT tests."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from repoinit.config.settings import Settings


@pytest.fixture
def mock_subprocess():
    """Mock subprocess.run for git/gh commands."""
    with patch("subprocess.run") as mock:
        mock.return_value = MagicMock(
            returncode=0,
            stdout="",
            stderr="",
        )
        yield mock


@pytest.fixture
def in_tmp_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings() -> Settings:
    """Default settings with pausing disabled."""
    return Settings(pause_on_error=False)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every REPOINIT config key from the environment."""
    for key in Settings.get_config_keys():
        monkeypatch.delenv(key, raising=False)
