"""Settings dataclass for REPOINIT configuration.

This module defines the Settings dataclass that holds all configuration
values together with the mapping between config file keys and attributes.
"""

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_TEMPLATE_LIST_URL = "https://api.github.com/repos/github/gitignore/contents"
DEFAULT_TEMPLATE_RAW_URL = "https://raw.githubusercontent.com/github/gitignore/main"


@dataclass
class Settings:
    """Configuration settings for REPOINIT.

    All settings have sensible defaults and can be overridden from the
    global config file (~/.repoinit-config), a local .repoinit file or
    environment variables.

    Attributes:
        commit_message: Message of the initial commit
        remote_name: Name of the git remote created by 'gh repo create'
        default_branch: Initial branch name passed to 'git init' (empty = git default)
        template_list_url: Endpoint listing the available .gitignore templates
        template_raw_url: Base URL serving raw template content
        http_timeout_seconds: Timeout for template catalog and download requests
        identity_name: Temporary author name used when git has no identity
        identity_email: Temporary author email used when git has no identity
        excluded_paths: Comma-separated tool artifacts never staged
        host_url: Base URL of the hosting service, used to report the repo URL
        pause_on_error: Wait for Enter before exiting on a fatal error
    """

    # Git settings
    commit_message: str = "Initial commit"
    remote_name: str = "origin"
    default_branch: str = ""
    identity_name: str = "repoinit"
    identity_email: str = "repoinit@users.noreply.github.com"
    excluded_paths: str = "repoinit.py,.repoinit,repoinit.log"

    # Template settings
    template_list_url: str = DEFAULT_TEMPLATE_LIST_URL
    template_raw_url: str = DEFAULT_TEMPLATE_RAW_URL
    http_timeout_seconds: int = 10

    # Hosting settings
    host_url: str = "https://github.com"

    # UI settings
    pause_on_error: bool = True

    _key_mapping: dict[str, str] = field(
        default_factory=lambda: {
            "COMMIT_MESSAGE": "commit_message",
            "REMOTE_NAME": "remote_name",
            "DEFAULT_BRANCH": "default_branch",
            "IDENTITY_NAME": "identity_name",
            "IDENTITY_EMAIL": "identity_email",
            "EXCLUDED_PATHS": "excluded_paths",
            "TEMPLATE_LIST_URL": "template_list_url",
            "TEMPLATE_RAW_URL": "template_raw_url",
            "HTTP_TIMEOUT_SECONDS": "http_timeout_seconds",
            "HOST_URL": "host_url",
            "PAUSE_ON_ERROR": "pause_on_error",
        },
        repr=False,
    )

    def get_attribute_for_key(self, key: str) -> str | None:
        """Get the attribute name for a config key.

        Args:
            key: Configuration key (e.g., "COMMIT_MESSAGE")

        Returns:
            Attribute name or None if key is unknown
        """
        return self._key_mapping.get(key)

    @classmethod
    def get_config_keys(cls) -> list[str]:
        """Get list of all valid configuration keys."""
        temp = cls()
        return list(temp._key_mapping.keys())

    @property
    def excluded_path_list(self) -> list[str]:
        """Excluded artifacts as a list, blanks removed."""
        return [p.strip() for p in self.excluded_paths.split(",") if p.strip()]


CONFIG_FILE = Path.home() / ".repoinit-config"


__all__ = [
    "Settings",
    "CONFIG_FILE",
    "DEFAULT_TEMPLATE_LIST_URL",
    "DEFAULT_TEMPLATE_RAW_URL",
]
