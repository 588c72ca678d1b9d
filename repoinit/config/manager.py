"""Configuration manager for REPOINIT.

This module provides the ConfigManager class for loading configuration
values with a cascading hierarchy:

    1. Environment Variables (highest priority)
    2. Local Config (.repoinit in the current directory)
    3. Global Config (~/.repoinit-config)
    4. Built-in Defaults (lowest priority)
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from repoinit.config.settings import CONFIG_FILE, Settings
from repoinit.utils.console import console, print_header
from repoinit.utils.errors import ConfigError
from repoinit.utils.logging import log_message

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads REPOINIT settings from files and the environment.

    Attributes:
        global_config_path: Path to the global config file
        local_config_path: Path to the local config file, if one was found
        settings: The loaded Settings instance
    """

    LOCAL_CONFIG_NAME = ".repoinit"

    def __init__(self, global_config_path: Path | None = None) -> None:
        """Initialize the configuration manager.

        Args:
            global_config_path: Optional custom path to global config file.
                                Defaults to ~/.repoinit-config.
        """
        self.global_config_path = global_config_path or CONFIG_FILE
        self.local_config_path: Path | None = None
        self.settings = Settings()
        self._raw_values: dict[str, str] = {}
        self._config_sources: dict[str, str] = {}

    def load(self) -> Settings:
        """Load configuration from all sources with cascading precedence.

        Only KEY=VALUE or KEY="VALUE" pairs are read; nothing is evaluated.
        Each call starts from clean defaults.

        Returns:
            Settings instance with loaded values
        """
        self.settings = Settings()
        self.local_config_path = None
        self._raw_values = {}
        self._config_sources = {}

        if self.global_config_path.exists():
            log_message(f"Loading global configuration from {self.global_config_path}")
            self._load_file(self.global_config_path, source="global")

        local_path = Path.cwd() / self.LOCAL_CONFIG_NAME
        if local_path.is_file():
            self.local_config_path = local_path
            log_message(f"Loading local configuration from {local_path}")
            self._load_file(local_path, source=f"local ({local_path})")

        self._load_environment()

        for key, value in self._raw_values.items():
            self._apply_value_to_settings(key, value)

        log_message(f"Configuration loaded successfully ({len(self._raw_values)} keys)")
        return self.settings

    def _load_file(self, path: Path, source: str = "file") -> None:
        """Load key=value pairs from a config file.

        Args:
            path: Path to the config file
            source: Source identifier shown by show()

        Raises:
            ConfigError: If the file cannot be read or is not UTF-8
        """
        pattern = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)=(.*)$")

        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(
                f"Could not read configuration file {path}: {e}",
                hint="Fix or remove the file and try again.",
            ) from e

        for line in lines:
            line = line.strip()

            if not line or line.startswith("#"):
                continue

            match = pattern.match(line)
            if match:
                key, value = match.groups()

                if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
                    value = value[1:-1]

                self._raw_values[key] = value
                self._config_sources[key] = source

    def _load_environment(self) -> None:
        """Override config with environment variables for known keys only."""
        for key in Settings.get_config_keys():
            env_value = os.environ.get(key)
            if env_value is not None:
                self._raw_values[key] = env_value
                self._config_sources[key] = "environment"

    def _apply_value_to_settings(self, key: str, value: str) -> None:
        """Apply a raw config value to the settings object.

        Args:
            key: Configuration key
            value: Raw string value
        """
        attr = self.settings.get_attribute_for_key(key)
        if attr is None:
            return

        current_value = getattr(self.settings, attr)

        if isinstance(current_value, bool):
            setattr(self.settings, attr, value.lower() in ("true", "1", "yes"))
        elif isinstance(current_value, int):
            try:
                setattr(self.settings, attr, int(value))
            except ValueError:
                logger.warning(f"Invalid integer for {key}: {value!r}, keeping default")
        else:
            setattr(self.settings, attr, value)

    def show(self) -> None:
        """Display the effective configuration and where each value came from."""
        print_header("Current Configuration")

        for key in Settings.get_config_keys():
            attr = self.settings.get_attribute_for_key(key)
            value = getattr(self.settings, attr)
            source = self._config_sources.get(key, "default")
            console.print(f"  [bold]{key}[/bold] = {value} [dim]({source})[/dim]")

        console.print()
        console.print(f"  Global config: {self.global_config_path}")
        if self.local_config_path:
            console.print(f"  Local config:  {self.local_config_path}")
        console.print()


__all__ = ["ConfigManager"]
