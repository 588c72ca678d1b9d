"""Configuration management for REPOINIT.

This package contains:
- settings: Settings dataclass with all configuration fields
- manager: ConfigManager for loading the cascading configuration
"""

from repoinit.config.manager import ConfigManager
from repoinit.config.settings import CONFIG_FILE, Settings

__all__ = [
    "ConfigManager",
    "CONFIG_FILE",
    "Settings",
]
