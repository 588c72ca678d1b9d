"""User interface components for REPOINIT.

This package contains:
- prompts: Questionary-based user input prompts
- selector: Free-text .gitignore template selection
"""

from repoinit.ui.prompts import (
    custom_style,
    prompt_confirm,
    prompt_enter,
    prompt_input,
)
from repoinit.ui.selector import (
    find_suggestions,
    format_catalog_rows,
    match_template,
    select_template,
)

__all__ = [
    # Prompts
    "custom_style",
    "prompt_confirm",
    "prompt_enter",
    "prompt_input",
    # Selector
    "find_suggestions",
    "format_catalog_rows",
    "match_template",
    "select_template",
]
