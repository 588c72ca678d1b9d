"""Interactive .gitignore template selection.

The user types a template name instead of scrolling a menu of a few
hundred entries. Besides template names the prompt understands two
commands: "list" prints the catalog and "none" selects an empty ignore
file. Matching is case-insensitive but the returned name always keeps
the catalog casing, because the download URL is case-sensitive.
"""

from collections.abc import Callable, Sequence
from pathlib import Path

from repoinit.integrations.templates import NO_TEMPLATE
from repoinit.ui.prompts import prompt_input
from repoinit.utils.console import print_info, print_plain, print_success, print_warning
from repoinit.utils.files import write_text_crlf
from repoinit.utils.logging import log_message

LIST_COMMAND = "list"
NONE_COMMAND = "none"

COLUMNS_PER_ROW = 3
COLUMN_WIDTH = 25


def format_catalog_rows(
    catalog: Sequence[str],
    per_row: int = COLUMNS_PER_ROW,
    width: int = COLUMN_WIDTH,
) -> list[str]:
    """Lay the catalog out in fixed-width rows.

    Each entry is right-padded to ``width``, entries of one row are joined
    with " - " and every row starts with "- ".
    """
    rows = []
    for start in range(0, len(catalog), per_row):
        chunk = catalog[start : start + per_row]
        rows.append("- " + " - ".join(name.ljust(width) for name in chunk))
    return rows


def match_template(choice: str, catalog: Sequence[str]) -> str | None:
    """Find the catalog entry equal to choice, ignoring case.

    Returns:
        The entry with catalog casing, or None if nothing matches exactly.
    """
    wanted = choice.strip().lower()
    for name in catalog:
        if name.lower() == wanted:
            return name
    return None


def find_suggestions(choice: str, catalog: Sequence[str]) -> list[str]:
    """Catalog entries containing choice as a case-insensitive substring."""
    wanted = choice.strip().lower()
    if not wanted:
        return []
    return [name for name in catalog if wanted in name.lower()]


def resolve_choice(choice: str, catalog: Sequence[str]) -> str | None:
    """Handle one line of selector input.

    Prints whatever feedback the input calls for.

    Returns:
        The selected template name (NO_TEMPLATE for "none"), or None if the
        user has to be prompted again.
    """
    choice = choice.strip()
    if not choice:
        return None

    command = choice.lower()
    if command == NONE_COMMAND:
        return NO_TEMPLATE

    if command == LIST_COMMAND:
        for row in format_catalog_rows(catalog):
            print_plain(row)
        return None

    selected = match_template(choice, catalog)
    if selected is not None:
        return selected

    suggestions = find_suggestions(choice, catalog)
    if suggestions:
        print_info(f"Template '{choice}' not found. Did you mean one of these?")
        for name in suggestions:
            print_plain(f"  - {name}")
    else:
        print_warning(
            f"Template '{choice}' not found. Type '{LIST_COMMAND}' to see all templates."
        )
    return None


def select_template(
    catalog: Sequence[str],
    gitignore_path: Path,
    prompt: Callable[[str], str] = prompt_input,
) -> str:
    """Prompt until the user picks a template.

    Choosing "none" writes an empty ignore file straight away.

    Args:
        catalog: Template names, as returned by fetch_template_catalog()
        gitignore_path: Where the ignore file will be written
        prompt: Function reading one line of input

    Returns:
        The chosen template name with catalog casing, or NO_TEMPLATE.
    """
    print_info(
        f"Enter a .gitignore template name, '{LIST_COMMAND}' to show all templates "
        f"or '{NONE_COMMAND}' for an empty .gitignore."
    )

    while True:
        selected = resolve_choice(prompt("Template"), catalog)
        if selected is None:
            continue

        log_message(f"Template selected: {selected}")
        if selected == NO_TEMPLATE:
            write_text_crlf(gitignore_path, "")
            print_success("Created an empty .gitignore")
        else:
            print_success(f"Selected template: {selected}")
        return selected


__all__ = [
    "LIST_COMMAND",
    "NONE_COMMAND",
    "format_catalog_rows",
    "match_template",
    "find_suggestions",
    "resolve_choice",
    "select_template",
]
