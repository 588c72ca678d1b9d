"""Interactive prompts for REPOINIT.

This module provides Questionary-based user input prompts with
consistent styling and error handling.
"""

from collections.abc import Callable

import questionary
from questionary import Style

from repoinit.utils.errors import UserCancelledError
from repoinit.utils.logging import log_message

custom_style = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
        ("separator", "fg:cyan"),
        ("instruction", "fg:white"),
        ("text", ""),
        ("disabled", "fg:gray italic"),
    ]
)


def prompt_confirm(
    message: str,
    default: bool = True,
) -> bool:
    """Prompt for yes/no confirmation.

    Args:
        message: Question to ask
        default: Default value if user presses Enter

    Returns:
        True for yes, False for no

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt confirm: {message}")

    try:
        result = questionary.confirm(
            message,
            default=default,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled confirmation prompt")

        log_message(f"User response: {result}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


def prompt_input(
    message: str,
    default: str = "",
    *,
    validate: Callable[[str], bool | str] | None = None,
) -> str:
    """Prompt for a single line of text input.

    Args:
        message: Prompt message
        default: Default value
        validate: Optional validation function

    Returns:
        User input string (may be empty)

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt input: {message}")

    try:
        result = questionary.text(
            message,
            default=default,
            validate=validate,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled input prompt")

        log_message(f"User input: {result[:50]}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


def prompt_enter(message: str = "Press Enter to continue...") -> None:
    """Wait for user to press Enter.

    Args:
        message: Message to display

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt enter: {message}")

    try:
        questionary.press_any_key_to_continue(
            message,
            style=custom_style,
        ).ask()
    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


__all__ = [
    "custom_style",
    "prompt_confirm",
    "prompt_input",
    "prompt_enter",
]
