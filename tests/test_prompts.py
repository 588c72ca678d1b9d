"""Tests for repoinit.ui.prompts module."""

from unittest.mock import patch

import pytest

from repoinit.ui.prompts import (
    custom_style,
    prompt_confirm,
    prompt_enter,
    prompt_input,
)
from repoinit.utils.errors import UserCancelledError


class TestCustomStyle:
    """Tests for custom_style."""

    def test_style_has_qmark(self):
        """Style defines qmark."""
        assert any("qmark" in str(s) for s in custom_style.style_rules)


class TestPromptConfirm:
    """Tests for prompt_confirm function."""

    @patch("questionary.confirm")
    def test_returns_true_for_yes(self, mock_confirm):
        """Returns True when user confirms."""
        mock_confirm.return_value.ask.return_value = True

        assert prompt_confirm("Continue?") is True

    @patch("questionary.confirm")
    def test_returns_false_for_no(self, mock_confirm):
        """Returns False when user declines."""
        mock_confirm.return_value.ask.return_value = False

        assert prompt_confirm("Continue?") is False

    @patch("questionary.confirm")
    def test_raises_on_cancel(self, mock_confirm):
        """Raises UserCancelledError when cancelled."""
        mock_confirm.return_value.ask.return_value = None

        with pytest.raises(UserCancelledError):
            prompt_confirm("Continue?")

    @patch("questionary.confirm")
    def test_raises_on_keyboard_interrupt(self, mock_confirm):
        """Ctrl+C becomes UserCancelledError."""
        mock_confirm.return_value.ask.side_effect = KeyboardInterrupt

        with pytest.raises(UserCancelledError):
            prompt_confirm("Continue?")


class TestPromptInput:
    """Tests for prompt_input function."""

    @patch("questionary.text")
    def test_returns_user_input(self, mock_text):
        """Returns user input."""
        mock_text.return_value.ask.return_value = "user input"

        assert prompt_input("Enter value") == "user input"

    @patch("questionary.text")
    def test_empty_input_is_allowed(self, mock_text):
        """An empty line is returned as an empty string."""
        mock_text.return_value.ask.return_value = ""

        assert prompt_input("Enter value") == ""

    @patch("questionary.text")
    def test_passes_validator(self, mock_text):
        """The validator is forwarded to questionary."""
        mock_text.return_value.ask.return_value = "x"

        def validator(value):
            return bool(value)

        prompt_input("Enter value", validate=validator)

        assert mock_text.call_args.kwargs["validate"] is validator

    @patch("questionary.text")
    def test_raises_on_cancel(self, mock_text):
        """Raises UserCancelledError when cancelled."""
        mock_text.return_value.ask.return_value = None

        with pytest.raises(UserCancelledError):
            prompt_input("Enter value")


class TestPromptEnter:
    """Tests for prompt_enter function."""

    @patch("questionary.press_any_key_to_continue")
    def test_waits_for_key(self, mock_press):
        """Waits for the user to press a key."""
        mock_press.return_value.ask.return_value = None

        prompt_enter()

        mock_press.assert_called_once()

    @patch("questionary.press_any_key_to_continue")
    def test_raises_on_keyboard_interrupt(self, mock_press):
        """Ctrl+C becomes UserCancelledError."""
        mock_press.return_value.ask.side_effect = KeyboardInterrupt

        with pytest.raises(UserCancelledError):
            prompt_enter()
