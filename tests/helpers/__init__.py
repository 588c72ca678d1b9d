"""Test helper utilities for the repoinit project."""

from tests.helpers.process import completed, fake_run

__all__ = ["completed", "fake_run"]
