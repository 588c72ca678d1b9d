"""Logging configuration for REPOINIT.

File logging is opt-in and controlled by environment variables.

Environment Variables:
    REPOINIT_LOG: Set to "true" to enable logging (default: "false")
    REPOINIT_LOG_FILE: Path to log file (default: ~/.repoinit.log)
"""

import logging
import os
from pathlib import Path

LOG_ENABLED = os.environ.get("REPOINIT_LOG", "false").lower() == "true"
LOG_FILE = Path(os.environ.get("REPOINIT_LOG_FILE", str(Path.home() / ".repoinit.log")))

_logger: logging.Logger | None = None


def setup_logging() -> logging.Logger:
    """Configure logging based on environment variables.

    Creates a logger that writes to the configured log file when
    REPOINIT_LOG is set to "true". Otherwise, uses a NullHandler
    to suppress all log output.

    Returns:
        Configured logger instance
    """
    global _logger

    if _logger is not None:
        return _logger

    logger = logging.getLogger("repoinit")
    logger.handlers.clear()

    if LOG_ENABLED:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.FileHandler(LOG_FILE)
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    else:
        logger.addHandler(logging.NullHandler())

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Get the configured logger instance, creating it if necessary."""
    global _logger
    if _logger is None:
        return setup_logging()
    return _logger


def log_message(message: str) -> None:
    """Log a message if logging is enabled.

    Args:
        message: Message to log
    """
    get_logger().info(message)


def log_command(command: str, exit_code: int = 0) -> None:
    """Log external command execution with its exit code.

    Args:
        command: The command that was executed
        exit_code: The exit code returned by the command
    """
    get_logger().info(f"COMMAND: {command} | EXIT_CODE: {exit_code}")


__all__ = [
    "LOG_ENABLED",
    "LOG_FILE",
    "setup_logging",
    "get_logger",
    "log_message",
    "log_command",
]
