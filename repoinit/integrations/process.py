"""Running external commands and capturing their outcome."""

import subprocess
from dataclasses import dataclass, field

from repoinit.utils.logging import log_command


@dataclass
class ProcessOutcome:
    """Result of an external command.

    Attributes:
        command: The argv that was executed
        returncode: Exit status of the process
        output: Combined stdout and stderr text
        stdout: Standard output alone, for commands that print data
    """

    command: list[str] = field(default_factory=list)
    returncode: int = 0
    output: str = ""
    stdout: str = ""

    @property
    def success(self) -> bool:
        """True if the command exited with status 0."""
        return self.returncode == 0

    def contains(self, text: str) -> bool:
        """True if the captured output contains text, ignoring case."""
        return text.lower() in self.output.lower()


def run_command(command: list[str]) -> ProcessOutcome:
    """Run a command and capture its combined output.

    A command that cannot be started is reported as a failed outcome
    with exit status 127 instead of raising.

    Args:
        command: argv to execute

    Returns:
        ProcessOutcome for the command
    """
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        log_command(" ".join(command), 127)
        return ProcessOutcome(command=command, returncode=127, output=str(e))

    log_command(" ".join(command), result.returncode)
    output = "\n".join(part for part in (result.stdout, result.stderr) if part)
    return ProcessOutcome(
        command=command,
        returncode=result.returncode,
        output=output,
        stdout=result.stdout or "",
    )


__all__ = ["ProcessOutcome", "run_command"]
