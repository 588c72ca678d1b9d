"""One-shot recovery for failed pipeline steps.

A failed step is matched against an ordered list of RecoveryRule entries.
The first rule whose signature appears in the captured output repairs the
environment and the step is retried exactly once. Output that matches no
rule is fatal immediately.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from repoinit.integrations.process import ProcessOutcome
from repoinit.utils.console import print_warning
from repoinit.utils.errors import ProcessFailedError
from repoinit.utils.logging import log_message


@dataclass(frozen=True)
class RecoveryRule:
    """A known recoverable failure.

    Attributes:
        signature: Substring identifying the failure in the command output
        description: Short text shown to the user while repairing
        repair: Action fixing the cause, run once
        retry: Replacement for the retried step (None re-runs the step itself)
    """

    signature: str
    description: str
    repair: Callable[[], object]
    retry: Callable[[], ProcessOutcome] | None = None


def find_rule(outcome: ProcessOutcome, rules: Sequence[RecoveryRule]) -> RecoveryRule | None:
    """Return the first rule whose signature occurs in the outcome output."""
    for rule in rules:
        if outcome.contains(rule.signature):
            return rule
    return None


def run_with_recovery(
    step: Callable[[], ProcessOutcome],
    rules: Sequence[RecoveryRule],
    error_cls: type[ProcessFailedError],
    message: str,
    hint: str = "",
) -> ProcessOutcome:
    """Run a step, repairing and retrying once on a known failure.

    Args:
        step: The command to run
        rules: Recovery rules evaluated in order
        error_cls: Exception raised when the step finally fails
        message: Error message for the exception
        hint: Optional remediation text for the exception

    Returns:
        The successful outcome

    Raises:
        error_cls: If the step fails and cannot be recovered
    """
    outcome = step()
    if outcome.success:
        return outcome

    rule = find_rule(outcome, rules)
    if rule is None:
        raise error_cls(message, output=outcome.output, hint=hint)

    print_warning(rule.description)
    log_message(f"Recovering from '{rule.signature}' after: {' '.join(outcome.command)}")
    rule.repair()

    outcome = (rule.retry or step)()
    if not outcome.success:
        raise error_cls(message, output=outcome.output, hint=hint)
    return outcome


__all__ = ["RecoveryRule", "find_rule", "run_with_recovery"]
