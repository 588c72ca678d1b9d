"""Provisioning workflow for REPOINIT.

This package contains:
- descriptor: RepositoryDescriptor for the repository being created
- recovery: One-shot repair-and-retry rules for failed git steps
- initializer: git init, .gitignore and README.md
- publish: Staging, initial commit and 'gh repo create'
- runner: run_provisioning() running all steps in order
"""

from repoinit.workflow.descriptor import RepositoryDescriptor
from repoinit.workflow.recovery import RecoveryRule, run_with_recovery
from repoinit.workflow.runner import run_provisioning

__all__ = [
    "RepositoryDescriptor",
    "RecoveryRule",
    "run_with_recovery",
    "run_provisioning",
]
