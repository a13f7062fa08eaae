"""Operation outcomes and the severity policy.

Every step of a maintenance command records an Outcome on the command's
OperationReport. Which conditions stop the command and which only warn
is decided here, in POLICY, not at the call sites.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


class Severity(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    FATAL = "fatal"


# Condition → severity
POLICY: dict[str, Severity] = {
    # fatal: the command stops and exits non-zero
    "not-a-workspace": Severity.FATAL,
    "vendor-dir-missing": Severity.FATAL,
    "submodule-target-initialized": Severity.FATAL,
    "submodule-add-failed": Severity.FATAL,
    "tool-missing": Severity.FATAL,
    "unknown-command": Severity.FATAL,
    "clone-failed": Severity.FATAL,
    "sync-failed": Severity.FATAL,
    "invalid-config": Severity.FATAL,
    # warning: reported, the command carries on
    "optional-dir-missing": Severity.WARNING,
    "nested-metadata-found": Severity.WARNING,
    "patch-conflict": Severity.WARNING,
    "remote-missing": Severity.WARNING,
    "nothing-to-commit": Severity.WARNING,
    "branch-switch-failed": Severity.WARNING,
    "fetch-failed": Severity.WARNING,
    "merge-failed": Severity.WARNING,
    "rebase-failed": Severity.WARNING,
    "placeholder-hash": Severity.WARNING,
    "not-a-submodule": Severity.WARNING,
    "lfs-command-failed": Severity.WARNING,
}


@dataclass(frozen=True)
class Outcome:
    """Result of a single step."""

    severity: Severity
    message: str
    condition: str = ""

    @classmethod
    def success(cls, message: str) -> Outcome:
        return cls(Severity.SUCCESS, message)

    @classmethod
    def from_condition(cls, condition: str, message: str) -> Outcome:
        """Build an outcome whose severity is looked up in POLICY.

        Raises:
            KeyError: If the condition is not in POLICY.
        """
        return cls(POLICY[condition], message, condition)


@dataclass
class OperationReport:
    """Ordered outcomes of one command invocation.

    If ``echo`` is set, every outcome and detail line is handed to it the
    moment it is recorded, so output streams while the command runs.
    """

    command: str
    outcomes: list[Outcome] = field(default_factory=list)
    details: list[str] = field(default_factory=list)
    echo: Callable[[Outcome | str], None] | None = None

    def record(self, outcome: Outcome) -> Outcome:
        self.outcomes.append(outcome)
        if self.echo:
            self.echo(outcome)
        return outcome

    def ok(self, message: str) -> Outcome:
        return self.record(Outcome.success(message))

    def flag(self, condition: str, message: str) -> Outcome:
        """Record a non-success condition with its policy severity."""
        return self.record(Outcome.from_condition(condition, message))

    def detail(self, line: str) -> None:
        """Record a plain output line (listings, hints)."""
        self.details.append(line)
        if self.echo:
            self.echo(line)

    @property
    def warnings(self) -> list[Outcome]:
        return [o for o in self.outcomes if o.severity is Severity.WARNING]

    @property
    def failed(self) -> bool:
        return any(o.severity is Severity.FATAL for o in self.outcomes)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0
