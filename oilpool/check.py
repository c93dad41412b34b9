"""Core types for system health checks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum, auto

from termcolor import colored


class CheckStatus(Enum):
    """Outcome of a single check."""

    PASS = auto()
    WARN = auto()
    FAIL = auto()

    def is_ok(self) -> bool:
        """True for a pass or a warning."""
        return self in (CheckStatus.PASS, CheckStatus.WARN)

    def is_fail(self) -> bool:
        """True for a failure."""
        return self is CheckStatus.FAIL

    def as_colored_str(self) -> str:
        """The status label, coloured for a terminal."""
        return colored(self.name, _STATUS_COLORS[self])


_STATUS_COLORS = {
    CheckStatus.PASS: "green",
    CheckStatus.WARN: "yellow",
    CheckStatus.FAIL: "red",
}


@dataclass(frozen=True)
class CheckResult:
    """Result of one check: status, message, optional details and time taken."""

    status: CheckStatus
    message: str
    details: str | None = None
    duration: float = 0.0  # seconds

    @classmethod
    def passed(cls, message: str) -> CheckResult:
        return cls(CheckStatus.PASS, message)

    @classmethod
    def warned(cls, message: str) -> CheckResult:
        return cls(CheckStatus.WARN, message)

    @classmethod
    def failed(cls, message: str) -> CheckResult:
        return cls(CheckStatus.FAIL, message)

    def with_details(self, details: str) -> CheckResult:
        """A copy carrying ``details``."""
        return replace(self, details=details)

    def with_duration(self, duration: float) -> CheckResult:
        """A copy whose duration is ``duration`` seconds."""
        return replace(self, duration=duration)


class SystemCheck(ABC):
    """A health check for one part of the system.

    Subclasses set ``name`` to the name of the system they check.
    """

    name: str = ""

    @abstractmethod
    def check(self) -> CheckResult:
        """Run the check."""

    def description(self) -> str | None:
        """What the check validates, if described."""
        return None