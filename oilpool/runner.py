"""Running a suite of health checks and collecting the results."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from .check import CheckResult, CheckStatus, SystemCheck


@dataclass
class HealthCheckReport:
    """Results of a suite, in the order the checks ran."""

    results: list[tuple[str, CheckResult]] = field(default_factory=list)
    total: int = 0
    passed: int = 0
    warned: int = 0
    failed: int = 0

    def is_healthy(self) -> bool:
        """True when no check failed."""
        return self.failed == 0

    def has_warnings(self) -> bool:
        return self.warned > 0

    def exit_code(self) -> int:
        """0 when all pass, 1 on any failure, 2 on warnings without failures."""
        if self.failed > 0:
            return 1
        if self.warned > 0:
            return 2
        return 0


class HealthCheckRunner:
    """Collects checks and runs them in the order they were added."""

    def __init__(self) -> None:
        self._checks: list[SystemCheck] = []

    def add_check(self, check: SystemCheck) -> HealthCheckRunner:
        """Add ``check``; returns the runner so calls can be chained."""
        self._checks.append(check)
        return self

    def run(self) -> HealthCheckReport:
        """Run every check, timing each, and tally the outcomes."""
        report = HealthCheckReport()
        for check in self._checks:
            start = time.perf_counter()
            result = check.check()
            result = result.with_duration(time.perf_counter() - start)

            if result.status is CheckStatus.PASS:
                report.passed += 1
            elif result.status is CheckStatus.WARN:
                report.warned += 1
            else:
                report.failed += 1
            report.results.append((check.name, result))

        report.total = len(report.results)
        return report