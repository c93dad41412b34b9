"""Rendering health check reports as text."""

from __future__ import annotations

from tabulate import tabulate
from termcolor import colored

from .runner import HealthCheckReport

_HEADERS = ("System", "Status", "Duration", "Message")


def _format_duration(seconds: float) -> str:
    if seconds >= 1.0:
        return f"{seconds:.2f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.2f}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.2f}µs"
    return f"{seconds * 1e9:.2f}ns"


def format_report(report: HealthCheckReport) -> str:
    """The report as a table followed by a summary."""
    rows = [
        (name, result.status.as_colored_str(), _format_duration(result.duration), result.message)
        for name, result in report.results
    ]
    table = tabulate(rows, headers=_HEADERS, tablefmt="rounded_outline")
    return f"{table}\n{_format_summary(report)}"


def _format_summary(report: HealthCheckReport) -> str:
    lines = [
        "",
        colored("Summary", attrs=["bold", "underline"]),
        f"  Total checks: {report.total}",
        f"  {colored('✓', 'green')} Passed: {report.passed}",
    ]
    if report.warned > 0:
        lines.append(f"  {colored('⚠', 'yellow')} Warned: {report.warned}")
    if report.failed > 0:
        lines.append(f"  {colored('✗', 'red')} Failed: {report.failed}")
    lines.append("")

    if not report.is_healthy():
        overall = colored("Overall: UNHEALTHY", "red", attrs=["bold"])
    elif report.has_warnings():
        overall = colored("Overall: HEALTHY (with warnings)", "yellow", attrs=["bold"])
    else:
        overall = colored("Overall: HEALTHY", "green", attrs=["bold"])
    lines.append(f"  {overall}")
    return "\n".join(lines) + "\n"


def print_report(report: HealthCheckReport) -> None:
    """Print the report, then the details of every check that has them."""
    print(format_report(report))
    for name, result in report.results:
        if result.details is not None:
            print(f"\n{colored(name, attrs=['bold'])} Details:")
            print(result.details)