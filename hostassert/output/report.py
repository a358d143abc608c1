# SPDX-License-Identifier: MIT
"""Report rendering for a check run."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hostassert.output.console import Style
from hostassert.services.run import CheckOutcome, CheckStatus, RunReport

if TYPE_CHECKING:
    from hostassert.output.console import ConsoleProtocol

__all__ = ["print_report", "format_outcome"]

_TAGS = {
    CheckStatus.OK: "OK",
    CheckStatus.FAILED: "FAIL",
    CheckStatus.ERROR: "ERROR",
}

_STYLES = {
    CheckStatus.OK: Style.SUCCESS,
    CheckStatus.FAILED: Style.FAILURE,
    CheckStatus.ERROR: Style.ERROR,
}


def format_outcome(outcome: CheckOutcome) -> str:
    """Single-line rendering, e.g. ``FAIL hosts file: /etc/hosts doesn't exist and should``."""
    return f"{_TAGS[outcome.status]} {outcome.name}: {outcome.message}"


def print_report(report: RunReport, console: ConsoleProtocol, *, verbose: bool = False) -> None:
    """Print one line per check followed by a summary."""
    for outcome in report.outcomes:
        console.print(format_outcome(outcome), _STYLES[outcome.status])
        if verbose:
            definition = outcome.definition
            args = ", ".join(f"{k}={v!r}" for k, v in definition.args.items())
            console.print(f"  type: {definition.type}  args: {args or '-'}", Style.DIM)

    console.newline()
    summary = (
        f"{len(report.outcomes)} checks: {len(report.passed)} passed, "
        f"{len(report.failed)} failed, {len(report.errored)} errors"
    )
    if report.has_errors():
        console.print(summary, Style.ERROR)
    elif report.has_failures():
        console.print(summary, Style.FAILURE)
    else:
        console.print(summary, Style.SUCCESS)
