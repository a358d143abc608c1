# SPDX-License-Identifier: MIT
from __future__ import annotations

from pathlib import Path

import typer

from hostassert.cli.context import build_context
from hostassert.core.config import load_definitions
from hostassert.core.errors import ErrorCode
from hostassert.core.result import is_err
from hostassert.output.console import Style
from hostassert.output.report import print_report
from hostassert.services.run import RunService


def run(
    config: Path = typer.Argument(..., help="TOML file declaring the checks to run."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show type and args per check."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output."),
) -> None:
    """Run every check in CONFIG and report pass/fail."""
    ctx = build_context(no_color=no_color)

    if not config.exists():
        ctx.console.error(f"check file not found: {config}")
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))

    loaded = load_definitions(config)
    if is_err(loaded):
        ctx.console.error(loaded.error.message)
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

    if verbose:
        ctx.console.print(f"config: {config}", Style.DIM)
        ctx.console.print(f"platform: {ctx.platform}", Style.DIM)

    report = RunService(ctx.registry).run(loaded.value)
    print_report(report, ctx.console, verbose=verbose)

    code = report.exit_code()
    if not code.is_success:
        raise typer.Exit(code=int(code))


def types() -> None:
    """List the registered check types."""
    ctx = build_context()
    for name in ctx.registry.type_names():
        ctx.console.print(name)
