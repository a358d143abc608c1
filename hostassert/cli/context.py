# SPDX-License-Identifier: MIT
from __future__ import annotations

from dataclasses import dataclass

from hostassert.checks.registry import CheckerRegistry, default_registry
from hostassert.output.console import ConsoleProtocol, RichConsole
from hostassert.platform.detection import Platform, detect_platform


@dataclass(frozen=True, slots=True)
class CLIContext:
    platform: Platform
    registry: CheckerRegistry
    console: ConsoleProtocol


def build_context(*, no_color: bool = False) -> CLIContext:
    return CLIContext(
        platform=detect_platform(),
        registry=default_registry(),
        console=RichConsole(no_color=no_color),
    )
