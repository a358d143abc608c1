# SPDX-License-Identifier: MIT
"""Console output and report rendering."""

from hostassert.output.console import ConsoleProtocol, MockConsole, RichConsole, Style
from hostassert.output.report import print_report

__all__ = ["ConsoleProtocol", "MockConsole", "RichConsole", "Style", "print_report"]
