# SPDX-License-Identifier: MIT
"""The contract every checker variant implements."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Protocol, Self

from hostassert.checks.errors import ArgumentError, CheckError
from hostassert.core.result import Result

__all__ = ["Checker", "CheckerConstructor"]


class Checker(Protocol):
    """A parsed, immutable host assertion.

    Implementations are frozen dataclasses. ``from_args`` either returns a
    checker with every required field populated or an error; ``check`` reads
    live OS state and never mutates the checker, prints, or exits.
    """

    @classmethod
    def from_args(cls, args: Mapping[str, object]) -> Result[Self, ArgumentError]:
        """Validate and bind raw definition arguments.

        Unrecognized keys are ignored.
        """
        ...

    def check(self) -> CheckError | None:
        """Evaluate the assertion.

        Returns:
            None when the host satisfies the assertion, otherwise an error
            naming the checked entity, the expected and the observed state.
        """
        ...


type CheckerConstructor = Callable[[Mapping[str, object]], Result[Checker, ArgumentError]]
"""Builds a checker from a definition's raw argument map."""
