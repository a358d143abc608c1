# SPDX-License-Identifier: MIT
"""Evaluate a list of check definitions against the local host."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

from hostassert.checks.errors import AssertionFailed, CheckerError, CheckError, describe_error
from hostassert.checks.registry import CheckerRegistry, default_registry
from hostassert.core.config import CheckDefinition
from hostassert.core.errors import ErrorCode
from hostassert.core.result import is_err

__all__ = ["CheckStatus", "CheckOutcome", "RunReport", "RunService"]


class CheckStatus(Enum):
    """Status of a single evaluated check."""

    OK = auto()
    """The host satisfies the assertion."""

    FAILED = auto()
    """The check ran and the host does not satisfy it."""

    ERROR = auto()
    """The check could not be built or could not run."""


@dataclass(frozen=True, slots=True)
class CheckOutcome:
    """Result of one check definition.

    Attributes:
        name: Display name (label or type)
        definition: The definition that was evaluated
        status: Pass, assertion failure or error
        message: Human-readable result message
        error: The underlying error, None on success
    """

    name: str
    definition: CheckDefinition
    status: CheckStatus
    message: str
    error: CheckerError | CheckError | None = None

    @property
    def ok(self) -> bool:
        return self.status == CheckStatus.OK

    @classmethod
    def success(cls, definition: CheckDefinition) -> CheckOutcome:
        return cls(definition.display_name, definition, CheckStatus.OK, "ok")

    @classmethod
    def from_error(
        cls, definition: CheckDefinition, error: CheckerError | CheckError
    ) -> CheckOutcome:
        status = CheckStatus.FAILED if isinstance(error, AssertionFailed) else CheckStatus.ERROR
        return cls(definition.display_name, definition, status, describe_error(error), error)


@dataclass(frozen=True, slots=True)
class RunReport:
    outcomes: tuple[CheckOutcome, ...]

    @property
    def passed(self) -> list[CheckOutcome]:
        return [o for o in self.outcomes if o.status == CheckStatus.OK]

    @property
    def failed(self) -> list[CheckOutcome]:
        return [o for o in self.outcomes if o.status == CheckStatus.FAILED]

    @property
    def errored(self) -> list[CheckOutcome]:
        return [o for o in self.outcomes if o.status == CheckStatus.ERROR]

    def has_failures(self) -> bool:
        return any(o.status == CheckStatus.FAILED for o in self.outcomes)

    def has_errors(self) -> bool:
        return any(o.status == CheckStatus.ERROR for o in self.outcomes)

    def exit_code(self) -> ErrorCode:
        """Errors take precedence over assertion failures."""
        if self.has_errors():
            return ErrorCode.CONFIG_ERROR
        if self.has_failures():
            return ErrorCode.CHECK_FAILED
        return ErrorCode.OK


class RunService:
    """Build and evaluate checkers one definition at a time.

    A definition that fails to build or to run is recorded and the remaining
    definitions are still evaluated.
    """

    def __init__(self, registry: CheckerRegistry | None = None) -> None:
        self._registry = registry if registry is not None else default_registry()

    def evaluate(self, definition: CheckDefinition) -> CheckOutcome:
        built = self._registry.create(definition.type, definition.args)
        if is_err(built):
            return CheckOutcome.from_error(definition, built.error)

        error = built.value.check()
        if error is not None:
            return CheckOutcome.from_error(definition, error)
        return CheckOutcome.success(definition)

    def run(self, definitions: Iterable[CheckDefinition]) -> RunReport:
        return RunReport(outcomes=tuple(self.evaluate(d) for d in definitions))
