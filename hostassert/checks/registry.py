# SPDX-License-Identifier: MIT
"""Checker registry - maps check type names to constructors.

Registration happens in an explicit init phase; after ``freeze()`` the
registry is read-only, so concurrent lookups need no locking.

Usage:
    from hostassert.checks.registry import default_registry

    registry = default_registry()
    match registry.create("file-exists", {"name": "/etc/hosts"}):
        case Ok(checker):
            error = checker.check()
        case Err(error):
            ...
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache

from hostassert.checks.base import Checker, CheckerConstructor
from hostassert.checks.errors import CheckerError, UnknownCheckType
from hostassert.checks.file import file_does_not_exist, file_exists
from hostassert.checks.ulimit import UlimitChecker
from hostassert.core.result import Err, Ok, Result, is_ok

__all__ = [
    "CheckerRegistry",
    "register_builtin_checkers",
    "build_default_registry",
    "default_registry",
]


class CheckerRegistry:
    """Name -> constructor table for checker types."""

    def __init__(self) -> None:
        self._constructors: dict[str, CheckerConstructor] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(
        self, type_name: str, constructor: CheckerConstructor, *, replace: bool = False
    ) -> None:
        """Register a constructor under a check type name.

        Args:
            type_name: Name used in check definitions (e.g., "file-exists")
            constructor: Callable building a checker from raw arguments
            replace: Allow overriding an existing registration

        Raises:
            RuntimeError: If the registry is frozen
            ValueError: If type_name is already registered and replace is False
        """
        if self._frozen:
            raise RuntimeError(f"Cannot register '{type_name}': checker registry is frozen")
        if type_name in self._constructors and not replace:
            raise ValueError(f"Checker type already registered: {type_name}")
        self._constructors[type_name] = constructor

    def freeze(self) -> None:
        """End the init phase. Later register() calls raise."""
        self._frozen = True

    def lookup(self, type_name: str) -> Result[CheckerConstructor, UnknownCheckType]:
        constructor = self._constructors.get(type_name)
        if constructor is None:
            return Err(UnknownCheckType(type_name=type_name, available=self.type_names()))
        return Ok(constructor)

    def create(
        self, type_name: str, args: Mapping[str, object]
    ) -> Result[Checker, CheckerError]:
        """Look up type_name and build a checker from args."""
        found = self.lookup(type_name)
        if is_ok(found):
            return found.value(args)
        return Err(UnknownCheckType(type_name=type_name, available=self.type_names()))

    def type_names(self) -> tuple[str, ...]:
        """All registered type names in sorted order."""
        return tuple(sorted(self._constructors))

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._constructors

    def __len__(self) -> int:
        return len(self._constructors)


def register_builtin_checkers(registry: CheckerRegistry) -> None:
    registry.register("file-exists", file_exists)
    registry.register("file-does-not-exist", file_does_not_exist)
    registry.register("ulimit", UlimitChecker.from_args)


def build_default_registry() -> CheckerRegistry:
    """Create a frozen registry holding the built-in checker types."""
    registry = CheckerRegistry()
    register_builtin_checkers(registry)
    registry.freeze()
    return registry


@lru_cache(maxsize=1)
def default_registry() -> CheckerRegistry:
    """Process-wide registry, built on first use (cached)."""
    return build_default_registry()
