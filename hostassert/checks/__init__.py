# SPDX-License-Identifier: MIT
"""Checker types, argument decoding and the checker registry.

Each checker variant is a frozen dataclass:
- FileChecker: path exists / does not exist
- UlimitChecker: process resource limit is at least a minimum
"""

from hostassert.checks.base import Checker, CheckerConstructor
from hostassert.checks.errors import (
    ArgumentError,
    AssertionFailed,
    CheckError,
    CheckerError,
    InvalidArgument,
    MissingArgument,
    PathInaccessible,
    TypeMismatch,
    UnknownCheckType,
    UnknownResourceItem,
    UnsupportedPlatform,
    describe_error,
)
from hostassert.checks.file import FileChecker
from hostassert.checks.registry import CheckerRegistry, build_default_registry, default_registry
from hostassert.checks.ulimit import LIMITS_BY_NAME, UNLIMITED, UlimitChecker

__all__ = [
    # Contract
    "Checker",
    "CheckerConstructor",
    # Checkers
    "FileChecker",
    "UlimitChecker",
    "LIMITS_BY_NAME",
    "UNLIMITED",
    # Registry
    "CheckerRegistry",
    "build_default_registry",
    "default_registry",
    # Errors
    "ArgumentError",
    "AssertionFailed",
    "CheckError",
    "CheckerError",
    "InvalidArgument",
    "MissingArgument",
    "PathInaccessible",
    "TypeMismatch",
    "UnknownCheckType",
    "UnknownResourceItem",
    "UnsupportedPlatform",
    "describe_error",
]
