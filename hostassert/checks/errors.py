# SPDX-License-Identifier: MIT
"""Error kinds produced while building and evaluating checkers.

Construction errors (a bad check definition, an unsupported platform) are
returned from ``from_args`` and registry lookups. Evaluation errors are
returned from ``check()``; of those, only ``AssertionFailed`` is the normal
"the host does not match" outcome.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "MissingArgument",
    "TypeMismatch",
    "InvalidArgument",
    "UnknownResourceItem",
    "UnsupportedPlatform",
    "UnknownCheckType",
    "PathInaccessible",
    "AssertionFailed",
    "ArgumentError",
    "CheckError",
    "CheckerError",
    "describe_error",
]


@dataclass(frozen=True, slots=True)
class MissingArgument:
    """One or more required arguments are absent.

    Attributes:
        names: Every missing key, in the order the checker declares them
    """

    names: tuple[str, ...]

    @property
    def name(self) -> str:
        """The first missing key."""
        return self.names[0]


@dataclass(frozen=True, slots=True)
class TypeMismatch:
    """An argument value cannot be coerced to the field's type."""

    name: str
    expected: str
    actual: str


@dataclass(frozen=True, slots=True)
class InvalidArgument:
    """An argument has the right type but an unacceptable value."""

    name: str
    reason: str


@dataclass(frozen=True, slots=True)
class UnknownResourceItem:
    item: str
    available: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class UnsupportedPlatform:
    feature: str
    platform: str


@dataclass(frozen=True, slots=True)
class UnknownCheckType:
    type_name: str
    available: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class PathInaccessible:
    """stat() failed for a reason other than the path being absent."""

    path: str
    reason: str


@dataclass(frozen=True, slots=True)
class AssertionFailed:
    """The check ran, and the host does not satisfy it.

    Attributes:
        subject: The checked entity (a path, a resource name)
        message: Human-readable description of expected vs observed state
    """

    subject: str
    message: str


ArgumentError = (
    MissingArgument | TypeMismatch | InvalidArgument | UnknownResourceItem | UnsupportedPlatform
)

CheckError = AssertionFailed | PathInaccessible | UnknownResourceItem | UnsupportedPlatform

CheckerError = ArgumentError | UnknownCheckType


def describe_error(error: CheckerError | CheckError) -> str:
    """Render any checker error as a single human-readable line."""
    match error:
        case MissingArgument(names=names):
            keys = ", ".join(f"'{n}'" for n in names)
            noun = "argument" if len(names) == 1 else "arguments"
            return f"missing required {noun}: {keys}"
        case TypeMismatch(name=name, expected=expected, actual=actual):
            return f"argument '{name}' must be {expected}, got {actual}"
        case InvalidArgument(name=name, reason=reason):
            return f"invalid argument '{name}': {reason}"
        case UnknownResourceItem(item=item, available=available):
            msg = f"unknown resource limit item '{item}'"
            if available:
                msg += f" (known: {', '.join(available)})"
            return msg
        case UnsupportedPlatform(feature=feature, platform=platform):
            return f"{feature} is not supported on this platform ({platform})"
        case UnknownCheckType(type_name=type_name, available=available):
            msg = f"unknown check type '{type_name}'"
            if available:
                msg += f" (available: {', '.join(available)})"
            return msg
        case PathInaccessible(path=path, reason=reason):
            return f"cannot stat {path}: {reason}"
        case AssertionFailed(message=message):
            return message
