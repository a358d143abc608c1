# SPDX-License-Identifier: MIT
"""Argument decoding for checkers.

Check definitions carry loosely-typed arguments (whatever the config parser
produced). This module binds them to typed values, one declared field at a
time, and reports the first problem as a structured error.

Keys are matched case-insensitively: ``Name`` and ``name`` both bind the
``name`` field. When a map holds both spellings, the all-lowercase key wins.
Keys no checker declares are ignored so that configs stay forward-compatible.

Usage:
    _ARGS = (ArgSpec("name", ArgKind.STRING), ArgSpec("exists", ArgKind.BOOLEAN))

    if missing := required_args(args, "name"):
        return Err(missing)
    decoded = decode_from_args(args, _ARGS)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto

from hostassert.checks.errors import ArgumentError, InvalidArgument, MissingArgument, TypeMismatch
from hostassert.core.result import Err, Ok, Result

__all__ = [
    "ArgKind",
    "ArgSpec",
    "normalize_args",
    "required_args",
    "decode_from_args",
    "with_override",
]


class ArgKind(Enum):
    """Semantic type of a checker argument."""

    STRING = auto()
    INTEGER = auto()
    UNSIGNED = auto()
    BOOLEAN = auto()

    @property
    def label(self) -> str:
        """Phrase used in type mismatch messages."""
        return {
            ArgKind.STRING: "a string",
            ArgKind.INTEGER: "an integer",
            ArgKind.UNSIGNED: "a non-negative integer",
            ArgKind.BOOLEAN: "a boolean",
        }[self]


@dataclass(frozen=True, slots=True)
class ArgSpec:
    """A single argument a checker understands.

    Attributes:
        name: Lowercase argument key
        kind: How the raw value is coerced
    """

    name: str
    kind: ArgKind


def normalize_args(args: Mapping[str, object]) -> dict[str, object]:
    """Return a copy of args with lowercased keys."""
    out: dict[str, object] = {}
    for key, value in args.items():
        lowered = key.lower()
        if lowered in out and key != lowered:
            continue
        out[lowered] = value
    return out


def required_args(args: Mapping[str, object], *names: str) -> MissingArgument | None:
    """Check that every listed key is present.

    All keys are checked before returning, so the error lists every missing
    key; ``MissingArgument.name`` is the first of them in listed order.
    """
    normalized = normalize_args(args)
    missing = tuple(name for name in names if name.lower() not in normalized)
    if missing:
        return MissingArgument(names=missing)
    return None


def decode_from_args(
    args: Mapping[str, object], specs: tuple[ArgSpec, ...]
) -> Result[dict[str, object], ArgumentError]:
    """Coerce the arguments named by specs into typed values.

    Returns:
        Ok(dict) holding only the keys present in args, or Err with the first
        argument that could not be coerced. Absent keys are left for the
        caller's defaults.
    """
    normalized = normalize_args(args)
    values: dict[str, object] = {}
    for spec in specs:
        if spec.name not in normalized:
            continue
        coerced = _coerce(spec, normalized[spec.name])
        if isinstance(coerced, Err):
            return coerced
        values[spec.name] = coerced.value
    return Ok(values)


def with_override(args: Mapping[str, object], key: str, value: object) -> dict[str, object]:
    """Return a normalized copy of args with key forced to value.

    Any spelling of key already in args is replaced. The input is not modified.
    """
    out = normalize_args(args)
    out[key.lower()] = value
    return out


def _coerce(spec: ArgSpec, value: object) -> Result[object, ArgumentError]:
    match spec.kind:
        case ArgKind.STRING:
            if isinstance(value, str):
                return Ok(value)
        case ArgKind.BOOLEAN:
            if isinstance(value, bool):
                return Ok(value)
        case ArgKind.INTEGER | ArgKind.UNSIGNED:
            number = _as_int(value)
            if number is not None:
                if spec.kind == ArgKind.UNSIGNED and number < 0:
                    return Err(InvalidArgument(spec.name, f"must not be negative (got {number})"))
                return Ok(number)
    return Err(TypeMismatch(name=spec.name, expected=spec.kind.label, actual=_type_label(value)))


def _as_int(value: object) -> int | None:
    # bool is an int subclass; true/false is never a number here.
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _type_label(value: object) -> str:
    match value:
        case None:
            return "null"
        case bool():
            return "boolean"
        case int():
            return "integer"
        case float():
            return "float"
        case str():
            return "string"
        case list() | tuple():
            return "array"
        case dict():
            return "table"
        case _:
            return type(value).__name__
