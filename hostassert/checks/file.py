# SPDX-License-Identifier: MIT
"""File existence checker.

Types:
    - file-exists
    - file-does-not-exist

Supported platforms: Linux, macOS, Windows.

Arguments:
    name (required): Path on the filesystem.
    exists (optional): Whether the path should exist. Defaults to true for
        ``file-exists``; always forced to false for ``file-does-not-exist``.

Paths are used exactly as given. No ``~`` expansion is done, so
``~/.bashrc`` does not point at the home directory; on Windows give Windows
style paths (``C:\\My\\File.txt``).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import cast

from hostassert.checks.args import ArgKind, ArgSpec, decode_from_args, required_args, with_override
from hostassert.checks.errors import (
    ArgumentError,
    AssertionFailed,
    CheckError,
    InvalidArgument,
    PathInaccessible,
)
from hostassert.core.result import Err, Ok, Result

__all__ = ["FileChecker", "file_exists", "file_does_not_exist"]

_ARGS = (
    ArgSpec("name", ArgKind.STRING),
    ArgSpec("exists", ArgKind.BOOLEAN),
)


@dataclass(frozen=True, slots=True)
class FileChecker:
    """Check that a path exists, or that it does not.

    Attributes:
        name: Path to stat
        exists: Expected existence
    """

    name: str
    exists: bool = True

    @classmethod
    def from_args(cls, args: Mapping[str, object]) -> Result[FileChecker, ArgumentError]:
        if missing := required_args(args, "name"):
            return Err(missing)

        decoded = decode_from_args(args, _ARGS)
        if isinstance(decoded, Err):
            return decoded

        values = decoded.value
        name = cast(str, values["name"])
        if not name:
            return Err(InvalidArgument("name", "must not be empty"))
        if "\x00" in name:
            return Err(InvalidArgument("name", "must not contain NUL bytes"))

        exists = cast(bool, values.get("exists", True))
        return Ok(cls(name=name, exists=exists))

    def check(self) -> CheckError | None:
        try:
            os.stat(self.name)
        except (FileNotFoundError, NotADirectoryError):
            if self.exists:
                return AssertionFailed(self.name, f"{self.name} doesn't exist and should")
            return None
        except OSError as e:
            return PathInaccessible(path=self.name, reason=e.strerror or str(e))
        except ValueError as e:
            # embedded NUL byte
            return PathInaccessible(path=self.name, reason=str(e))

        if not self.exists:
            return AssertionFailed(self.name, f"{self.name} exists and shouldn't")
        return None


def file_exists(args: Mapping[str, object]) -> Result[FileChecker, ArgumentError]:
    """Constructor for the ``file-exists`` type."""
    return FileChecker.from_args(args)


def file_does_not_exist(args: Mapping[str, object]) -> Result[FileChecker, ArgumentError]:
    """Constructor for the ``file-does-not-exist`` type.

    The type name wins over any ``exists`` value in the definition.
    """
    return FileChecker.from_args(with_override(args, "exists", False))
