# SPDX-License-Identifier: MIT
"""Process exit codes.

A run maps to exactly one of these codes so that shell scripts and CI jobs
can tell "a host assertion failed" apart from "the check file is broken".
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Every check passed
    - 1: At least one assertion failed
    - 2: A check definition or config file is invalid, or a check could not run
    - 5: I/O error reading input
    """

    OK = 0
    CHECK_FAILED = 1
    CONFIG_ERROR = 2
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
