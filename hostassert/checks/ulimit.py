# SPDX-License-Identifier: MIT
"""Process resource limit checker.

Type:
    - ulimit

Supported platforms: Linux, macOS and other POSIX systems. Windows has no
resource limits; building this checker there fails with UnsupportedPlatform.

Arguments:
    item (required): Symbolic limit name, from the pam_limits vocabulary
        (``nofile``, ``cpu``, ``stack``, ...). See LIMITS_BY_NAME.
    limit (required): Minimum acceptable value. ``-1`` means the limit must be
        unlimited.
    type (optional): ``"hard"`` or ``"soft"``. Defaults to ``"hard"``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType, ModuleType
from typing import cast

from hostassert.checks.args import ArgKind, ArgSpec, decode_from_args, required_args
from hostassert.checks.errors import (
    ArgumentError,
    AssertionFailed,
    CheckError,
    InvalidArgument,
    UnknownResourceItem,
    UnsupportedPlatform,
)
from hostassert.core.result import Err, Ok, Result
from hostassert.platform.detection import detect_platform

__all__ = ["UlimitChecker", "LIMITS_BY_NAME", "UNLIMITED", "resolve_limit"]

UNLIMITED = -1
"""Threshold sentinel: the observed limit must be unlimited."""

# Symbolic item name -> name of the RLIMIT_* constant in the resource module.
# PAM session limits (maxlogins, maxsyslogins, priority) are not process
# rlimits and are deliberately absent.
LIMITS_BY_NAME: Mapping[str, str] = MappingProxyType(
    {
        "core": "RLIMIT_CORE",
        "data": "RLIMIT_DATA",
        "fsize": "RLIMIT_FSIZE",
        "memlock": "RLIMIT_MEMLOCK",
        "nofile": "RLIMIT_NOFILE",
        "rss": "RLIMIT_RSS",
        "stack": "RLIMIT_STACK",
        "cpu": "RLIMIT_CPU",
        "nproc": "RLIMIT_NPROC",
        "as": "RLIMIT_AS",
        "locks": "RLIMIT_LOCKS",
        "sigpending": "RLIMIT_SIGPENDING",
        "msgqueue": "RLIMIT_MSGQUEUE",
        "nice": "RLIMIT_NICE",
        "rtprio": "RLIMIT_RTPRIO",
        "rttime": "RLIMIT_RTTIME",
    }
)

_ARGS = (
    ArgSpec("item", ArgKind.STRING),
    ArgSpec("limit", ArgKind.INTEGER),
    ArgSpec("type", ArgKind.STRING),
)

_FEATURE = "ulimit checks"


def _resource_module() -> ModuleType | None:
    """Return the resource module, or None where the OS has no rlimits."""
    try:
        import resource
    except ImportError:
        return None
    return resource


def resolve_limit(item: str) -> Result[int, UnknownResourceItem | UnsupportedPlatform]:
    """Map a symbolic item name to this platform's RLIMIT_* value."""
    attr = LIMITS_BY_NAME.get(item)
    if attr is None:
        return Err(UnknownResourceItem(item=item, available=tuple(sorted(LIMITS_BY_NAME))))

    resource = _resource_module()
    if resource is None:
        return Err(UnsupportedPlatform(_FEATURE, str(detect_platform())))

    value = getattr(resource, attr, None)
    if not isinstance(value, int):
        return Err(UnsupportedPlatform(f"resource limit '{item}'", str(detect_platform())))
    return Ok(value)


@dataclass(frozen=True, slots=True)
class UlimitChecker:
    """Check that a resource limit of the current process is at least a minimum.

    Attributes:
        item: Symbolic limit name (key of LIMITS_BY_NAME)
        limit: Required minimum, or UNLIMITED
        is_hard: Compare the hard limit (True) or the soft limit (False)
    """

    item: str
    limit: int
    is_hard: bool = True

    def __post_init__(self) -> None:
        if self.limit < UNLIMITED:
            raise ValueError(f"limit must be -1 (unlimited) or at least 0, got {self.limit}")

    @classmethod
    def from_args(cls, args: Mapping[str, object]) -> Result[UlimitChecker, ArgumentError]:
        if _resource_module() is None:
            return Err(UnsupportedPlatform(_FEATURE, str(detect_platform())))

        if missing := required_args(args, "item", "limit"):
            return Err(missing)

        decoded = decode_from_args(args, _ARGS)
        if isinstance(decoded, Err):
            return decoded
        values = decoded.value

        item = cast(str, values["item"])
        resolved = resolve_limit(item)
        if isinstance(resolved, Err):
            return resolved

        limit = cast(int, values["limit"])
        if limit < UNLIMITED:
            return Err(
                InvalidArgument("limit", f"must be -1 (unlimited) or at least 0, got {limit}")
            )

        raw_kind = cast(str, values.get("type", "hard"))
        kind = raw_kind.strip().lower()
        if kind not in ("hard", "soft"):
            return Err(
                InvalidArgument("type", f"must be 'hard' or 'soft', got '{raw_kind}'")
            )

        return Ok(cls(item=item, limit=limit, is_hard=kind == "hard"))

    @property
    def kind(self) -> str:
        return "hard" if self.is_hard else "soft"

    def check(self) -> CheckError | None:
        resolved = resolve_limit(self.item)
        if isinstance(resolved, Err):
            return resolved.error

        resource = _resource_module()
        if resource is None:
            return UnsupportedPlatform(_FEATURE, str(detect_platform()))

        try:
            soft, hard = resource.getrlimit(resolved.value)
        except (OSError, ValueError):
            return UnsupportedPlatform(f"resource limit '{self.item}'", str(detect_platform()))

        infinity = cast(int, resource.RLIM_INFINITY)
        observed = hard if self.is_hard else soft
        if observed == infinity:
            return None

        if self.limit == UNLIMITED or observed < self.limit:
            return AssertionFailed(
                self.item,
                f"process {self.kind} limit for '{self.item}' is {_render(observed, infinity)}, "
                f"lower than required ({_render(self.limit, infinity)})",
            )
        return None


def _render(value: int, infinity: int) -> str:
    if value in (UNLIMITED, infinity):
        return "unlimited"
    return str(value)
