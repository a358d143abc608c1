# SPDX-License-Identifier: MIT
"""Tests for UlimitChecker."""

from __future__ import annotations

import pytest

from hostassert.checks import ulimit
from hostassert.checks.errors import (
    AssertionFailed,
    InvalidArgument,
    MissingArgument,
    TypeMismatch,
    UnknownResourceItem,
    UnsupportedPlatform,
)
from hostassert.checks.ulimit import LIMITS_BY_NAME, UNLIMITED, UlimitChecker, resolve_limit
from hostassert.core.result import Err, Ok

resource = pytest.importorskip("resource")


def _fake_limits(monkeypatch: pytest.MonkeyPatch, soft: int, hard: int) -> None:
    monkeypatch.setattr(resource, "getrlimit", lambda _res: (soft, hard))


class TestLimitsByName:
    def test_common_names_present(self) -> None:
        for name in ("nofile", "cpu", "stack", "core", "nproc", "as", "memlock"):
            assert name in LIMITS_BY_NAME

    def test_pam_session_limits_absent(self) -> None:
        for name in ("maxlogins", "maxsyslogins", "priority"):
            assert name not in LIMITS_BY_NAME

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            LIMITS_BY_NAME["bogus"] = "RLIMIT_BOGUS"  # type: ignore[index]

    def test_resolve_nofile(self) -> None:
        assert resolve_limit("nofile") == Ok(resource.RLIMIT_NOFILE)

    def test_resolve_unknown(self) -> None:
        result = resolve_limit("bogus-name")
        assert isinstance(result, Err)
        assert isinstance(result.error, UnknownResourceItem)
        assert "nofile" in result.error.available

    def test_resolve_constant_missing_on_platform(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delattr(resource, "RLIMIT_NOFILE")
        result = resolve_limit("nofile")
        assert isinstance(result, Err)
        assert isinstance(result.error, UnsupportedPlatform)


class TestFromArgs:
    def test_defaults_to_hard(self) -> None:
        result = UlimitChecker.from_args({"item": "nofile", "limit": 1024})
        assert result == Ok(UlimitChecker(item="nofile", limit=1024, is_hard=True))

    def test_soft(self) -> None:
        result = UlimitChecker.from_args({"item": "nofile", "limit": 1024, "type": "soft"})
        assert result == Ok(UlimitChecker(item="nofile", limit=1024, is_hard=False))

    def test_type_is_case_insensitive(self) -> None:
        result = UlimitChecker.from_args({"item": "cpu", "limit": 1, "type": "HARD"})
        assert result == Ok(UlimitChecker(item="cpu", limit=1, is_hard=True))

    def test_unlimited_sentinel(self) -> None:
        result = UlimitChecker.from_args({"item": "stack", "limit": -1})
        assert result == Ok(UlimitChecker(item="stack", limit=UNLIMITED))

    @pytest.mark.parametrize(
        ("args", "missing"),
        [
            ({}, ("item", "limit")),
            ({"item": "nofile"}, ("limit",)),
            ({"limit": 10}, ("item",)),
            ({"type": "soft"}, ("item", "limit")),
        ],
    )
    def test_missing_required(self, args: dict[str, object], missing: tuple[str, ...]) -> None:
        assert UlimitChecker.from_args(args) == Err(MissingArgument(names=missing))

    def test_limit_wrong_type(self) -> None:
        result = UlimitChecker.from_args({"item": "nofile", "limit": "lots"})
        assert result == Err(TypeMismatch("limit", "an integer", "string"))

    def test_limit_below_sentinel(self) -> None:
        result = UlimitChecker.from_args({"item": "nofile", "limit": -2})
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidArgument)
        assert result.error.name == "limit"

    def test_bad_type_value(self) -> None:
        result = UlimitChecker.from_args({"item": "nofile", "limit": 1, "type": "medium"})
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidArgument)
        assert result.error.name == "type"

    def test_bad_type_message_keeps_raw_value(self) -> None:
        result = UlimitChecker.from_args({"item": "nofile", "limit": 1, "type": " Medium "})
        assert result == Err(InvalidArgument("type", "must be 'hard' or 'soft', got ' Medium '"))

    def test_unknown_item(self) -> None:
        result = UlimitChecker.from_args({"item": "bogus-name", "limit": 10})
        assert isinstance(result, Err)
        assert isinstance(result.error, UnknownResourceItem)

    def test_unsupported_platform(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(ulimit, "_resource_module", lambda: None)
        result = UlimitChecker.from_args({"item": "nofile", "limit": 10})
        assert isinstance(result, Err)
        assert isinstance(result.error, UnsupportedPlatform)


class TestCheck:
    def test_direct_construction_rejects_limit_below_sentinel(self) -> None:
        with pytest.raises(ValueError, match="got -5"):
            UlimitChecker(item="nofile", limit=-5)

    def test_direct_construction_accepts_sentinel(self) -> None:
        assert UlimitChecker(item="nofile", limit=UNLIMITED).limit == UNLIMITED

    def test_zero_hard_nofile_always_passes(self) -> None:
        assert UlimitChecker(item="nofile", limit=0, is_hard=True).check() is None

    def test_zero_soft_nofile_always_passes(self) -> None:
        assert UlimitChecker(item="nofile", limit=0, is_hard=False).check() is None

    def test_unknown_item_is_reported(self) -> None:
        error = UlimitChecker(item="bogus-name", limit=10).check()
        assert isinstance(error, UnknownResourceItem)
        assert error.item == "bogus-name"

    def test_above_minimum(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _fake_limits(monkeypatch, soft=1024, hard=4096)
        assert UlimitChecker(item="nofile", limit=4096).check() is None

    def test_below_minimum_hard(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _fake_limits(monkeypatch, soft=1024, hard=4096)
        error = UlimitChecker(item="nofile", limit=8192).check()
        assert isinstance(error, AssertionFailed)
        assert "nofile" in error.message
        assert "hard" in error.message
        assert "4096" in error.message
        assert "8192" in error.message

    def test_soft_compared_when_selected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _fake_limits(monkeypatch, soft=1024, hard=4096)
        error = UlimitChecker(item="nofile", limit=2048, is_hard=False).check()
        assert isinstance(error, AssertionFailed)
        assert "soft" in error.message
        assert "1024" in error.message

    def test_unlimited_required_and_observed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _fake_limits(monkeypatch, soft=1024, hard=resource.RLIM_INFINITY)
        assert UlimitChecker(item="nofile", limit=UNLIMITED).check() is None

    def test_unlimited_required_but_finite(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _fake_limits(monkeypatch, soft=1024, hard=4096)
        error = UlimitChecker(item="nofile", limit=UNLIMITED).check()
        assert isinstance(error, AssertionFailed)
        assert "unlimited" in error.message
        assert "-1" not in error.message

    def test_unlimited_observed_satisfies_any_minimum(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _fake_limits(monkeypatch, soft=resource.RLIM_INFINITY, hard=resource.RLIM_INFINITY)
        assert UlimitChecker(item="cpu", limit=10**12, is_hard=False).check() is None

    def test_real_unlimited_check_matches_host(self) -> None:
        _, hard = resource.getrlimit(resource.RLIMIT_NOFILE)
        error = UlimitChecker(item="nofile", limit=UNLIMITED).check()
        if hard == resource.RLIM_INFINITY:
            assert error is None
        else:
            assert isinstance(error, AssertionFailed)
            assert "unlimited" in error.message

    def test_getrlimit_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def boom(_res: int) -> tuple[int, int]:
            raise ValueError("invalid resource specified")

        monkeypatch.setattr(resource, "getrlimit", boom)
        assert isinstance(UlimitChecker(item="nofile", limit=1).check(), UnsupportedPlatform)

    def test_idempotent(self) -> None:
        checker = UlimitChecker(item="nofile", limit=0)
        assert checker.check() == checker.check()
