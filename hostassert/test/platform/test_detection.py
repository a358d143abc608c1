"""Tests for hostassert.platform.detection module."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import patch

import pytest

from hostassert.platform.detection import Platform, detect_platform


class TestPlatformEnum:
    def test_str(self) -> None:
        assert str(Platform.LINUX) == "linux"
        assert str(Platform.WINDOWS) == "windows"

    def test_is_unix(self) -> None:
        assert Platform.LINUX.is_unix is True
        assert Platform.MACOS.is_unix is True
        assert Platform.BSD.is_unix is True
        assert Platform.WINDOWS.is_unix is False
        assert Platform.UNKNOWN.is_unix is False


class TestDetectPlatform:
    @pytest.fixture(autouse=True)
    def _clear_cache(self) -> Iterator[None]:
        detect_platform.cache_clear()
        yield
        detect_platform.cache_clear()

    @pytest.mark.parametrize(
        ("sys_platform", "expected"),
        [
            ("linux", Platform.LINUX),
            ("darwin", Platform.MACOS),
            ("win32", Platform.WINDOWS),
            ("cygwin", Platform.WINDOWS),
            ("freebsd14", Platform.BSD),
            ("sunos5", Platform.UNKNOWN),
        ],
    )
    def test_detect(self, sys_platform: str, expected: Platform) -> None:
        with patch("hostassert.platform.detection._sys.platform", sys_platform):
            assert detect_platform() == expected

    def test_cached(self) -> None:
        assert detect_platform() is detect_platform()
