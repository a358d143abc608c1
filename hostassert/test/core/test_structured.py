"""Tests for hostassert.core.structured helpers."""

from hostassert.core.structured import as_obj_list, as_str_dict, get_list, get_str


class TestStructured:
    def test_as_str_dict(self) -> None:
        assert as_str_dict({"a": 1}) == {"a": 1}
        assert as_str_dict({1: "a"}) is None
        assert as_str_dict([1]) is None

    def test_as_obj_list(self) -> None:
        assert as_obj_list([1, "a"]) == [1, "a"]
        assert as_obj_list((1,)) is None

    def test_get_str_strips_and_drops_empty(self) -> None:
        assert get_str({"type": "  ulimit "}, "type") == "ulimit"
        assert get_str({"type": "   "}, "type") is None
        assert get_str({"type": 3}, "type") is None
        assert get_str({}, "type") is None

    def test_get_list(self) -> None:
        data: dict[str, object] = {"args": {"name": "/x"}, "checks": [{}]}
        assert get_list(data, "checks") == [{}]
        assert get_list(data, "args") is None
