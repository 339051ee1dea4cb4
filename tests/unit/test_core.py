"""Tests for the RemoteData variants and constructors."""

import dataclasses

import pytest
from hypothesis import given, strategies as st

from src.remote_data.core import (
    Failure,
    Loading,
    NotAsked,
    Success,
    Variant,
    failure,
    is_failure,
    is_loading,
    is_not_asked,
    is_success,
    loading,
    not_asked,
    success,
)


def _never(*args: object) -> object:
    raise AssertionError("handler should not be called")


class TestConstructors:
    def test_not_asked(self) -> None:
        rd = not_asked()
        assert isinstance(rd, NotAsked)
        assert rd.tag == Variant.NOT_ASKED

    def test_loading(self) -> None:
        rd = loading()
        assert isinstance(rd, Loading)
        assert rd.tag == "Loading"

    def test_success_wraps_value_unchanged(self) -> None:
        payload = ["a", "b"]
        rd = success(payload)
        assert isinstance(rd, Success)
        assert rd.value is payload

    def test_failure_wraps_error_unchanged(self) -> None:
        error = RuntimeError("boom")
        rd = failure(error)
        assert isinstance(rd, Failure)
        assert rd.error is error

    def test_payloadless_states_are_distinct(self) -> None:
        assert not_asked() == not_asked()
        assert loading() == loading()
        assert not_asked() != loading()
        assert not_asked() != success(None)
        assert loading() != failure(None)

    def test_success_and_failure_are_distinct(self) -> None:
        assert success("x") != failure("x")

    def test_values_are_immutable(self) -> None:
        rd = success(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            rd.value = 2  # type: ignore[misc]

    def test_subscripted_constructors(self) -> None:
        assert Success[int](3) == success(3)
        assert Failure[str]("boom") == failure("boom")
        assert Success[int](3).map(str) == success("3")
        assert Failure[str]("boom").map_error(str.upper) == failure("BOOM")

    @given(st.integers())
    def test_success_preserves_value(self, value: int) -> None:
        assert success(value).value == value

    @given(st.text())
    def test_failure_preserves_error(self, error: str) -> None:
        assert failure(error).error == error


class TestPredicates:
    @pytest.mark.parametrize(
        ("rd", "expected"),
        [
            (not_asked(), (True, False, False, False)),
            (loading(), (False, True, False, False)),
            (success(1), (False, False, True, False)),
            (failure("e"), (False, False, False, True)),
        ],
    )
    def test_exactly_one_predicate_holds(self, rd, expected) -> None:  # type: ignore[no-untyped-def]
        functions = (is_not_asked(rd), is_loading(rd), is_success(rd), is_failure(rd))
        methods = (rd.is_not_asked(), rd.is_loading(), rd.is_success(), rd.is_failure())
        assert functions == expected
        assert methods == expected


class TestMethods:
    def test_map_on_success(self) -> None:
        assert success(5).map(lambda x: x * 2) == success(10)

    def test_map_on_failure_is_noop(self) -> None:
        rd = failure("fail")
        assert rd.map(lambda x: x * 2) is rd

    def test_map_error_on_failure(self) -> None:
        assert failure("fail").map_error(lambda e: f"wrapped: {e}") == failure("wrapped: fail")

    def test_map_error_on_success_is_noop(self) -> None:
        rd = success(5)
        assert rd.map_error(str.upper) is rd

    def test_with_default(self) -> None:
        assert success(42).with_default(0) == 42
        assert loading().with_default(0) == 0
        assert failure("fail").with_default(0) == 0

    @pytest.mark.parametrize("rd", [not_asked(), loading(), failure("fail")])
    def test_map_leaves_non_success_as_is(self, rd) -> None:  # type: ignore[no-untyped-def]
        assert rd.map(_never) is rd

    @pytest.mark.parametrize("rd", [not_asked(), loading(), success(5)])
    def test_map_error_leaves_non_failure_as_is(self, rd) -> None:  # type: ignore[no-untyped-def]
        assert rd.map_error(_never) is rd

    @pytest.mark.parametrize("rd", [not_asked(), loading(), failure("fail")])
    def test_with_default_returns_default(self, rd) -> None:  # type: ignore[no-untyped-def]
        sentinel = object()
        assert rd.with_default(sentinel) is sentinel

    def test_fold(self) -> None:
        handlers = (lambda: "idle", lambda: "busy", lambda v: f"ok:{v}", lambda e: f"err:{e}")
        assert not_asked().fold(*handlers) == "idle"
        assert loading().fold(*handlers) == "busy"
        assert success(1).fold(*handlers) == "ok:1"
        assert failure("boom").fold(*handlers) == "err:boom"


class TestUnwrap:
    def test_unwrap_success(self) -> None:
        assert success("hello").unwrap() == "hello"

    def test_unwrap_failure_raises(self) -> None:
        with pytest.raises(ValueError, match="fail"):
            failure("fail").unwrap()

    @pytest.mark.parametrize("rd", [not_asked(), loading()])
    def test_unwrap_pending_raises(self, rd) -> None:  # type: ignore[no-untyped-def]
        with pytest.raises(ValueError, match=rd.tag.value):
            rd.unwrap()
