"""Curried combinators over RemoteData.

Each combinator takes its function argument first and returns a function of
the RemoteData value, so partially applied combinators can be stored and
reused, e.g. ``double = map(lambda x: x * 2)``.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from src.remote_data.core import (
    Failure,
    Loading,
    NotAsked,
    RemoteData,
    Success,
    is_success,
)

T = TypeVar("T")
B = TypeVar("B")
E = TypeVar("E")
E2 = TypeVar("E2")
U = TypeVar("U")
R = TypeVar("R")


def map(fn: Callable[[T], U]) -> Callable[[RemoteData[T, E]], RemoteData[U, E]]:
    """Map a function over the Success value.

    Example:
        map(lambda x: x * 2)(success(10)) == success(20)
        map(lambda x: x * 2)(loading()) == loading()
    """

    def apply(rd: RemoteData[T, E]) -> RemoteData[U, E]:
        if is_success(rd):
            return Success(fn(rd.value))  # type: ignore[union-attr]
        return rd  # type: ignore[return-value]

    return apply


def map2(
    fn: Callable[[T, B], U],
) -> Callable[[RemoteData[T, E]], Callable[[RemoteData[B, E2]], RemoteData[U, E | E2]]]:
    """Combine two RemoteData values with ``fn``.

    Succeeds only when both sides succeed. Otherwise the left operand is
    returned when it is not a Success, and the right operand when it is.

    Example:
        map2(lambda a, b: a + b)(success(10))(success(10)) == success(20)
        map2(lambda a, b: a + b)(not_asked())(loading()) == not_asked()
    """

    def take_first(rd: RemoteData[T, E]) -> Callable[[RemoteData[B, E2]], RemoteData[U, E | E2]]:
        def take_second(rd2: RemoteData[B, E2]) -> RemoteData[U, E | E2]:
            if is_success(rd) and is_success(rd2):
                return Success(fn(rd.value, rd2.value))  # type: ignore[union-attr]
            if not is_success(rd):
                return rd  # type: ignore[return-value]
            return rd2  # type: ignore[return-value]

        return take_second

    return take_first


def map_error(fn: Callable[[E], U]) -> Callable[[RemoteData[T, E]], RemoteData[T, U]]:
    """Map a function over the Failure error, leaving other states untouched."""

    def apply(rd: RemoteData[T, E]) -> RemoteData[T, U]:
        if isinstance(rd, Failure):
            return Failure(fn(rd.error))
        return rd  # type: ignore[return-value]

    return apply


def with_default(default: T) -> Callable[[RemoteData[T, E]], T]:
    """Return the Success value, or ``default`` for every other state.

    The error of a Failure is discarded.
    """

    def apply(rd: RemoteData[T, E]) -> T:
        return rd.value if is_success(rd) else default  # type: ignore[union-attr]

    return apply


def fold(
    when_not_asked: Callable[[], R],
    when_loading: Callable[[], R],
    when_success: Callable[[T], R],
    when_failure: Callable[[E], R],
) -> Callable[[RemoteData[T, E]], R]:
    """Extract a single result from whichever state is present.

    Exactly one handler is called. Anything that is not one of the four
    states raises ``TypeError``.

    Example:
        render = fold(
            lambda: "idle",
            lambda: "busy",
            lambda v: f"ok:{v}",
            lambda e: f"err:{e}",
        )
        render(failure("boom")) == "err:boom"
    """

    def apply(rd: RemoteData[T, E]) -> R:
        match rd:
            case NotAsked():
                return when_not_asked()
            case Loading():
                return when_loading()
            case Success(value=value):
                return when_success(value)
            case Failure(error=error):
                return when_failure(error)
            case _:
                raise TypeError(f"Not a RemoteData value: {rd!r}")

    return apply
