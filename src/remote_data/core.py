"""RemoteData type for the lifecycle of a remote fetch.

Frequently when fetching data from an API there are four states to represent:

- NotAsked: the data has not been requested yet.
- Loading: the request is in flight, no answer yet.
- Failure: the request went wrong, here is the error.
- Success: everything worked, here is the data.

Replaces ad-hoc ``Optional`` values and ``is_loading`` flags with one closed
union, so callers handle every state explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
R = TypeVar("R")


class Variant(str, Enum):
    """Tag of each RemoteData state."""

    NOT_ASKED = "NotAsked"
    LOADING = "Loading"
    SUCCESS = "Success"
    FAILURE = "Failure"


@dataclass(frozen=True, slots=True)
class NotAsked:
    """No request has been made yet."""

    tag: ClassVar[Variant] = Variant.NOT_ASKED

    def is_not_asked(self) -> bool:
        return True

    def is_loading(self) -> bool:
        return False

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:  # type: ignore[type-var]
        raise ValueError("Called unwrap on NotAsked")

    def with_default(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[T], U]) -> RemoteData[U, E]:  # type: ignore[type-var]
        return self

    def map_error(self, fn: Callable[[E], U]) -> RemoteData[T, U]:  # type: ignore[type-var]
        return self

    def fold(
        self,
        when_not_asked: Callable[[], R],
        when_loading: Callable[[], R],
        when_success: Callable[[T], R],
        when_failure: Callable[[E], R],
    ) -> R:
        return when_not_asked()


@dataclass(frozen=True, slots=True)
class Loading:
    """A request is in flight."""

    tag: ClassVar[Variant] = Variant.LOADING

    def is_not_asked(self) -> bool:
        return False

    def is_loading(self) -> bool:
        return True

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:  # type: ignore[type-var]
        raise ValueError("Called unwrap on Loading")

    def with_default(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[T], U]) -> RemoteData[U, E]:  # type: ignore[type-var]
        return self

    def map_error(self, fn: Callable[[E], U]) -> RemoteData[T, U]:  # type: ignore[type-var]
        return self

    def fold(
        self,
        when_not_asked: Callable[[], R],
        when_loading: Callable[[], R],
        when_success: Callable[[T], R],
        when_failure: Callable[[E], R],
    ) -> R:
        return when_loading()


# Not slotted, so Success[int](...) can set __orig_class__.
@dataclass(frozen=True)
class Success(Generic[T]):
    """Settled request carrying its value."""

    value: T
    tag: ClassVar[Variant] = Variant.SUCCESS

    def is_not_asked(self) -> bool:
        return False

    def is_loading(self) -> bool:
        return False

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def with_default(self, default: T) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> RemoteData[U, E]:  # type: ignore[type-var]
        return Success(fn(self.value))

    def map_error(self, fn: Callable[[E], U]) -> RemoteData[T, U]:  # type: ignore[type-var]
        return self

    def fold(
        self,
        when_not_asked: Callable[[], R],
        when_loading: Callable[[], R],
        when_success: Callable[[T], R],
        when_failure: Callable[[E], R],
    ) -> R:
        return when_success(self.value)


# Not slotted, so Failure[str](...) can set __orig_class__.
@dataclass(frozen=True)
class Failure(Generic[E]):
    """Settled request carrying its error."""

    error: E
    tag: ClassVar[Variant] = Variant.FAILURE

    def is_not_asked(self) -> bool:
        return False

    def is_loading(self) -> bool:
        return False

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> T:  # type: ignore[type-var]
        raise ValueError(f"Called unwrap on Failure: {self.error}")

    def with_default(self, default: T) -> T:  # type: ignore[type-var]
        return default

    def map(self, fn: Callable[[T], U]) -> RemoteData[U, E]:  # type: ignore[type-var]
        return self

    def map_error(self, fn: Callable[[E], U]) -> RemoteData[T, U]:  # type: ignore[type-var]
        return Failure(fn(self.error))

    def fold(
        self,
        when_not_asked: Callable[[], R],
        when_loading: Callable[[], R],
        when_success: Callable[[T], R],
        when_failure: Callable[[E], R],
    ) -> R:
        return when_failure(self.error)


RemoteData = Union[NotAsked, Loading, Success[T], Failure[E]]


def not_asked() -> RemoteData[T, E]:
    return NotAsked()


def loading() -> RemoteData[T, E]:
    return Loading()


def success(value: T) -> RemoteData[T, E]:
    """Lift an ordinary value into RemoteData."""
    return Success(value)


def failure(error: E) -> RemoteData[T, E]:
    """Lift an error into RemoteData."""
    return Failure(error)


def is_not_asked(rd: RemoteData[T, E]) -> bool:
    return rd.tag == Variant.NOT_ASKED


def is_loading(rd: RemoteData[T, E]) -> bool:
    return rd.tag == Variant.LOADING


def is_success(rd: RemoteData[T, E]) -> bool:
    return rd.tag == Variant.SUCCESS


def is_failure(rd: RemoteData[T, E]) -> bool:
    return rd.tag == Variant.FAILURE
