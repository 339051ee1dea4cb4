"""RemoteData - the four states of a remote fetch as one closed type."""

from src.remote_data.combinators import fold, map, map2, map_error, with_default
from src.remote_data.core import (
    Failure,
    Loading,
    NotAsked,
    RemoteData,
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

__all__ = [
    "RemoteData",
    "NotAsked",
    "Loading",
    "Success",
    "Failure",
    "Variant",
    "not_asked",
    "loading",
    "success",
    "failure",
    "is_not_asked",
    "is_loading",
    "is_success",
    "is_failure",
    "map",
    "map2",
    "map_error",
    "with_default",
    "fold",
]
