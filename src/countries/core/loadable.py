"""Lifecycle of data that has to be fetched asynchronously.

A :data:`Loadable` is one of four immutable variants:

- :class:`NotRequested` - nothing has been fetched yet.
- :class:`IsLoading` - a fetch is running.  ``last`` keeps the previously
  loaded value (if any) so views can keep showing it while refreshing.
- :class:`Loaded` - the fetch succeeded.
- :class:`Failed` - the fetch failed.  The stale value is dropped.

The module-level transition functions never mutate their input; they return
the next state.  Calling a transition from the wrong source state raises
:class:`~countries.errors.InvalidTransitionError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from ..errors import InvalidTransitionError
from .cancel_bag import CancelBag

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class NotRequested:
    pass


@dataclass(frozen=True)
class IsLoading(Generic[T]):
    last: Optional[T] = None
    # The bag is a handle, not part of the logical value.
    cancel_bag: CancelBag = field(default_factory=CancelBag, compare=False, repr=False)


@dataclass(frozen=True)
class Loaded(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failed:
    error: Any


Loadable = Union[NotRequested, IsLoading[T], Loaded[T], Failed]


class LoadPhase(str, Enum):
    """What a view should present for a given state."""

    IDLE = "idle"
    LOADING = "loading"
    REFRESHING = "refreshing"
    LOADED = "loaded"
    FAILED = "failed"


# ----------------------------------------------------------------------
# Accessors
# ----------------------------------------------------------------------
def value_of(state: Loadable[T]) -> Optional[T]:
    """Return the displayable value of *state*, including a stale one."""

    if isinstance(state, Loaded):
        return state.value
    if isinstance(state, IsLoading):
        return state.last
    return None


def error_of(state: Loadable[T]) -> Any:
    if isinstance(state, Failed):
        return state.error
    return None


def is_loading(state: Loadable[T]) -> bool:
    return isinstance(state, IsLoading)


def phase(state: Loadable[T]) -> LoadPhase:
    if isinstance(state, NotRequested):
        return LoadPhase.IDLE
    if isinstance(state, IsLoading):
        return LoadPhase.LOADING if state.last is None else LoadPhase.REFRESHING
    if isinstance(state, Loaded):
        return LoadPhase.LOADED
    if isinstance(state, Failed):
        return LoadPhase.FAILED
    raise TypeError(f"Unknown loadable variant: {state!r}")


def map_value(state: Loadable[T], transform: Callable[[T], U]) -> Loadable[U]:
    """Apply *transform* to the loaded or stale value, keeping the variant.

    An in-flight state keeps its cancel bag so the mapped state still
    controls the same running work.
    """

    if isinstance(state, Loaded):
        return Loaded(transform(state.value))
    if isinstance(state, IsLoading):
        last = None if state.last is None else transform(state.last)
        return IsLoading(last=last, cancel_bag=state.cancel_bag)
    return state


# ----------------------------------------------------------------------
# Transitions
# ----------------------------------------------------------------------
def start_fetch(current: Loadable[T], cancel_bag: Optional[CancelBag] = None) -> IsLoading[T]:
    """Return the in-flight state that follows *current*.

    A fetch already running under *current* is cancelled before the new
    state is produced, so at most one bag is live per state slot.
    """

    if isinstance(current, IsLoading):
        current.cancel_bag.cancel_all()
    bag = cancel_bag if cancel_bag is not None else CancelBag()
    return IsLoading(last=value_of(current), cancel_bag=bag)


def complete(current: Loadable[T], value: T) -> Loaded[T]:
    _require_loading(current, "complete")
    current.cancel_bag.retire()
    return Loaded(value)


def fail(current: Loadable[T], error: Any) -> Failed:
    _require_loading(current, "fail")
    current.cancel_bag.retire()
    return Failed(error)


def cancel_loading(current: Loadable[T]) -> Loadable[T]:
    """Abort an in-flight fetch and fall back to what was shown before it.

    Cancelling is not a failure: the state returns to ``Loaded(last)`` when a
    stale value exists and to ``NotRequested`` otherwise.  Other states are
    returned unchanged.
    """

    if not isinstance(current, IsLoading):
        return current
    current.cancel_bag.cancel_all()
    if current.last is not None:
        return Loaded(current.last)
    return NotRequested()


def _require_loading(current: Loadable[T], operation: str) -> None:
    if not isinstance(current, IsLoading):
        raise InvalidTransitionError(
            f"{operation}() requires an in-flight state, got {type(current).__name__}"
        )


__all__ = [
    "Failed",
    "IsLoading",
    "Loadable",
    "LoadPhase",
    "Loaded",
    "NotRequested",
    "cancel_loading",
    "complete",
    "error_of",
    "fail",
    "is_loading",
    "map_value",
    "phase",
    "start_fetch",
    "value_of",
]
