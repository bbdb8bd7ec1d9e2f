"""Cancellation handle shared by every unit of work in one fetch cycle."""

from __future__ import annotations

import logging
from typing import Callable, List, Protocol, Union


LOGGER = logging.getLogger(__name__)


class _SupportsCancel(Protocol):
    def cancel(self) -> object:
        ...


Cancellable = Union[_SupportsCancel, Callable[[], object]]


def _as_callback(cancellable: Cancellable) -> Callable[[], object]:
    cancel = getattr(cancellable, "cancel", None)
    if callable(cancel):
        return cancel
    if callable(cancellable):
        return cancellable
    raise TypeError(f"{cancellable!r} is neither callable nor exposes cancel()")


class CancelBag:
    """Collect cancellable work so it can be aborted with a single call.

    A bag is *live* until it is either cancelled or retired.  Cancelling
    invokes every registered cancellation exactly once; retiring simply
    forgets them because the work they guard has already finished.  Work
    registered with a bag that is no longer live is cancelled on the spot.
    """

    def __init__(self) -> None:
        self._callbacks: List[Callable[[], object]] = []
        self._cancelled = False
        self._retired = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def register(self, cancellable: Cancellable) -> None:
        """Add *cancellable* to the bag, or cancel it now if the bag is spent."""

        callback = _as_callback(cancellable)
        if not self.is_live:
            self._invoke(callback)
            return
        self._callbacks.append(callback)

    def cancel_all(self) -> None:
        """Cancel every registered unit of work and empty the bag."""

        if self._cancelled:
            return
        self._cancelled = True
        callbacks, self._callbacks = self._callbacks, []
        if callbacks:
            LOGGER.debug("Cancelling %d registered operation(s)", len(callbacks))
        for callback in callbacks:
            self._invoke(callback)

    cancel = cancel_all

    def retire(self) -> None:
        """Release registrations without cancelling them."""

        self._retired = True
        self._callbacks = []

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    @property
    def is_live(self) -> bool:
        return not (self._cancelled or self._retired)

    def __len__(self) -> int:
        return len(self._callbacks)

    def __repr__(self) -> str:
        if self._cancelled:
            status = "cancelled"
        elif self._retired:
            status = "retired"
        else:
            status = "live"
        return f"CancelBag({status}, pending={len(self._callbacks)})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _invoke(callback: Callable[[], object]) -> None:
        try:
            callback()
        except Exception:
            LOGGER.exception("Cancellation callback %r failed", callback)


__all__ = ["Cancellable", "CancelBag"]
