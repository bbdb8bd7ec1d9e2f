"""Qt owner of a single loadable state slot."""

from __future__ import annotations

import logging
from typing import Any, Optional

from PySide6.QtCore import QObject, Signal

from ....core import loadable
from ....core.cancel_bag import CancelBag
from ....core.loadable import IsLoading, Loadable, LoadPhase, NotRequested
from ....errors import InvalidTransitionError


logger = logging.getLogger(__name__)


class LoadableModel(QObject):
    """Hold a :data:`Loadable` and tag every fetch cycle with a generation.

    Each :meth:`start_fetch` hands out a new generation number.  Results are
    delivered back with that number; a result whose generation is older than
    the current one belongs to a superseded or cancelled cycle and is
    dropped, so a slow response can never overwrite a newer state.

    All mutation must happen on the thread that owns the model.
    """

    stateChanged = Signal(object)

    def __init__(self, initial: Optional[Loadable] = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._state: Loadable = initial if initial is not None else NotRequested()
        self._generation = 0

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    def state(self) -> Loadable:
        return self._state

    def generation(self) -> int:
        return self._generation

    def value(self) -> Any:
        return loadable.value_of(self._state)

    def phase(self) -> LoadPhase:
        return loadable.phase(self._state)

    def cancel_bag(self) -> Optional[CancelBag]:
        """Return the bag of the running fetch, or ``None`` when idle."""

        if isinstance(self._state, IsLoading):
            return self._state.cancel_bag
        return None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def start_fetch(self) -> int:
        """Enter the in-flight state and return the generation of the new cycle."""

        self._generation += 1
        self._set_state(loadable.start_fetch(self._state))
        return self._generation

    def complete(self, generation: int, value: Any) -> bool:
        """Apply a successful result; return ``False`` if it arrived too late."""

        if not self._accepts(generation, "complete"):
            return False
        self._set_state(loadable.complete(self._state, value))
        return True

    def fail(self, generation: int, error: Any) -> bool:
        """Apply a failed result; return ``False`` if it arrived too late."""

        if not self._accepts(generation, "fail"):
            return False
        self._set_state(loadable.fail(self._state, error))
        return True

    def cancel_loading(self) -> None:
        if not isinstance(self._state, IsLoading):
            return
        self._generation += 1
        self._set_state(loadable.cancel_loading(self._state))

    def set_state(self, state: Loadable) -> None:
        """Replace the state wholesale, abandoning any running fetch.

        Every replacement opens a new generation so results addressed to an
        earlier cycle are dropped, even if *state* is itself in flight.
        """

        if state is self._state:
            return
        if isinstance(self._state, IsLoading):
            self._state.cancel_bag.cancel_all()
        self._generation += 1
        self._set_state(state)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _accepts(self, generation: int, operation: str) -> bool:
        if generation > self._generation:
            raise InvalidTransitionError(
                f"{operation}() received unknown generation {generation} "
                f"(current is {self._generation})"
            )
        if generation < self._generation:
            logger.debug(
                "Dropping %s for stale generation %d (current %d)",
                operation,
                generation,
                self._generation,
            )
            return False
        return True

    def _set_state(self, state: Loadable) -> None:
        self._state = state
        self.stateChanged.emit(state)


__all__ = ["LoadableModel"]
