"""Background worker that runs a fetch service off the GUI thread."""

from __future__ import annotations

import logging
import threading
from typing import Any, Protocol

from PySide6.QtCore import QObject, QRunnable, Signal


LOGGER = logging.getLogger(__name__)


class FetchService(Protocol):
    """Anything that returns the requested data or raises on failure."""

    def __call__(self) -> Any:
        ...


class FetchSignals(QObject):
    """Signals emitted by :class:`FetchWorker`."""

    succeeded = Signal(int, object)
    """Emitted with the generation and the fetched value."""

    failed = Signal(int, object)
    """Emitted with the generation and the exception raised by the service."""


class FetchWorker(QRunnable):
    """Run one fetch cycle in a :class:`QThreadPool` worker.

    Cancellation is cooperative: :meth:`cancel` only raises a flag.  A
    cancelled worker skips the service call if it has not started yet and
    never emits a result.
    """

    def __init__(self, fetch: FetchService, signals: FetchSignals, *, generation: int) -> None:
        super().__init__()
        self.setAutoDelete(True)
        self._fetch = fetch
        self._signals = signals
        self._generation = generation
        self._cancelled = threading.Event()

    @property
    def generation(self) -> int:
        return self._generation

    def cancel(self) -> None:
        self._cancelled.set()

    def is_cancelled(self) -> bool:
        return self._cancelled.is_set()

    # ------------------------------------------------------------------
    def run(self) -> None:  # type: ignore[override]
        if self.is_cancelled():
            LOGGER.debug("Fetch generation %d cancelled before start", self._generation)
            return

        try:
            value = self._fetch()
        except Exception as exc:
            if self.is_cancelled():
                return
            LOGGER.warning("Fetch generation %d failed: %s", self._generation, exc)
            self._signals.failed.emit(self._generation, exc)
            return

        if self.is_cancelled():
            LOGGER.debug("Discarding result of cancelled fetch generation %d", self._generation)
            return
        self._signals.succeeded.emit(self._generation, value)


__all__ = ["FetchService", "FetchSignals", "FetchWorker"]
