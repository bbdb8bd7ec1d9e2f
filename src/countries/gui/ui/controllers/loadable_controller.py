"""Controller driving the fetch-and-retry loop of a loadable model."""

from __future__ import annotations

import logging
from typing import Any, Optional

from PySide6.QtCore import QObject, QThreadPool

from ....core.loadable import NotRequested
from ..models.loadable_model import LoadableModel
from ..tasks.fetch_worker import FetchService, FetchSignals, FetchWorker


logger = logging.getLogger(__name__)


class LoadableController(QObject):
    """Start fetches for *model* and route their results back to it."""

    def __init__(
        self,
        model: LoadableModel,
        fetch: FetchService,
        *,
        thread_pool: Optional[QThreadPool] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._model = model
        self._fetch = fetch
        self._thread_pool = thread_pool
        self._signals = FetchSignals(self)
        self._signals.succeeded.connect(self._handle_succeeded)
        self._signals.failed.connect(self._handle_failed)

    def model(self) -> LoadableModel:
        return self._model

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def load(self) -> int:
        """Start a fetch cycle, superseding any cycle still running."""

        generation = self._model.start_fetch()
        worker = FetchWorker(self._fetch, self._signals, generation=generation)
        bag = self._model.cancel_bag()
        if bag is not None:
            bag.register(worker)
        logger.debug("Starting fetch generation %d", generation)
        self._pool().start(worker)
        return generation

    def load_if_needed(self) -> bool:
        """Load only when nothing has been requested yet."""

        if not isinstance(self._model.state(), NotRequested):
            return False
        self.load()
        return True

    def retry(self) -> int:
        return self.load()

    def cancel(self) -> None:
        self._model.cancel_loading()

    # ------------------------------------------------------------------
    # Signal handlers
    # ------------------------------------------------------------------
    def _handle_succeeded(self, generation: int, value: Any) -> None:
        self._model.complete(generation, value)

    def _handle_failed(self, generation: int, error: Any) -> None:
        self._model.fail(generation, error)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _pool(self) -> QThreadPool:
        if self._thread_pool is not None:
            return self._thread_pool
        return QThreadPool.globalInstance()


__all__ = ["LoadableController"]
