"""Live search filter over a loadable list."""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

from PySide6.QtCore import QObject, QTimer, Signal

from ....core.loadable import Loadable, Loaded, NotRequested
from ....core.search import default_search_key, filter_matching
from .loadable_model import LoadableModel


logger = logging.getLogger(__name__)


class FilterStore(QObject):
    """Keep ``filtered`` in sync with the source list and the search text.

    ``filtered`` is the stable subsequence of the loaded items whose search
    key contains the search text, ignoring case.  It is empty whenever the
    source is not loaded.  ``filteredChanged`` fires after every mutation
    that may affect it; listeners must tolerate emissions that carry an
    unchanged list.

    With ``debounce_ms`` greater than zero, search text is applied once typing
    pauses for that long.  :meth:`flush` applies pending text immediately.
    """

    filteredChanged = Signal(object)
    searchTextChanged = Signal(str)

    def __init__(
        self,
        key: Callable[[Any], str] = default_search_key,
        *,
        debounce_ms: int = 0,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._key = key
        self._debounce_ms = max(0, int(debounce_ms))
        self._all: Loadable = NotRequested()
        self._search_text = ""
        self._pending_text: Optional[str] = None
        self._filtered: List[Any] = []
        self._source: Optional[LoadableModel] = None

        self._debounce_timer = QTimer(self)
        self._debounce_timer.setSingleShot(True)
        self._debounce_timer.timeout.connect(self._on_debounce_timeout)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def all(self) -> Loadable:
        return self._all

    def set_all(self, state: Loadable) -> None:
        """Replace the source state and recompute ``filtered``."""

        self._all = state
        self._take_pending_text()
        self._recompute()

    def search_text(self) -> str:
        """Return the search text ``filtered`` currently reflects."""

        return self._search_text

    def set_search_text(self, text: str) -> None:
        if self._debounce_ms <= 0:
            self._apply_search_text(text)
            return
        self._pending_text = text
        self._debounce_timer.start(self._debounce_ms)

    def filtered(self) -> List[Any]:
        return list(self._filtered)

    def debounce_ms(self) -> int:
        return self._debounce_ms

    def is_settled(self) -> bool:
        """Return ``True`` when no debounced search text is waiting."""

        return self._pending_text is None

    def flush(self) -> None:
        """Apply any pending search text without waiting for the timer."""

        if self._pending_text is None:
            return
        self._debounce_timer.stop()
        text, self._pending_text = self._pending_text, None
        self._apply_search_text(text)

    def bind_source(self, model: LoadableModel) -> None:
        """Follow *model* so ``filtered`` tracks its state automatically."""

        self.unbind_source()
        self._source = model
        model.stateChanged.connect(self.set_all)
        self.set_all(model.state())

    def unbind_source(self) -> None:
        if self._source is None:
            return
        try:
            self._source.stateChanged.disconnect(self.set_all)
        except (RuntimeError, TypeError):  # pragma: no cover - Qt disconnect noise
            pass
        self._source = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _on_debounce_timeout(self) -> None:
        self.flush()

    def _take_pending_text(self) -> None:
        if self._pending_text is None:
            return
        self._debounce_timer.stop()
        text, self._pending_text = self._pending_text, None
        if text != self._search_text:
            self._search_text = text
            self.searchTextChanged.emit(text)

    def _apply_search_text(self, text: str) -> None:
        changed = text != self._search_text
        self._search_text = text
        if changed:
            self.searchTextChanged.emit(text)
        self._recompute()

    def _recompute(self) -> None:
        if isinstance(self._all, Loaded):
            self._filtered = filter_matching(self._all.value, self._search_text, self._key)
        else:
            self._filtered = []
        logger.debug("Filtered %d item(s) for %r", len(self._filtered), self._search_text)
        self.filteredChanged.emit(list(self._filtered))


__all__ = ["FilterStore"]
