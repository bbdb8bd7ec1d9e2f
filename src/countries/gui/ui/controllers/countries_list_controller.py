"""Controller behind the searchable countries list."""

from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import QObject, QThreadPool

from ....config import DEFAULT_LOCALE, SEARCH_DEBOUNCE_MS
from ....core.loadable import LoadPhase
from ....models.country import Country
from ..models.filter_store import FilterStore
from ..models.loadable_model import LoadableModel
from ..tasks.fetch_worker import FetchService
from .loadable_controller import LoadableController


class CountriesListController(QObject):
    """Compose the countries state, its search filter and the loader.

    Views read :meth:`phase`, :meth:`countries` and :meth:`filtered`, listen
    to ``search.filteredChanged`` and ``countries.stateChanged``, and forward
    keystrokes to :meth:`set_search_text`.
    """

    def __init__(
        self,
        load_countries: FetchService,
        *,
        locale: str = DEFAULT_LOCALE,
        debounce_ms: int = SEARCH_DEBOUNCE_MS,
        model: Optional[LoadableModel] = None,
        thread_pool: Optional[QThreadPool] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._locale = locale
        self._countries = model if model is not None else LoadableModel(parent=self)
        self._search = FilterStore(self._search_key, debounce_ms=debounce_ms, parent=self)
        self._search.bind_source(self._countries)
        self._loader = LoadableController(
            self._countries,
            load_countries,
            thread_pool=thread_pool,
            parent=self,
        )

    @property
    def countries(self) -> LoadableModel:
        return self._countries

    @property
    def search(self) -> FilterStore:
        return self._search

    def locale(self) -> str:
        return self._locale

    def phase(self) -> LoadPhase:
        return self._countries.phase()

    def filtered(self) -> List[Country]:
        return self._search.filtered()

    # ------------------------------------------------------------------
    # View events
    # ------------------------------------------------------------------
    def on_appear(self) -> bool:
        return self._loader.load_if_needed()

    def on_disappear(self) -> None:
        self._loader.cancel()
        self._search.flush()

    def set_search_text(self, text: str) -> None:
        self._search.set_search_text(text)

    def retry(self) -> int:
        return self._loader.retry()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _search_key(self, country: Country) -> str:
        return country.localized_name(self._locale)


__all__ = ["CountriesListController"]
