"""Controllers wiring fetch services to loadable models."""

from .countries_list_controller import CountriesListController
from .loadable_controller import LoadableController

__all__ = [
    "CountriesListController",
    "LoadableController",
]
