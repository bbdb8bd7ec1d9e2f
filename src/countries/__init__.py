"""Loadable state and live search filtering for the countries list."""

from .core.cancel_bag import CancelBag
from .core.loadable import (
    Failed,
    IsLoading,
    Loadable,
    LoadPhase,
    Loaded,
    NotRequested,
)
from .errors import CountriesError, InvalidTransitionError
from .utils.logging import get_logger

__all__ = [
    "CancelBag",
    "CountriesError",
    "Failed",
    "InvalidTransitionError",
    "IsLoading",
    "Loadable",
    "LoadPhase",
    "Loaded",
    "NotRequested",
    "get_logger",
]
