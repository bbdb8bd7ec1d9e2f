"""Qt-free building blocks: cancellation, loadable state, search filtering."""

from .cancel_bag import CancelBag
from .loadable import (
    Failed,
    IsLoading,
    Loadable,
    LoadPhase,
    Loaded,
    NotRequested,
    cancel_loading,
    complete,
    error_of,
    fail,
    is_loading,
    map_value,
    phase,
    start_fetch,
    value_of,
)
from .search import default_search_key, filter_matching, normalize

__all__ = [
    "CancelBag",
    "Failed",
    "IsLoading",
    "Loadable",
    "LoadPhase",
    "Loaded",
    "NotRequested",
    "cancel_loading",
    "complete",
    "default_search_key",
    "error_of",
    "fail",
    "filter_matching",
    "is_loading",
    "map_value",
    "normalize",
    "phase",
    "start_fetch",
    "value_of",
]
