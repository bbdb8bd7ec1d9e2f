"""Expose Qt models used by the countries list."""

from .filter_store import FilterStore
from .loadable_model import LoadableModel

__all__ = [
    "FilterStore",
    "LoadableModel",
]
