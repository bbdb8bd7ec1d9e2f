"""Background worker helpers for fetch tasks."""

from .fetch_worker import FetchService, FetchSignals, FetchWorker

__all__ = [
    "FetchService",
    "FetchSignals",
    "FetchWorker",
]
