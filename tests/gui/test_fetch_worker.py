from unittest.mock import MagicMock

import pytest

from countries.gui.ui.tasks.fetch_worker import FetchSignals, FetchWorker


@pytest.fixture
def signals():
    return FetchSignals()


@pytest.fixture
def outcomes(signals):
    results = {"succeeded": [], "failed": []}
    signals.succeeded.connect(lambda generation, value: results["succeeded"].append((generation, value)))
    signals.failed.connect(lambda generation, error: results["failed"].append((generation, error)))
    return results


def test_success_emits_value_with_generation(signals, outcomes):
    fetch = MagicMock(return_value=["A", "B"])
    worker = FetchWorker(fetch, signals, generation=3)

    worker.run()

    fetch.assert_called_once_with()
    assert outcomes["succeeded"] == [(3, ["A", "B"])]
    assert outcomes["failed"] == []


def test_failure_emits_exception(signals, outcomes):
    error = RuntimeError("timeout")
    worker = FetchWorker(MagicMock(side_effect=error), signals, generation=1)

    worker.run()

    assert outcomes["failed"] == [(1, error)]
    assert outcomes["succeeded"] == []


def test_cancelled_before_start_skips_service(signals, outcomes):
    fetch = MagicMock(return_value=[])
    worker = FetchWorker(fetch, signals, generation=1)
    worker.cancel()

    worker.run()

    fetch.assert_not_called()
    assert outcomes == {"succeeded": [], "failed": []}


def test_cancelled_during_fetch_emits_nothing(signals, outcomes):
    holder = {}

    def fetch():
        holder["worker"].cancel()
        return ["late"]

    worker = FetchWorker(fetch, signals, generation=2)
    holder["worker"] = worker
    worker.run()

    assert worker.is_cancelled()
    assert outcomes == {"succeeded": [], "failed": []}


def test_error_after_cancel_is_not_reported(signals, outcomes):
    holder = {}

    def fetch():
        holder["worker"].cancel()
        raise ConnectionError("aborted")

    worker = FetchWorker(fetch, signals, generation=2)
    holder["worker"] = worker
    worker.run()

    assert outcomes["failed"] == []
