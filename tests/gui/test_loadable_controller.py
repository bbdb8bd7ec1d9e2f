from unittest.mock import MagicMock, patch

import pytest
from PySide6.QtCore import QThreadPool

from countries.core.loadable import Failed, IsLoading, Loaded, NotRequested
from countries.gui.ui.controllers.loadable_controller import LoadableController
from countries.gui.ui.models.loadable_model import LoadableModel
from countries.gui.ui.tasks.fetch_worker import FetchWorker


@pytest.fixture
def pool():
    return MagicMock()


@pytest.fixture
def model():
    return LoadableModel()


def _started_workers(pool):
    return [call[0][0] for call in pool.start.call_args_list]


def test_load_starts_worker_for_new_generation(model, pool):
    controller = LoadableController(model, MagicMock(return_value=["A"]), thread_pool=pool)

    generation = controller.load()

    assert model.state() == IsLoading(last=None)
    workers = _started_workers(pool)
    assert len(workers) == 1
    assert isinstance(workers[0], FetchWorker)
    assert workers[0].generation == generation
    assert len(model.cancel_bag()) == 1


def test_worker_success_completes_model(model, pool):
    controller = LoadableController(model, MagicMock(return_value=["A", "B"]), thread_pool=pool)
    controller.load()

    _started_workers(pool)[0].run()

    assert model.state() == Loaded(["A", "B"])


def test_worker_failure_fails_model(model, pool):
    error = RuntimeError("timeout")
    controller = LoadableController(model, MagicMock(side_effect=error), thread_pool=pool)
    controller.load()

    _started_workers(pool)[0].run()

    assert model.state() == Failed(error)


def test_retry_after_failure(pool):
    model = LoadableModel(Failed("timeout"))
    fetch = MagicMock(return_value=["A", "B"])
    controller = LoadableController(model, fetch, thread_pool=pool)

    controller.retry()
    assert model.state() == IsLoading(last=None)
    _started_workers(pool)[0].run()

    fetch.assert_called_once_with()
    assert model.state() == Loaded(["A", "B"])


def test_reload_cancels_previous_worker_and_ignores_its_result(model, pool):
    fetch = MagicMock(return_value=["fresh"])
    controller = LoadableController(model, fetch, thread_pool=pool)

    controller.load()
    controller.load()
    first, second = _started_workers(pool)

    assert first.is_cancelled()
    assert not second.is_cancelled()
    second.run()
    first.run()

    fetch.assert_called_once_with()
    assert model.state() == Loaded(["fresh"])


def test_late_result_of_superseded_fetch_is_dropped(model, pool):
    controller = LoadableController(model, MagicMock(return_value=["A"]), thread_pool=pool)
    controller.load()
    controller.load()
    first, second = _started_workers(pool)

    # Simulate a result that was already past its cancellation checkpoint.
    controller._handle_succeeded(first.generation, ["stale"])
    assert model.state() == IsLoading(last=None)

    second.run()
    assert model.state() == Loaded(["A"])


def test_load_if_needed_only_from_not_requested(model, pool):
    controller = LoadableController(model, MagicMock(return_value=[]), thread_pool=pool)

    assert controller.load_if_needed() is True
    assert controller.load_if_needed() is False
    assert pool.start.call_count == 1


def test_load_if_needed_skips_loaded_state(pool):
    model = LoadableModel(Loaded(["A"]))
    controller = LoadableController(model, MagicMock(), thread_pool=pool)
    assert controller.load_if_needed() is False
    pool.start.assert_not_called()


def test_cancel_stops_worker_and_restores_state(model, pool):
    fetch = MagicMock(return_value=["A"])
    controller = LoadableController(model, fetch, thread_pool=pool)
    controller.load()
    worker = _started_workers(pool)[0]

    controller.cancel()
    worker.run()

    assert worker.is_cancelled()
    fetch.assert_not_called()
    assert model.state() == NotRequested()


def test_defaults_to_global_thread_pool(model):
    controller = LoadableController(model, MagicMock(return_value=[]))

    with patch.object(QThreadPool, "globalInstance") as mock_pool_cls:
        mock_pool = mock_pool_cls.return_value
        controller.load()

        assert mock_pool.start.call_count == 1
