import threading
import time

import pytest

from chatexport.pipeline import Pipeline


def test_results_come_back_through_futures():
    with Pipeline(3) as pipeline:
        futures = [pipeline.submit_task(lambda n=n: n * n) for n in range(20)]
        results = [f.result(timeout=5) for f in futures]
    assert results == [n * n for n in range(20)]


def test_exception_is_set_on_future_and_recorded():
    def boom():
        raise KeyError("missing")

    with Pipeline(2) as pipeline:
        future = pipeline.submit_task(boom)
        with pytest.raises(KeyError):
            future.result(timeout=5)
    assert len(pipeline.exceptions) == 1
    assert isinstance(pipeline.exceptions[0], KeyError)


def test_shutdown_drains_queued_tasks():
    done = []
    lock = threading.Lock()

    def slow(n):
        time.sleep(0.01)
        with lock:
            done.append(n)
        return n

    pipeline = Pipeline(1)
    futures = [pipeline.submit_task(lambda n=n: slow(n)) for n in range(5)]
    pipeline.shutdown()
    assert all(f.done() for f in futures)
    assert done == [0, 1, 2, 3, 4]


def test_submit_after_shutdown_raises():
    pipeline = Pipeline(1)
    pipeline.shutdown()
    with pytest.raises(RuntimeError):
        pipeline.submit_task(lambda: 1)


def test_shutdown_twice_is_harmless():
    pipeline = Pipeline(2)
    future = pipeline.submit_task(lambda: "ok")
    pipeline.shutdown()
    pipeline.shutdown()
    assert future.result() == "ok"


def test_zero_workers_rejected():
    with pytest.raises(ValueError):
        Pipeline(0)


def test_tasks_run_concurrently():
    barrier = threading.Barrier(3, timeout=5)

    def wait():
        barrier.wait()
        return True

    with Pipeline(3) as pipeline:
        futures = [pipeline.submit_task(wait) for _ in range(3)]
        assert [f.result(timeout=5) for f in futures] == [True, True, True]