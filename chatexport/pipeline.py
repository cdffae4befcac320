"""A fixed pool of worker threads that run submitted tasks in order."""

import itertools
import queue
import threading
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, TypeVar

R = TypeVar("R")


@dataclass
class _Task(Generic[R]):
    future: "Future[R]"
    workload: Callable[[], R]
    sequence_id: int


class Pipeline(Generic[R]):
    """Runs callables on worker threads and hands back futures.

    Tasks are taken in submission order. Shutting down lets the workers
    finish every task already queued. Exceptions raised by a task are set
    on its future and also kept in :attr:`exceptions`.
    """

    def __init__(self, workers: int) -> None:
        if workers < 1:
            raise ValueError("a pipeline needs at least one worker")
        self._tasks: "queue.SimpleQueue[Optional[_Task[R]]]" = queue.SimpleQueue()
        self._sequence = itertools.count()
        self._lock = threading.Lock()
        self._closed = False
        self.exceptions: List[BaseException] = []
        self._threads = [
            threading.Thread(target=self._work, daemon=True) for _ in range(workers)
        ]
        for thread in self._threads:
            thread.start()

    def submit_task(self, function: Callable[[], R]) -> "Future[R]":
        """Queue ``function`` and return a future for its result."""
        future: "Future[R]" = Future()
        with self._lock:
            if self._closed:
                raise RuntimeError("cannot submit to a pipeline that was shut down")
            self._tasks.put(_Task(future, function, next(self._sequence)))
        return future

    def shutdown(self) -> None:
        """Stop accepting tasks, drain the queue and join the workers."""
        with self._lock:
            if not self._closed:
                self._closed = True
                for _ in self._threads:
                    self._tasks.put(None)
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()

    def __enter__(self) -> "Pipeline[R]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def _work(self) -> None:
        while True:
            task = self._tasks.get()
            if task is None:
                return
            if not task.future.set_running_or_notify_cancel():
                continue
            try:
                result = task.workload()
            except Exception as error:
                with self._lock:
                    self.exceptions.append(error)
                task.future.set_exception(error)
            else:
                task.future.set_result(result)