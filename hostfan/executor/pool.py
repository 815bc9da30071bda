from __future__ import annotations

import logging
import queue
import threading
from concurrent.futures import Future

from hostfan.config import ConfigError

from .types import Execute, ShellOutput, Task

logger = logging.getLogger(__name__)

_STOP = None


class WorkerPool:
    """Fixed set of `worker_count` daemon threads fed from a FIFO queue."""

    def __init__(self, worker_count: int, execute: Execute) -> None:
        if isinstance(worker_count, bool) or not isinstance(worker_count, int):
            raise ConfigError(f"worker count must be an integer, got {worker_count!r}")
        if worker_count < 1:
            raise ConfigError(f"worker count must be > 0, got {worker_count}")

        self.worker_count = worker_count
        self.execute = execute
        self._queue: queue.SimpleQueue[tuple[Task, Future[ShellOutput]] | None] = (
            queue.SimpleQueue()
        )
        # A slot stays busy until its executor call returns, timed out or not
        self._workers = [
            threading.Thread(
                target=self._work,
                name=f"hostfan-worker-{i}",
                daemon=True,
            )
            for i in range(worker_count)
        ]
        for worker in self._workers:
            worker.start()
        logger.debug("WorkerPool started (worker_count=%d)", worker_count)

    def __enter__(self) -> WorkerPool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def submit(self, task: Task) -> Future[ShellOutput]:
        logger.debug("Submitting task %d (%s)", task.index, task.hostname)
        future: Future[ShellOutput] = Future()
        self._queue.put((task, future))
        return future

    def shutdown(self) -> None:
        # Workers stuck on an abandoned command pick up the stop marker once
        # it returns; nobody waits for them.
        for _ in self._workers:
            self._queue.put(_STOP)
        logger.debug("WorkerPool stopped")

    def _work(self) -> None:
        while True:
            item = self._queue.get()
            if item is _STOP:
                return

            task, future = item
            if not future.set_running_or_notify_cancel():
                logger.debug("Task %d was abandoned before it started", task.index)
                continue

            logger.info("Running command: %s", task.command)
            try:
                output = self.execute(task.command)
            except BaseException as exc:
                future.set_exception(exc)
            else:
                future.set_result(output)
