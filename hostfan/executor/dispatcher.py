import logging
import time

from hostfan.config import FanoutConfig, validate_config

from .pool import WorkerPool
from .race import race_all
from .render import render
from .shell import run_shell
from .types import Execute, RunResult, Task, TimedOut

logger = logging.getLogger(__name__)


class Dispatcher:
    def __init__(self, config: FanoutConfig, execute: Execute = run_shell):
        self.config = config
        self.execute = execute

    def tasks(self) -> list[Task]:
        template = self.config.command_template
        tag = self.config.placeholder_tag
        return [
            Task(i, hostname, render(template, tag, hostname))
            for i, hostname in enumerate(self.config.hostnames)
        ]

    def run(self) -> RunResult:
        validate_config(self.config)

        tasks = self.tasks()
        if not tasks:
            return RunResult((), ())

        logger.info(
            "Dispatching %d commands (workers=%d, timeout=%dms)",
            len(tasks),
            self.config.worker_count,
            self.config.timeout_ms,
        )
        start = time.monotonic()

        with WorkerPool(self.config.worker_count, self.execute) as pool:
            futures = [pool.submit(task) for task in tasks]
            # Every deadline starts at submission, so they all expire together
            outcomes = race_all(futures, self.config.timeout)

        for task, outcome in zip(tasks, outcomes):
            if isinstance(outcome, TimedOut):
                logger.warning("Timed out on %s: %s", task.hostname, task.command)

        result = RunResult(self.config.hostnames, tuple(outcomes))
        logger.info(
            "Run finished in %.3fs, %d/%d failed",
            time.monotonic() - start,
            len(result.failed),
            len(result),
        )
        return result
