from __future__ import annotations

import logging
from concurrent.futures import Future, wait

from .types import (
    LaunchError,
    LaunchFailure,
    Outcome,
    ShellOutput,
    Success,
    TimedOut,
)

logger = logging.getLogger(__name__)


def race(future: Future[ShellOutput], timeout: float) -> Outcome:
    return race_all([future], timeout)[0]


def race_all(futures: list[Future[ShellOutput]], timeout: float) -> list[Outcome]:
    """Settle each future against one shared deadline `timeout` seconds away."""
    done, _ = wait(futures, timeout=timeout)
    return [
        settle(future) if future in done else _abandon(future) for future in futures
    ]


def settle(future: Future[ShellOutput]) -> Outcome:
    exc = future.exception()
    if isinstance(exc, LaunchError):
        logger.warning("Command launch error: %s", exc)
        return LaunchFailure(str(exc))
    if exc is not None:
        logger.error("Executor raised %s", type(exc).__name__, exc_info=exc)
        return LaunchFailure(str(exc) or type(exc).__name__)

    output = future.result()
    if not isinstance(output, ShellOutput):
        logger.error("Executor returned %r instead of ShellOutput", output)
        return LaunchFailure(
            f"executor returned {type(output).__name__}, expected ShellOutput"
        )

    return Success.from_output(output)


def _abandon(future: Future[ShellOutput]) -> Outcome:
    # Only a task still queued can be cancelled; a running command is left alone
    if future.cancel():
        logger.debug("Command timed out before it started")
    else:
        logger.debug("Command timed out, leaving it to finish unobserved")
    return TimedOut()
