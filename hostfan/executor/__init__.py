from .dispatcher import Dispatcher
from .pool import WorkerPool
from .race import race, race_all
from .render import render
from .shell import run_shell
from .types import (
    Execute,
    LaunchError,
    LaunchFailure,
    Outcome,
    RunResult,
    ShellOutput,
    Success,
    Task,
    TimedOut,
)

__all__ = [
    "Dispatcher",
    "WorkerPool",
    "race",
    "race_all",
    "render",
    "run_shell",
    "Execute",
    "LaunchError",
    "LaunchFailure",
    "Outcome",
    "RunResult",
    "ShellOutput",
    "Success",
    "Task",
    "TimedOut",
]
