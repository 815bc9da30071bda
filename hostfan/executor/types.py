from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Iterator


class LaunchError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


@dataclass(frozen=True)
class ShellOutput:
    stdout: bytes
    stderr: bytes
    returncode: int | None = None


# command -> captured output, raises LaunchError when the shell can't start
Execute = Callable[[str], ShellOutput]


@dataclass(frozen=True)
class Task:
    index: int
    hostname: str
    command: str


@dataclass(frozen=True)
class Success:
    status: ClassVar[str] = "ok"
    ok: ClassVar[bool] = True

    stdout: str
    stderr: str
    returncode: int | None = None

    @classmethod
    def from_output(cls, output: ShellOutput) -> Success:
        return cls(
            output.stdout.decode("utf-8", errors="replace"),
            output.stderr.decode("utf-8", errors="replace"),
            output.returncode,
        )


@dataclass(frozen=True)
class LaunchFailure:
    status: ClassVar[str] = "launch-error"
    ok: ClassVar[bool] = False

    cause: str


@dataclass(frozen=True)
class TimedOut:
    status: ClassVar[str] = "timeout"
    ok: ClassVar[bool] = False


Outcome = Success | LaunchFailure | TimedOut


@dataclass(frozen=True)
class RunResult:
    hostnames: tuple[str, ...]
    outcomes: tuple[Outcome, ...]

    def __post_init__(self):
        if len(self.hostnames) != len(self.outcomes):
            raise ValueError(
                f"{len(self.hostnames)} hostnames but {len(self.outcomes)} outcomes"
            )

    def __len__(self):
        return len(self.outcomes)

    def __iter__(self) -> Iterator[Outcome]:
        return iter(self.outcomes)

    def __getitem__(self, index: int) -> Outcome:
        return self.outcomes[index]

    def pairs(self) -> list[tuple[str, Outcome]]:
        return list(zip(self.hostnames, self.outcomes))

    @property
    def failed(self) -> list[int]:
        return [i for i, outcome in enumerate(self.outcomes) if not outcome.ok]
