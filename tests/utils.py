from dataclasses import dataclass, field
from typing import Any, TypeVar

from purely import Result, Task

R = TypeVar("R")


def settle(task: Task[R]) -> Result[R]:
    return task.attempt().run_sync()


@dataclass
class Recorder:
    """Operation recording the order in which it was called."""

    calls: list[Any] = field(default_factory=list)

    def __call__(self, value: R) -> R:
        self.calls.append(value)
        return value
