"""Contains the Task type for lazy asynchronous computations."""

import asyncio
import inspect
import logging
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any, Awaitable, Callable, Literal, TypeVar, cast

from purely.errors import TaskError
from purely.protocols import Chainable, Mappable
from purely.result import Result

logger = logging.getLogger(__name__)

R = TypeVar("R")
B = TypeVar("B")
C = TypeVar("C")


def failure(reason: Any) -> Exception:
    """
    Get the exception that signals a task failing with `reason`.

    Args:
    ----
        reason: The reason of the failure, any value.

    Returns:
    -------
        `reason` itself if it is an exception, otherwise `reason`
        wrapped in a `TaskError`.

    """
    return reason if isinstance(reason, Exception) else TaskError(reason)


def failure_reason(error: Exception) -> Any:
    """
    Get the reason a task failed with from the exception it raised.

    Inverse of `failure`.
    """
    return error.reason if isinstance(error, TaskError) else error


def _name(operation: Callable[..., Any]) -> str:
    return getattr(operation, "__qualname__", repr(operation))


async def _succeed(value: R) -> R:
    return value


def _fail(reason: Any) -> Any:
    raise failure(reason)


async def _run_operation(
    operation: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]
) -> tuple[bool, Any]:
    logger.debug("Running task %s", _name(operation))
    try:
        outcome = operation(*args, **kwargs)
        if inspect.isawaitable(outcome):
            outcome = await outcome
    except Exception as error:
        logger.debug("Task %s failed with %r", _name(operation), failure_reason(error))
        return False, error
    return True, outcome


async def _drain(main: Awaitable[R]) -> R:
    try:
        return await main
    finally:
        current = asyncio.current_task()
        while pending := asyncio.all_tasks() - {current}:
            await asyncio.gather(*pending, return_exceptions=True)


@dataclass(frozen=True)
class _Step:
    kind: Literal["map", "chain", "map_error", "on_error"]
    f: Callable[[Any], Any]

    @property
    def on_success(self) -> bool:
        return self.kind in ("map", "chain")


@dataclass(frozen=True, eq=False)
class Task(Mappable[R], Chainable[R]):
    """
    A lazy description of an asynchronous computation.

    Captures an operation together with its arguments. Nothing is executed
    until `run` is called, and every call to `run` executes the operation
    again, including its side effects. Combinators build new tasks without
    running anything.

    A task fails when its operation raises an exception. The failure reason
    can be any value: exceptions are raised as they are, other values are
    wrapped in `TaskError`. `map_error` and `on_error` always see the
    raw reason.

    Tasks compare and hash by identity.
    """

    operation: Callable[..., Awaitable[R] | R]
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)
    steps: tuple[_Step, ...] = ()

    @classmethod
    def of(
        cls, operation: Callable[..., Awaitable[B] | B], *args: Any, **kwargs: Any
    ) -> "Task[B]":
        """
        Describe calling `operation` with `args` and `kwargs`.

        `operation` may be a plain function or return an awaitable, which
        is awaited when the task runs.

        Args:
        ----
            operation: The function to call when the task runs.
            args: Positional arguments for `operation`.
            kwargs: Keyword arguments for `operation`.

        Returns:
        -------
            A task calling `operation`.

        """
        return cls(operation, args, kwargs)  # type: ignore

    @classmethod
    def succeed(cls, value: B) -> "Task[B]":
        """Create a task that always succeeds with `value`."""
        return cls(_succeed, (value,))  # type: ignore

    @classmethod
    def fail(cls, reason: Any) -> "Task[Any]":
        """Create a task that always fails with `reason`."""
        return cls(_fail, (reason,))

    @classmethod
    def all(cls, tasks: Iterable["Task[B]"]) -> "Task[list[B]]":
        """
        Run tasks concurrently.

        All tasks are started before any of them is awaited. The resulting
        task succeeds with the results in the order of `tasks`, or fails
        with the first failure observed. Tasks that were already started
        when a failure is observed are not cancelled: they keep running
        on the event loop, and `run_sync` waits for them before returning.

        Args:
        ----
            tasks: The tasks to run.

        Returns:
        -------
            A task producing the list of results.

        """
        captured = tuple(tasks)

        async def gathered() -> list[B]:
            return list(await asyncio.gather(*(task.run() for task in captured)))

        return cls(gathered)  # type: ignore

    @classmethod
    def sequence(cls, tasks: Iterable["Task[B]"]) -> "Task[list[B]]":
        """
        Run tasks one at a time, from left to right.

        A task is only started once the previous task succeeded. The first
        failure aborts the sequence and becomes the failure of the
        resulting task.

        Args:
        ----
            tasks: The tasks to run.

        Returns:
        -------
            A task producing the list of results.

        """
        captured = tuple(tasks)

        async def sequenced() -> list[B]:
            results = []
            for task in captured:
                results.append(await task.run())
            return results

        return cls(sequenced)  # type: ignore

    def _then(self, kind: Any, f: Callable[[Any], Any]) -> "Task[Any]":
        return replace(self, steps=(*self.steps, _Step(kind, f)))

    async def run(self) -> R:
        """
        Run the operation of this task, then the steps added by combinators.

        Steps run in a loop rather than as nested calls, so chains of any
        length run without growing the stack. A task returned by `chain` or
        `on_error` has its own steps spliced in front of the remaining ones.

        Returns
        -------
            The value the task succeeded with.

        """
        succeeded, outcome = await _run_operation(
            self.operation, self.args, self.kwargs
        )
        remaining = deque(self.steps)
        while remaining:
            step = remaining.popleft()
            if step.on_success != succeeded:
                continue
            try:
                if step.kind == "map":
                    outcome = step.f(outcome)
                elif step.kind == "map_error":
                    succeeded, outcome = False, failure(step.f(failure_reason(outcome)))
                else:
                    argument = outcome if succeeded else failure_reason(outcome)
                    following: Task[Any] = step.f(argument)
                    succeeded, outcome = await _run_operation(
                        following.operation, following.args, following.kwargs
                    )
                    remaining.extendleft(reversed(following.steps))
            except Exception as error:
                succeeded, outcome = False, error
        if not succeeded:
            raise outcome
        return cast(R, outcome)

    def run_sync(self) -> R:
        """
        Run this task to completion in a new event loop.

        Tasks still running on the loop when this task is done, like the
        siblings of a failed `Task.all`, are awaited before the loop is
        closed.

        Returns
        -------
            The value the task succeeded with.

        """
        return asyncio.run(_drain(self.run()))

    def map(self, f: Callable[[R], B]) -> "Task[B]":
        """
        Transform the value this task succeeds with.

        Args:
        ----
            f: The function to apply to the value.

        Returns:
        -------
            A task succeeding with `f(value)`, failures are passed on.

        """
        return self._then("map", f)

    def map2(self, f: Callable[[R, B], C], other: "Task[B]") -> "Task[C]":
        """
        Combine the values of this task and `other`.

        `other` is only started once this task succeeded.

        Args:
        ----
            f: Function combining both values.
            other: The task to run after this one.

        Returns:
        -------
            A task succeeding with `f(value, other_value)`.

        """
        return self.chain(lambda first: other.map(lambda second: f(first, second)))

    def map_error(self, f: Callable[[Any], Any]) -> "Task[R]":
        """
        Transform the reason this task fails with.

        Args:
        ----
            f: The function to apply to the failure reason.

        Returns:
        -------
            A task failing with `f(reason)`, successes are passed on.

        """
        return self._then("map_error", f)

    def chain(self, f: Callable[[R], "Task[B]"]) -> "Task[B]":
        """
        Continue with the task `f` returns for the value of this task.

        Args:
        ----
            f: Function returning the next task.

        Returns:
        -------
            A task running this task, then the task returned by `f`.

        """
        return self._then("chain", f)

    def on_error(self, f: Callable[[Any], "Task[B]"]) -> "Task[R | B]":
        """
        Recover from a failure with the task `f` returns for the failure reason.

        Args:
        ----
            f: Function returning the task to recover with.

        Returns:
        -------
            A task running this task, then the task returned by `f` if
            this task failed.

        """
        return self._then("on_error", f)

    def attempt(self) -> "Task[Result[R]]":
        """
        Capture the outcome of this task as a `Result`.

        Returns
        -------
            A task that always succeeds, with `Result.Ok(value)` or
            `Result.Err(reason)`.

        """
        return self.map(Result.Ok).on_error(
            lambda reason: Task.succeed(Result.Err(reason))
        )
