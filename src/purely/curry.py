"""Currying functions to a fixed arity."""

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, overload

R = TypeVar("R")


@dataclass(frozen=True)
class Curried(Generic[R]):
    """
    A function waiting for the rest of its positional arguments.

    Calling a `Curried` never mutates it. Each call either returns a new
    `Curried` holding the arguments collected so far, or, once `arity`
    arguments are available, the result of calling `fn` with all of them.
    """

    fn: Callable[..., R]
    arity: int
    pending: tuple[Any, ...] = ()

    def __call__(self, *args: Any) -> "R | Curried[R]":
        """Supply more arguments to the curried function."""
        collected = (*self.pending, *args)
        if len(collected) >= self.arity:
            return self.fn(*collected)
        return Curried(self.fn, self.arity, collected)

    @property
    def remaining(self) -> int:
        """The number of arguments still missing."""
        return max(self.arity - len(self.pending), 0)


def _required_positional(fn: Callable[..., Any]) -> int:
    parameters = inspect.signature(fn).parameters.values()
    return sum(
        1
        for p in parameters
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        and p.default is p.empty
    )


@overload
def curry(fn: Callable[..., R]) -> Curried[R]:
    ...  # pragma: no cover


@overload
def curry(fn: Callable[..., R], arity: int) -> Curried[R]:
    ...  # pragma: no cover


def curry(fn: Callable[..., R], arity: int | None = None) -> Curried[R]:
    """
    Curry `fn` so that it accepts its arguments across several calls.

    Arguments supplied past `arity` in the call that saturates the function
    are passed on to `fn` rather than dropped.

    Args:
    ----
        fn: The function to curry.
        arity: The number of positional arguments to collect before
            calling `fn`. Defaults to the number of required positional
            parameters of `fn`.

    Returns:
    -------
        `fn` curried to `arity`.

    """
    if arity is None:
        arity = _required_positional(fn)
    if isinstance(arity, bool) or not isinstance(arity, int):
        raise TypeError(f"Arity must be an int, got '{type(arity).__name__}'.")
    if arity < 0:
        raise ValueError(f"Arity must be non-negative, got {arity}.")
    return Curried(fn, arity)
