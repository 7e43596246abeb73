"""Contains the Result type."""

from typing import Any, Callable, ClassVar, TypeVar

from purely.maybe import Maybe
from purely.protocols import Applicable, Chainable, Mappable
from purely.union import Union, match

T = TypeVar("T", covariant=True)
B = TypeVar("B")


class Result(
    Union,
    Mappable[T],
    Chainable[T],
    Applicable[T],
    tags={"Err": 1, "Ok": 1},
):
    """The outcome of a computation that may fail, either `Ok(value)` or `Err(error)`."""

    Err: ClassVar[Callable[..., "Result[Any]"]]
    Ok: ClassVar[Callable[..., "Result[Any]"]]

    @classmethod
    def of(cls, value: B) -> "Result[B]":
        """Put `value` in the minimal Result context, `Ok(value)`."""
        return cls.Ok(value)

    @property
    def is_ok(self) -> bool:
        """Whether this is an `Ok`."""
        return self.tag == "Ok"

    @property
    def is_err(self) -> bool:
        """Whether this is an `Err`."""
        return self.tag == "Err"

    def map(self, f: Callable[[T], B]) -> "Result[B]":
        """
        Transform the value of an `Ok`.

        Args:
        ----
            f: The function to apply to the value.

        Returns:
        -------
            `Ok(f(value))`, or this instance if it is an `Err`.

        """
        return match(
            self,
            Err=lambda _: self,
            Ok=lambda value: type(self).Ok(f(value)),
        )

    def map_error(self, f: Callable[[Any], Any]) -> "Result[T]":
        """
        Transform the error of an `Err`.

        Args:
        ----
            f: The function to apply to the error.

        Returns:
        -------
            `Err(f(error))`, or this instance if it is an `Ok`.

        """
        return match(
            self,
            Err=lambda error: type(self).Err(f(error)),
            Ok=lambda _: self,
        )

    def chain(self, f: Callable[[T], "Result[B]"]) -> "Result[B]":
        """
        Transform the value of an `Ok` into a new Result.

        Args:
        ----
            f: Function returning a Result.

        Returns:
        -------
            `f(value)`, or this instance if it is an `Err`.

        """
        return match(self, Err=lambda _: self, Ok=f)

    def ap(self, other: "Result[Any]") -> "Result[Any]":
        """
        Apply the function held by this `Ok` to the value held by `other`.

        Args:
        ----
            other: The Result holding the argument.

        Returns:
        -------
            `other.map(fn)`, or this instance if it is an `Err`.

        """
        return match(self, Err=lambda _: self, Ok=lambda fn: other.map(fn))

    def with_default(self, default: B) -> T | B:
        """Get the value of an `Ok`, or `default` for an `Err`."""
        return match(self, Err=lambda _: default, Ok=lambda value: value)

    def to_maybe(self) -> Maybe[T]:
        """Turn `Ok(value)` into `Just(value)` and any `Err` into `Nothing()`."""
        return match(self, Err=lambda _: Maybe.Nothing(), Ok=Maybe.Just)
