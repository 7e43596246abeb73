"""Contains the Maybe type."""

from typing import Any, Callable, ClassVar, TypeVar

from purely.protocols import Applicable, Chainable, Mappable
from purely.union import Union, match

T = TypeVar("T", covariant=True)
B = TypeVar("B")


class Maybe(
    Union,
    Mappable[T],
    Chainable[T],
    Applicable[T],
    tags={"Just": 1, "Nothing": 0},
):
    """An optional value, either `Just(value)` or `Nothing()`."""

    Just: ClassVar[Callable[..., "Maybe[Any]"]]
    Nothing: ClassVar[Callable[[], "Maybe[Any]"]]

    @classmethod
    def of(cls, value: B) -> "Maybe[B]":
        """Put `value` in the minimal Maybe context, `Just(value)`."""
        return cls.Just(value)

    @classmethod
    def from_optional(cls, value: B | None) -> "Maybe[B]":
        """Turn `None` into `Nothing()` and anything else into `Just(value)`."""
        return cls.Nothing() if value is None else cls.Just(value)

    @property
    def is_just(self) -> bool:
        """Whether this is a `Just`."""
        return self.tag == "Just"

    @property
    def is_nothing(self) -> bool:
        """Whether this is `Nothing`."""
        return self.tag == "Nothing"

    def map(self, f: Callable[[T], B]) -> "Maybe[B]":
        """
        Transform the value of a `Just`.

        Args:
        ----
            f: The function to apply to the value.

        Returns:
        -------
            `Just(f(value))`, or this instance if it is `Nothing`.

        """
        return match(
            self,
            Just=lambda value: type(self).Just(f(value)),
            Nothing=lambda: self,
        )

    def chain(self, f: Callable[[T], "Maybe[B]"]) -> "Maybe[B]":
        """
        Transform the value of a `Just` into a new Maybe.

        Args:
        ----
            f: Function returning a Maybe.

        Returns:
        -------
            `f(value)`, or this instance if it is `Nothing`.

        """
        return match(self, Just=f, Nothing=lambda: self)

    def ap(self, other: "Maybe[Any]") -> "Maybe[Any]":
        """
        Apply the function held by this `Just` to the value held by `other`.

        Chain `ap` calls with a curried function to lift it over several
        Maybe values.

        Args:
        ----
            other: The Maybe holding the argument.

        Returns:
        -------
            `other.map(fn)`, or this instance if it is `Nothing`.

        """
        return match(self, Just=lambda fn: other.map(fn), Nothing=lambda: self)

    def with_default(self, default: B) -> T | B:
        """Get the value of a `Just`, or `default` for `Nothing`."""
        return match(self, Just=lambda value: value, Nothing=lambda: default)
