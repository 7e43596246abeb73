"""Capability interfaces shared by the containers in purely."""

from typing import Any, Callable, TypeVar

from typing_extensions import Protocol, runtime_checkable

T = TypeVar("T", covariant=True)


@runtime_checkable
class Mappable(Protocol[T]):
    """A container whose contents can be transformed with `map`."""

    def map(self, f: Callable[[T], Any]) -> "Mappable[Any]":
        """Transform the value held by this container."""
        ...  # pragma: no cover


@runtime_checkable
class Chainable(Protocol[T]):
    """A container that can be sequenced with a function returning another container."""

    def chain(self, f: Callable[[T], Any]) -> "Chainable[Any]":
        """Transform the value held by this container into a new container."""
        ...  # pragma: no cover


@runtime_checkable
class Applicable(Protocol[T]):
    """A container holding a function that can be applied to another container."""

    def ap(self, other: Any) -> "Applicable[Any]":
        """Apply the function held by this container to the value held by `other`."""
        ...  # pragma: no cover
