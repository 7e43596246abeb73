"""Contains the Union type, the union factory and pattern matching."""

from collections.abc import Mapping
from dataclasses import dataclass
from functools import partial
from types import MappingProxyType, new_class
from typing import Any, Callable, ClassVar, TypeVar

from purely.curry import curry
from purely.equality import equal
from purely.errors import (
    HandlerNotCallableError,
    MissingCasesError,
    NotAUnionError,
    UnrecognizedCaseError,
)

R = TypeVar("R")
U = TypeVar("U", bound="Union")


def _construct(cls: type[U], tag: str, arity: int, *args: Any) -> U:
    if len(args) > arity:
        raise TypeError(
            f"{cls.__name__}.{tag} takes {arity} positional argument(s) but {len(args)} were given."
        )
    return cls(tag, args)


def _validate(cls: type, tags: Mapping[str, int]) -> None:
    for tag, arity in tags.items():
        if not isinstance(tag, str) or not tag.isidentifier():
            raise TypeError(f"Union tags must be identifiers, got {tag!r}.")
        if tag.startswith("_") or hasattr(cls, tag):
            raise ValueError(f"Tag '{tag}' clashes with an attribute of {cls.__name__}.")
        if isinstance(arity, bool) or not isinstance(arity, int):
            raise TypeError(f"Arity of tag '{tag}' must be an int, got {arity!r}.")
        if arity < 0:
            raise ValueError(f"Arity of tag '{tag}' must be non-negative, got {arity}.")


@dataclass(frozen=True, eq=False, repr=False)
class Union:
    """
    Base type of tagged unions.

    Declare a union by subclassing with the constructor names mapped to
    their arities:

        class Shape(Union, tags={"Circle": 1, "Rect": 2}):
            ...

    Each tag becomes a curried constructor on the class, so
    `Shape.Rect(1, 2)` and `Shape.Rect(1)(2)` build equal instances.
    """

    tag: str
    args: tuple[Any, ...] = ()

    tags: ClassVar[tuple[str, ...]] = ()
    arities: ClassVar[Mapping[str, int]] = MappingProxyType({})

    def __init_subclass__(cls, tags: Mapping[str, int] | None = None, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        if tags is None:
            return
        declared = dict(tags)
        _validate(cls, declared)
        cls.tags = tuple(declared)
        cls.arities = MappingProxyType(declared)
        for tag, arity in declared.items():
            setattr(cls, tag, curry(partial(_construct, cls, tag, arity), arity))

    def __post_init__(self) -> None:
        cls = type(self)
        if self.tag not in cls.arities:
            raise ValueError(f"'{self.tag}' is not a constructor of {cls.__name__}.")
        object.__setattr__(self, "args", tuple(self.args))
        arity = cls.arities[self.tag]
        if len(self.args) != arity:
            raise TypeError(
                f"{cls.__name__}.{self.tag} takes {arity} argument(s), got {len(self.args)}."
            )

    def equals(self, other: object) -> bool:
        """
        Compare with another union instance.

        Args:
        ----
            other: The value to compare with.

        Returns:
        -------
            Whether `other` has the same union type and tag as `self`,
            and structurally equal arguments.

        """
        return (
            isinstance(other, Union)
            and type(other) is type(self)
            and other.tag == self.tag
            and equal(self.args, other.args)
        )

    def match(
        self, handlers: Mapping[str, Callable[..., R]] | None = None, /, **cases: Callable[..., R]
    ) -> R:
        """Pattern match on `self`, see `purely.union.match`."""
        return match(self, handlers, **cases)

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        # args are compared structurally, so only the tag takes part
        return hash((type(self), self.tag))

    def __repr__(self) -> str:
        args = ", ".join(repr(arg) for arg in self.args)
        return f"{type(self).__name__}.{self.tag}({args})"


def define_union(tags: Mapping[str, int], name: str = "Union") -> type[Union]:
    """
    Create a new union type.

    Args:
    ----
        tags: The constructor names of the union mapped to their arities,
            in declaration order.
        name: The name of the new type.

    Returns:
    -------
        A subclass of `Union` with a curried constructor per tag.

    """
    return new_class(name, (Union,), {"tags": tags})


def match(
    instance: object,
    handlers: Mapping[str, Callable[..., R]] | None = None,
    /,
    **cases: Callable[..., R],
) -> R:
    """
    Pattern match on a union instance.

    Handlers are given as a mapping, as keyword arguments or both, and must
    cover every tag of the instance's union type, no more and no less.

    Args:
    ----
        instance: The union instance to match on.
        handlers: Tags mapped to the functions handling them.
        cases: Tags mapped to the functions handling them, given as keywords.

    Returns:
    -------
        The value returned by the handler of `instance.tag`, called with
        the arguments of `instance`.

    """
    if not isinstance(instance, Union):
        raise NotAUnionError(instance)
    branches = {**(handlers or {}), **cases}
    union_type = type(instance)
    missing = tuple(tag for tag in union_type.tags if tag not in branches)
    if missing:
        raise MissingCasesError(missing)
    unrecognized = tuple(key for key in branches if key not in union_type.arities)
    if unrecognized:
        raise UnrecognizedCaseError(unrecognized)
    handler = branches[instance.tag]
    if not callable(handler):
        raise HandlerNotCallableError(instance.tag)
    return handler(*instance.args)
