"""Structural equality used to compare union instances."""

from collections.abc import Mapping
from typing import Any


def _is_container(value: object) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _is_plain_object(value: object) -> bool:
    # objects with their own notion of equality, like exceptions, use `==`
    if isinstance(value, (type, BaseException)) or callable(value):
        return False
    return hasattr(value, "__dict__") and type(value).__eq__ is object.__eq__


def _entries(value: Any) -> Mapping[Any, Any]:
    if isinstance(value, Mapping):
        return value
    if isinstance(value, (list, tuple)):
        return dict(enumerate(value))
    return vars(value)


def _equal_entries(a: object, b: object) -> bool:
    entries_a, entries_b = _entries(a), _entries(b)
    if len(entries_a) != len(entries_b):
        return False
    return all(
        key in entries_b and equal(value, entries_b[key])
        for key, value in entries_a.items()
    )


def equal(a: object, b: object) -> bool:
    """
    Compare two values structurally.

    Mappings, lists and tuples are compared key by key (indices for
    sequences). Plain objects of the same type that don't define `__eq__`
    are compared attribute by attribute. Everything else, exceptions
    included, is compared with `==`. Union instances defer to their own
    `equals`.

    Note that this is not a total order, and values like `nan` that are
    not equal to themselves are only equal when they are the same object.

    Args:
    ----
        a: The first value.
        b: The second value.

    Returns:
    -------
        Whether `a` and `b` are structurally equal.

    """
    from purely.union import Union

    if a is b:
        return True
    if isinstance(a, Union) or isinstance(b, Union):
        return isinstance(a, Union) and a.equals(b)
    if _is_container(a) or _is_container(b):
        return _is_container(a) and _is_container(b) and _equal_entries(a, b)
    if _is_plain_object(a) or _is_plain_object(b):
        return type(a) is type(b) and _equal_entries(a, b)
    return bool(a == b)
