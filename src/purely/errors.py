"""Custom errors for the purely package."""

from typing import Any


class MatchError(Exception):
    """Base class for errors raised when wiring up a pattern match."""


class NotAUnionError(MatchError, TypeError):
    """Raised when trying to pattern match a value that is not a union instance."""

    value: Any

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Trying to pattern match a non-union value of type '{type(value).__name__}'."
        )


class MissingCasesError(MatchError):
    """Raised when the handlers given to `match` do not cover every declared tag."""

    missing: tuple[str, ...]

    def __init__(self, missing: tuple[str, ...]):
        self.missing = missing
        super().__init__(
            f"There are not enough branches for all possibilities, missing: {', '.join(missing)}."
        )


class UnrecognizedCaseError(MatchError):
    """Raised when the handlers given to `match` contain a tag that is not declared."""

    unrecognized: tuple[str, ...]

    def __init__(self, unrecognized: tuple[str, ...]):
        self.unrecognized = unrecognized
        super().__init__(
            f"There are unrecognized patterns in some branches: {', '.join(unrecognized)}."
        )


class HandlerNotCallableError(MatchError, TypeError):
    """Raised when the handler selected by `match` can't be called."""

    tag: str

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"The handler for {tag} is not a function.")


class TaskError(Exception):
    """Raised out of `Task.run` when a task fails with a reason that is not an exception."""

    reason: Any

    def __init__(self, reason: Any):
        self.reason = reason
        super().__init__(str(reason))
