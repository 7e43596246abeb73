"""Tagged unions, pattern matching and lazy asynchronous tasks."""

# ruff: noqa: F401

from purely.curry import Curried, curry
from purely.equality import equal
from purely.errors import (
    HandlerNotCallableError,
    MatchError,
    MissingCasesError,
    NotAUnionError,
    TaskError,
    UnrecognizedCaseError,
)
from purely.maybe import Maybe
from purely.protocols import Applicable, Chainable, Mappable
from purely.result import Result
from purely.task import Task, failure, failure_reason
from purely.union import Union, define_union, match
