"""Tagged classification result: ``Ok`` carries a value, ``Err`` a failure kind."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(Enum):
    """Why an ``@import`` rule could not be classified."""

    CHILD_NODES = "child-nodes"
    MISSING_URL = "missing-url"
    INVALID_FUNCTION = "invalid-function"
    EMPTY_URL = "empty-url"


@dataclass(frozen=True)
class ErrorContext:
    """Minimal data needed to report a failure without holding the AST node."""

    message: str
    excerpt: str = ""
    line: int | None = None
    column: int | None = None


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    context: ErrorContext

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
