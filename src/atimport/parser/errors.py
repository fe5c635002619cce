"""Parser error types."""

from __future__ import annotations

from atimport.model.result import ErrorKind


class ImportSyntaxError(Exception):
    """Raised when an ``@import`` rule cannot be classified."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        *,
        excerpt: str = "",
        line: int | None = None,
        column: int | None = None,
    ):
        self.kind = kind
        self.excerpt = excerpt
        self.line = line
        self.column = column
        super().__init__(message)
