"""Diagnostic model: structured messages reported while processing imports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a stylesheet's ``@import`` rules.

    Attributes:
        code: Identifier for the kind of problem (``missing-url``, ...).
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        file: Path of the stylesheet being processed, if known.
        line: 1-based source line of the offending rule, if known.
        column: 1-based source column of the offending rule, if known.
        excerpt: The offending source text, if available.
    """

    code: str
    severity: Severity
    message: str
    file: str | None = None
    line: int | None = None
    column: int | None = None
    excerpt: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            where = f"{self.file}:" if self.file else ""
            location = f" [{where}{self.line}:{self.column or 1}]"
        elif self.file:
            location = f" [{self.file}]"
        return f"{self.severity.value}{location}: {self.message}"
