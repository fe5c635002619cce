"""Output records handed to the bundler's code generation stage."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from atimport.model.diagnostic import Diagnostic


@dataclass(frozen=True)
class ImportRecord:
    """A module dependency to inline, one per unique request."""

    import_name: str
    url: str
    index: int
    type: str = "rule_import"


@dataclass(frozen=True)
class ApiRecord:
    """A runtime "apply import" entry, one per surviving ``@import``.

    Exactly one of ``import_name`` (bundled dependency) or ``url`` (literal,
    non-requestable URL) is set.
    """

    index: int
    import_name: str | None = None
    url: str | None = None
    layer: str | None = None
    supports: str | None = None
    media: str | None = None

    def __post_init__(self) -> None:
        if (self.import_name is None) == (self.url is None):
            raise ValueError("ApiRecord needs exactly one of import_name or url")


@dataclass
class ImportParseResult:
    """Everything produced for one stylesheet."""

    imports: list[ImportRecord] = field(default_factory=list)
    api: list[ApiRecord] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    css: str | None = None

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_error]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable view of the result."""
        data: dict[str, Any] = {
            "imports": [asdict(r) for r in self.imports],
            "api": [
                {
                    k: v
                    for k, v in asdict(r).items()
                    if v is not None or k not in ("import_name", "url")
                }
                for r in self.api
            ],
            "diagnostics": [
                {
                    "code": d.code,
                    "severity": d.severity.value,
                    "message": d.message,
                    "file": d.file,
                    "line": d.line,
                    "column": d.column,
                }
                for d in self.diagnostics
            ],
        }
        if self.css is not None:
            data["css"] = self.css
        return data
