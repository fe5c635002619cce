"""Import parser configuration."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Awaitable, Callable, Union

# (url, media, resource_path, supports, layer) -> keep?
ImportFilter = Callable[
    [str, Union[str, None], str, Union[str, None], Union[str, None]],
    Union[bool, Awaitable[bool]],
]
UrlHandler = Callable[[str], str]


@dataclass(frozen=True)
class ImportParserOptions:
    """Options recognized by the import parser.

    Attributes:
        is_support_absolute_url: Treat ``http(s):`` imports as bundler requests.
        is_support_data_url: Treat ``data:`` imports as bundler requests.
        externals: URLs (exact strings or compiled patterns) left to the runtime.
        filter: Optional predicate deciding whether an import is kept.
        is_css_stylesheet: ``@import`` is disallowed and reported as an error.
        url_handler: Maps a dependency request to the string handed to codegen.
        report_unresolved: Warn about imports the resolver cannot find instead
            of dropping them silently.
    """

    is_support_absolute_url: bool = False
    is_support_data_url: bool = False
    externals: tuple[str | re.Pattern, ...] = ()
    filter: ImportFilter | None = None
    is_css_stylesheet: bool = False
    url_handler: UrlHandler | None = None
    report_unresolved: bool = False

    def __post_init__(self) -> None:
        for name in (
            "is_support_absolute_url",
            "is_support_data_url",
            "is_css_stylesheet",
            "report_unresolved",
        ):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a bool, got {getattr(self, name)!r}")
        if isinstance(self.externals, (str, re.Pattern)):
            raise ValueError("externals must be a sequence of strings or patterns")
        externals = tuple(self.externals)
        for external in externals:
            if not isinstance(external, (str, re.Pattern)):
                raise ValueError(f"Invalid external {external!r}: expected str or re.Pattern")
        object.__setattr__(self, "externals", externals)
        if self.filter is not None and not callable(self.filter):
            raise ValueError("filter must be callable")
        if self.url_handler is not None and not callable(self.url_handler):
            raise ValueError("url_handler must be callable")

    def handle_url(self, request: str) -> str:
        return self.url_handler(request) if self.url_handler else request
