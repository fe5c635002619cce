"""At-rule models: classified and resolved ``@import`` rules."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from atimport.stylesheet.model import AtRule


@dataclass(frozen=True)
class ParsedAtRule:
    """An ``@import`` rule after classification, before resolution.

    ``layer`` is ``""`` for the anonymous layer (bare ``layer`` keyword) and
    ``None`` when no layer was given; ``supports`` and ``media`` are ``None``
    when absent.
    """

    at_rule: "AtRule"
    url: str
    requestable: bool
    need_resolve: bool
    index: int = 0
    prefix: str | None = None
    layer: str | None = None
    supports: str | None = None
    media: str | None = None
    line: int | None = None
    column: int | None = None

    def __post_init__(self) -> None:
        if not self.url.strip():
            raise ValueError("ParsedAtRule url must be a non-empty string")

    def with_index(self, index: int) -> "ParsedAtRule":
        return replace(self, index=index)


@dataclass(frozen=True)
class ResolvedAtRule:
    """An ``@import`` rule that survived resolution."""

    url: str
    requestable: bool
    index: int
    prefix: str | None = None
    layer: str | None = None
    supports: str | None = None
    media: str | None = None

    @property
    def request(self) -> str:
        """Dedup key: ``prefix!url`` when a loader chain is present."""
        return f"{self.prefix}!{self.url}" if self.prefix else self.url

    @classmethod
    def from_parsed(cls, parsed: ParsedAtRule, url: str | None = None) -> "ResolvedAtRule":
        return cls(
            url=url if url is not None else parsed.url,
            requestable=parsed.requestable,
            index=parsed.index,
            prefix=parsed.prefix,
            layer=parsed.layer,
            supports=parsed.supports,
            media=parsed.media,
        )
