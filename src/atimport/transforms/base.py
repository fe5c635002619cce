"""Base protocol for stylesheet transforms."""

from __future__ import annotations

from typing import Protocol

from atimport.stylesheet.model import Root


class Transform(Protocol):
    """A tree-rewriting step; may mutate *root* in place."""

    def apply(self, root: Root) -> Root: ...
