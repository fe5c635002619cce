"""Loader context: the surrounding bundler's view of the file being processed."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from atimport.model.diagnostic import Diagnostic
from atimport.resolver.base import ResolverFactory

logger = logging.getLogger("atimport")


@dataclass
class LoaderContext:
    """Paths, resolver factory and diagnostic sinks for one stylesheet.

    ``context`` defaults to the directory of ``resource_path``. Diagnostics
    are collected in ``diagnostics``; subclasses can forward them elsewhere by
    overriding :meth:`emit_error` and :meth:`emit_warning`.
    """

    resource_path: str
    get_resolve: ResolverFactory
    context: str = ""
    root_context: str | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.resource_path:
            raise ValueError("LoaderContext resource_path must be a non-empty string")
        if not callable(self.get_resolve):
            raise ValueError("LoaderContext get_resolve must be callable")
        if not self.context:
            self.context = os.path.dirname(self.resource_path)

    def emit_error(self, diagnostic: Diagnostic) -> None:
        logger.info("%s", diagnostic)
        self.diagnostics.append(diagnostic)

    def emit_warning(self, diagnostic: Diagnostic) -> None:
        logger.info("%s", diagnostic)
        self.diagnostics.append(diagnostic)
