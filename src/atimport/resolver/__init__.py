"""Module resolver interface used by the resolution orchestrator."""

from atimport.resolver.base import (
    STYLE_RESOLVE_OPTIONS,
    ResolutionError,
    ResolveOptions,
    Resolver,
    ResolverFactory,
    resolve_requests,
)
from atimport.resolver.filesystem import PathResolver, path_resolver_factory

__all__ = [
    "STYLE_RESOLVE_OPTIONS",
    "ResolutionError",
    "ResolveOptions",
    "Resolver",
    "ResolverFactory",
    "resolve_requests",
    "PathResolver",
    "path_resolver_factory",
]
