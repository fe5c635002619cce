"""Resolver protocol and the candidate-request lookup helper."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Protocol

logger = logging.getLogger("atimport.resolver")


class ResolutionError(Exception):
    """Raised by a resolver when a request does not match any file."""

    def __init__(self, request: str, base_dir: str, message: str | None = None) -> None:
        self.request = request
        self.base_dir = base_dir
        super().__init__(message or f"Can't resolve '{request}' in '{base_dir}'")


@dataclass(frozen=True)
class ResolveOptions:
    """Resolver configuration for stylesheet-style lookups.

    ``"..."`` in a sequence stands for the bundler's defaults.
    """

    dependency_type: str = "css"
    condition_names: tuple[str, ...] = ("style",)
    main_fields: tuple[str, ...] = ("css", "style", "main", "...")
    main_files: tuple[str, ...] = ("index", "...")
    extensions: tuple[str, ...] = (".css", "...")
    prefer_relative: bool = True

    def __post_init__(self) -> None:
        for name in ("condition_names", "main_fields", "main_files", "extensions"):
            value = getattr(self, name)
            if isinstance(value, str) or not all(isinstance(v, str) for v in value):
                raise ValueError(f"ResolveOptions.{name} must be a sequence of strings")


STYLE_RESOLVE_OPTIONS = ResolveOptions()


class Resolver(Protocol):
    """Resolves a request string to an absolute path.

    Implementations raise :class:`ResolutionError` when nothing matches.
    """

    async def resolve(self, base_dir: str, request: str) -> str: ...


ResolverFactory = Callable[[ResolveOptions], Resolver]


async def resolve_requests(
    resolver: Resolver, base_dir: str, requests: Iterable[str]
) -> str | None:
    """Try each candidate request in order; return the first resolved path.

    Any exception raised by the resolver counts as a miss for that candidate.
    Returns ``None`` when every candidate fails.
    """
    for request in requests:
        try:
            resolved = await resolver.resolve(base_dir, request)
        except ResolutionError as exc:
            logger.debug("%s", exc)
            continue
        except Exception as exc:
            logger.debug("Resolver failed for %r in %r: %r", request, base_dir, exc)
            continue
        if resolved:
            return resolved
    return None
