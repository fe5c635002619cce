"""Shared fixtures: an in-memory resolver and loader context builders."""

from __future__ import annotations

import asyncio

import pytest

from atimport.engine import ImportParser
from atimport.loader import LoaderContext
from atimport.options import ImportParserOptions
from atimport.resolver import ResolutionError, ResolveOptions

RESOURCE_PATH = "/project/src/app.css"


class FakeResolver:
    """Resolves requests from a dict; optional per-request delays in seconds."""

    def __init__(
        self,
        files: dict[str, str] | None = None,
        delays: dict[str, float] | None = None,
    ) -> None:
        self.files = files or {}
        self.delays = delays or {}
        self.calls: list[tuple[str, str]] = []
        self.options: ResolveOptions | None = None
        self.factory_calls = 0

    def factory(self, options: ResolveOptions) -> "FakeResolver":
        self.options = options
        self.factory_calls += 1
        return self

    async def resolve(self, base_dir: str, request: str) -> str:
        self.calls.append((base_dir, request))
        delay = self.delays.get(request, 0)
        if delay:
            await asyncio.sleep(delay)
        if request in self.files:
            return self.files[request]
        raise ResolutionError(request, base_dir)


@pytest.fixture
def make_resolver():
    def _make(files=None, delays=None) -> FakeResolver:
        return FakeResolver(files, delays)

    return _make


@pytest.fixture
def make_context():
    def _make(resolver: FakeResolver, resource_path: str = RESOURCE_PATH, **kwargs) -> LoaderContext:
        kwargs.setdefault("root_context", "/project")
        return LoaderContext(resource_path=resource_path, get_resolve=resolver.factory, **kwargs)

    return _make


@pytest.fixture
def run_parser(make_context):
    """Run the full pipeline on CSS source; returns the ImportParseResult."""

    def _run(source: str, resolver: FakeResolver, options: ImportParserOptions | None = None, **kwargs):
        context = make_context(resolver, **kwargs)
        return asyncio.run(ImportParser(options).process_source(source, context))

    return _run
