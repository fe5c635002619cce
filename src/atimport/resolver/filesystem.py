"""File-system resolver used by the command line tools.

This is a direct path lookup with extension and index-file fallbacks. It does
not search package directories; plug a bundler's resolver in for that.
"""

from __future__ import annotations

from pathlib import Path

from atimport.resolver.base import ResolutionError, ResolveOptions, STYLE_RESOLVE_OPTIONS


class PathResolver:
    """Resolve requests relative to a base directory on disk."""

    def __init__(self, options: ResolveOptions = STYLE_RESOLVE_OPTIONS) -> None:
        self.options = options

    @property
    def extensions(self) -> list[str]:
        return [e for e in self.options.extensions if e != "..."]

    @property
    def main_files(self) -> list[str]:
        return [m for m in self.options.main_files if m != "..."]

    def _candidates(self, target: Path) -> list[Path]:
        candidates = [target]
        candidates.extend(target.with_name(target.name + ext) for ext in self.extensions)
        for main in self.main_files:
            candidates.extend(target / f"{main}{ext}" for ext in self.extensions)
        return candidates

    async def resolve(self, base_dir: str, request: str) -> str:
        path = request.split("?", 1)[0].split("#", 1)[0]
        if not path:
            raise ResolutionError(request, base_dir)
        target = Path(path)
        if not target.is_absolute():
            target = Path(base_dir) / target
        for candidate in self._candidates(target):
            if candidate.is_file():
                return str(candidate.resolve())
        raise ResolutionError(request, base_dir)


def path_resolver_factory(options: ResolveOptions) -> PathResolver:
    return PathResolver(options)
