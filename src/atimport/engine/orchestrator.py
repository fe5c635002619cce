"""Resolution orchestrator: resolves every classified import concurrently."""

from __future__ import annotations

import asyncio
import inspect
import logging
import os
from typing import Sequence

from atimport.events import types as events
from atimport.events.bus import EventBus
from atimport.loader import LoaderContext
from atimport.model.at_rule import ParsedAtRule, ResolvedAtRule
from atimport.model.diagnostic import Diagnostic, Severity
from atimport.options import ImportParserOptions
from atimport.resolver.base import STYLE_RESOLVE_OPTIONS, Resolver, resolve_requests
from atimport.urls import requestify

logger = logging.getLogger("atimport.orchestrator")


class ResolutionOrchestrator:
    """Runs one resolution task per :class:`ParsedAtRule` on the event loop.

    Results land in a slot array indexed by each rule's position in the
    collected list, so completion order never affects output order. A slot
    stays ``None`` when its import is dropped (filtered out, unresolvable or
    a self-import). Each task removes its own at-rule once the filter keeps
    it, before resolving; only rules rejected by the filter stay in place.
    """

    def __init__(
        self,
        options: ImportParserOptions,
        loader_context: LoaderContext,
        *,
        event_bus: EventBus | None = None,
    ) -> None:
        self.options = options
        self.loader_context = loader_context
        self.event_bus = event_bus or EventBus()

    async def resolve_all(
        self, parsed_at_rules: Sequence[ParsedAtRule]
    ) -> list[ResolvedAtRule | None]:
        if not parsed_at_rules:
            return []

        resolver = self.loader_context.get_resolve(STYLE_RESOLVE_OPTIONS)
        slots: list[ResolvedAtRule | None] = [None] * len(parsed_at_rules)

        async def _fill(index: int, parsed: ParsedAtRule) -> None:
            slots[index] = await self._resolve_one(parsed.with_index(index), resolver)

        await asyncio.gather(
            *(_fill(index, parsed) for index, parsed in enumerate(parsed_at_rules))
        )
        return slots

    async def _keep(self, parsed: ParsedAtRule) -> bool:
        decision = self.options.filter(  # type: ignore[misc]
            parsed.url,
            parsed.media,
            self.loader_context.resource_path,
            parsed.supports,
            parsed.layer,
        )
        if inspect.isawaitable(decision):
            decision = await decision
        return bool(decision)

    def _drop(self, parsed: ParsedAtRule, reason: events.DropReason) -> None:
        logger.debug("Dropping import %r (%s)", parsed.url, reason.value)
        self.event_bus.emit(events.ImportDropped(index=parsed.index, url=parsed.url, reason=reason))

    def _warn(self, parsed: ParsedAtRule, code: str, message: str) -> None:
        self.loader_context.emit_warning(
            Diagnostic(
                code=code,
                severity=Severity.WARNING,
                message=message,
                file=self.loader_context.resource_path,
                line=parsed.line,
                column=parsed.column,
            )
        )

    def _is_self_import(self, resolved: str) -> bool:
        return os.path.realpath(resolved) == os.path.realpath(self.loader_context.resource_path)

    async def _resolve_one(
        self, parsed: ParsedAtRule, resolver: Resolver
    ) -> ResolvedAtRule | None:
        if self.options.filter is not None:
            try:
                keep = await self._keep(parsed)
            except Exception as exc:
                self._warn(
                    parsed, "filter-failed", f"Import filter failed for '{parsed.url}': {exc}"
                )
                self._drop(parsed, events.DropReason.FILTER_FAILED)
                return None
            if not keep:
                self._drop(parsed, events.DropReason.FILTERED)
                return None

        parsed.at_rule.remove()
        if not parsed.need_resolve:
            return ResolvedAtRule.from_parsed(parsed)

        context = self.loader_context
        request = requestify(parsed.url, context.root_context)
        candidates = list(dict.fromkeys([request, parsed.url]))
        resolved = await resolve_requests(resolver, context.context, candidates)

        if not resolved:
            if self.options.report_unresolved:
                self._warn(
                    parsed,
                    "unresolved-import",
                    f"Can't resolve '{parsed.url}' in '{context.context}'",
                )
            self._drop(parsed, events.DropReason.UNRESOLVED)
            return None

        if self._is_self_import(resolved):
            self._drop(parsed, events.DropReason.SELF_IMPORT)
            return None

        self.event_bus.emit(
            events.ImportResolved(index=parsed.index, url=parsed.url, resolved=resolved)
        )
        return ResolvedAtRule.from_parsed(parsed, resolved)
