"""Import parser: runs the whole ``@import`` pipeline for one stylesheet."""

from __future__ import annotations

import asyncio
import logging

from atimport.engine.emission import emit_records
from atimport.engine.orchestrator import ResolutionOrchestrator
from atimport.events import types as events
from atimport.events.bus import EventBus
from atimport.loader import LoaderContext
from atimport.model.at_rule import ParsedAtRule
from atimport.model.diagnostic import Diagnostic, Severity
from atimport.model.records import ImportParseResult
from atimport.model.result import Err
from atimport.options import ImportParserOptions
from atimport.parser.classifier import classify_at_rule
from atimport.stylesheet.model import Root
from atimport.stylesheet.parser import parse_stylesheet
from atimport.transforms import apply_transforms

logger = logging.getLogger("atimport")

DISALLOWED_IMPORT_MESSAGE = "'@import' rules are not allowed here and will not be processed"


class ImportParser:
    """Extract, resolve and emit the ``@import`` rules of a stylesheet.

    Phases, per stylesheet:

    1. Rewrite ``@mpx-import`` marker comments into ``@import`` rules.
    2. Classify each ``@import`` in document order (synchronous).
    3. Resolve all classified imports concurrently, removing their nodes.
    4. Emit ``imports`` and ``api`` records in document order.

    No state is kept between calls.
    """

    def __init__(
        self,
        options: ImportParserOptions | None = None,
        *,
        event_bus: EventBus | None = None,
    ) -> None:
        self.options = options or ImportParserOptions()
        self.event_bus = event_bus or EventBus()

    def collect(self, root: Root, loader_context: LoaderContext) -> list[ParsedAtRule]:
        """Classify every ``@import`` in *root*, reporting malformed ones."""
        collected: list[ParsedAtRule] = []
        for at_rule in root.walk_at_rules("import"):
            if self.options.is_css_stylesheet:
                loader_context.emit_error(
                    Diagnostic(
                        code="import-not-allowed",
                        severity=Severity.ERROR,
                        message=DISALLOWED_IMPORT_MESSAGE,
                        file=loader_context.resource_path,
                        line=at_rule.line,
                        column=at_rule.column,
                        excerpt=at_rule.to_css(),
                    )
                )
                continue

            outcome = classify_at_rule(
                at_rule,
                is_support_absolute_url=self.options.is_support_absolute_url,
                is_support_data_url=self.options.is_support_data_url,
                externals=self.options.externals,
            )
            if outcome is None:
                continue
            if isinstance(outcome, Err):
                loader_context.emit_warning(
                    Diagnostic(
                        code=outcome.kind.value,
                        severity=Severity.WARNING,
                        message=outcome.context.message,
                        file=loader_context.resource_path,
                        line=outcome.context.line,
                        column=outcome.context.column,
                        excerpt=outcome.context.excerpt,
                    )
                )
                continue
            collected.append(outcome.value.with_index(len(collected)))
        return collected

    @staticmethod
    def report_parse_errors(root: Root, loader_context: LoaderContext) -> None:
        """Forward tinycss2 parse errors collected on *root* as warnings."""
        for issue in root.parse_errors:
            loader_context.emit_warning(
                Diagnostic(
                    code="css-syntax",
                    severity=Severity.WARNING,
                    message=issue.message,
                    file=loader_context.resource_path,
                    line=issue.line,
                    column=issue.column,
                )
            )

    async def process(self, root: Root, loader_context: LoaderContext) -> ImportParseResult:
        """Run the pipeline on *root*, mutating it in place."""
        first_diagnostic = len(loader_context.diagnostics)

        self.report_parse_errors(root, loader_context)

        apply_transforms(root)
        parsed_at_rules = self.collect(root, loader_context)

        orchestrator = ResolutionOrchestrator(
            self.options, loader_context, event_bus=self.event_bus
        )
        resolved_at_rules = await orchestrator.resolve_all(parsed_at_rules)
        imports, api = emit_records(resolved_at_rules, self.options.handle_url)

        logger.info(
            "%s: %d @import rule(s), %d dependency(ies), %d apply record(s)",
            loader_context.resource_path,
            len(parsed_at_rules),
            len(imports),
            len(api),
        )
        self.event_bus.emit(
            events.ImportsEmitted(
                resource_path=loader_context.resource_path,
                imports=len(imports),
                api=len(api),
            )
        )
        return ImportParseResult(
            imports=imports,
            api=api,
            diagnostics=loader_context.diagnostics[first_diagnostic:],
        )

    async def process_source(self, source: str, loader_context: LoaderContext) -> ImportParseResult:
        """Parse *source*, run the pipeline and attach the rewritten CSS."""
        root = parse_stylesheet(source, path=loader_context.resource_path)
        result = await self.process(root, loader_context)
        result.css = root.to_css()
        return result


def parse_imports(
    source: str,
    loader_context: LoaderContext,
    options: ImportParserOptions | None = None,
    *,
    event_bus: EventBus | None = None,
) -> ImportParseResult:
    """Synchronous convenience wrapper around :meth:`ImportParser.process_source`."""
    parser = ImportParser(options, event_bus=event_bus)
    return asyncio.run(parser.process_source(source, loader_context))
