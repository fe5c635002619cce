"""Tests for the full import pipeline on stylesheet source."""

import asyncio

from atimport.engine import ImportParser, parse_imports
from atimport.engine.processor import DISALLOWED_IMPORT_MESSAGE
from atimport.events import EventBus, ImportsEmitted
from atimport.model.diagnostic import Severity
from atimport.options import ImportParserOptions

FILES = {
    "./a.css": "/project/src/a.css",
    "./b.css": "/project/src/b.css",
    "./app.css": "/project/src/app.css",
}


class TestSingleImport:
    def test_requestable_import(self, make_resolver, run_parser):
        result = run_parser('@import "a.css";\n.x { color: red; }', make_resolver(FILES))
        assert len(result.imports) == 1
        assert result.imports[0].url == "/project/src/a.css"
        assert result.imports[0].import_name == "___CSS_LOADER_AT_RULE_IMPORT_0___"
        assert len(result.api) == 1
        assert result.api[0].import_name == result.imports[0].import_name
        assert result.diagnostics == []
        assert result.css == "\n.x { color: red; }"

    def test_non_requestable_import(self, make_resolver, run_parser):
        result = run_parser('@import url("https://fonts.example.com/a.css") screen;', make_resolver())
        assert result.imports == []
        assert len(result.api) == 1
        assert result.api[0].url == "https://fonts.example.com/a.css"
        assert result.api[0].media == "screen"
        assert "@import" not in result.css

    def test_absolute_url_supported(self, make_resolver, run_parser):
        resolver = make_resolver()
        result = run_parser(
            '@import "https://fonts.example.com/a.css";',
            resolver,
            ImportParserOptions(is_support_absolute_url=True),
        )
        assert [r.url for r in result.imports] == ["https://fonts.example.com/a.css"]
        assert resolver.calls == []

    def test_loader_prefix(self, make_resolver, run_parser):
        result = run_parser('@import "raw-loader!./a.css";', make_resolver(FILES))
        assert result.imports[0].url == "raw-loader!/project/src/a.css"


class TestDedup:
    def test_same_target_one_dependency_two_apply_records(self, make_resolver, run_parser):
        result = run_parser('@import "a.css";\n@import "./a.css" print;', make_resolver(FILES))
        assert len(result.imports) == 1
        assert [r.index for r in result.api] == [0, 1]
        assert [r.media for r in result.api] == [None, "print"]
        assert {r.import_name for r in result.api} == {result.imports[0].import_name}

    def test_different_prefix_is_a_different_dependency(self, make_resolver, run_parser):
        result = run_parser('@import "a.css";\n@import "raw-loader!a.css";', make_resolver(FILES))
        assert len(result.imports) == 2


class TestDrops:
    def test_self_import(self, make_resolver, run_parser):
        result = run_parser('@import "./app.css";\n.x{}', make_resolver(FILES))
        assert result.imports == []
        assert result.api == []
        assert result.css == "\n.x{}"

    def test_unresolved_is_silent_by_default(self, make_resolver, run_parser):
        result = run_parser('@import "missing.css";', make_resolver(FILES))
        assert result.imports == []
        assert result.diagnostics == []

    def test_failing_resolver_call_is_a_silent_drop(self, make_context):
        class _Crashing:
            def factory(self, options):
                return self

            async def resolve(self, base_dir, request):
                if "bad" in request:
                    raise FileNotFoundError(request)
                return FILES[request]

        result = parse_imports('@import "bad.css";\n@import "a.css";', make_context(_Crashing()))
        assert [r.url for r in result.imports] == ["/project/src/a.css"]
        assert result.diagnostics == []

    def test_unresolved_reported_on_request(self, make_resolver, run_parser):
        result = run_parser(
            '@import "missing.css";',
            make_resolver(FILES),
            ImportParserOptions(report_unresolved=True),
        )
        assert [d.code for d in result.warnings] == ["unresolved-import"]

    def test_filter(self, make_resolver, run_parser):
        result = run_parser(
            '@import "a.css";\n@import "b.css";',
            make_resolver(FILES),
            ImportParserOptions(filter=lambda url, *rest: url == "b.css"),
        )
        assert [r.url for r in result.imports] == ["/project/src/b.css"]
        assert [r.index for r in result.api] == [1]
        assert '@import "a.css";' in result.css


class TestMalformed:
    def test_warnings_and_later_rules_processed(self, make_resolver, run_parser):
        result = run_parser(
            '@import url();\n@import foo-bar;\n@import "a.css";', make_resolver(FILES)
        )
        assert [d.code for d in result.warnings] == ["empty-url", "missing-url"]
        assert [d.line for d in result.warnings] == [1, 2]
        assert all(d.file == "/project/src/app.css" for d in result.warnings)
        assert len(result.imports) == 1
        assert result.api[0].index == 0
        assert "@import url();" in result.css
        assert "@import foo-bar;" in result.css

    def test_child_nodes(self, make_resolver, run_parser):
        result = run_parser("@import url(a.css) :root { color: red; }", make_resolver(FILES))
        assert [d.code for d in result.warnings] == ["child-nodes"]
        assert result.imports == []

    def test_css_syntax_errors_are_warnings(self, make_resolver, run_parser):
        result = run_parser('@import "a.css";\n.broken', make_resolver(FILES))
        assert [d.code for d in result.warnings] == ["css-syntax"]
        assert len(result.imports) == 1


class TestSkipped:
    def test_nested_import_left_alone(self, make_resolver, run_parser):
        source = '@media print { @import "a.css"; }'
        result = run_parser(source, make_resolver(FILES))
        assert result.imports == []
        assert result.api == []
        assert result.css == source

    def test_ignore_comment(self, make_resolver, run_parser):
        source = '/* webpackIgnore: true */\n@import "a.css";\n@import "b.css";'
        result = run_parser(source, make_resolver(FILES))
        assert [r.url for r in result.imports] == ["/project/src/b.css"]
        assert '@import "a.css";' in result.css


class TestCssStylesheet:
    def test_imports_are_errors(self, make_resolver, run_parser):
        resolver = make_resolver(FILES)
        result = run_parser(
            '@import "a.css";\n@import "b.css";',
            resolver,
            ImportParserOptions(is_css_stylesheet=True),
        )
        assert len(result.errors) == 2
        assert all(d.severity is Severity.ERROR for d in result.errors)
        assert result.errors[0].message == DISALLOWED_IMPORT_MESSAGE
        assert result.imports == []
        assert result.api == []
        assert resolver.factory_calls == 0
        assert result.css == '@import "a.css";\n@import "b.css";'


class TestCommentImport:
    def test_marker_comment_equals_import(self, make_resolver, run_parser):
        via_comment = run_parser('/* @mpx-import "a.css" */', make_resolver(FILES))
        via_rule = run_parser('@import "a.css";', make_resolver(FILES))
        assert via_comment.imports == via_rule.imports
        assert via_comment.api == via_rule.api
        assert via_comment.css == via_rule.css == ""


class TestUrlHandler:
    def test_url_handler(self, make_resolver, run_parser):
        result = run_parser(
            '@import "a.css";',
            make_resolver(FILES),
            ImportParserOptions(url_handler=lambda request: f"{request}?inline"),
        )
        assert result.imports[0].url == "/project/src/a.css?inline"


class TestEntryPoints:
    def test_events(self, make_resolver, make_context):
        bus = EventBus()
        emitted = []
        bus.subscribe(ImportsEmitted, emitted.append)
        context = make_context(make_resolver(FILES))
        parser = ImportParser(event_bus=bus)
        asyncio.run(parser.process_source('@import "a.css";\n@import "a.css";', context))
        assert emitted == [ImportsEmitted(resource_path="/project/src/app.css", imports=1, api=2)]

    def test_parse_imports_sync(self, make_resolver, make_context):
        result = parse_imports('@import "a.css";', make_context(make_resolver(FILES)))
        assert len(result.imports) == 1

    def test_result_only_carries_new_diagnostics(self, make_resolver, make_context):
        context = make_context(make_resolver(FILES))
        parse_imports("@import foo-bar;", context)
        result = parse_imports('@import "a.css";', context)
        assert result.diagnostics == []
        assert len(context.diagnostics) == 1

    def test_to_dict(self, make_resolver, run_parser):
        result = run_parser(
            '@import "a.css" layer(base);\n@import "//cdn.example.com/b.css";',
            make_resolver(FILES),
        )
        data = result.to_dict()
        assert data["imports"] == [
            {
                "import_name": "___CSS_LOADER_AT_RULE_IMPORT_0___",
                "url": "/project/src/a.css",
                "index": 0,
                "type": "rule_import",
            }
        ]
        assert data["api"] == [
            {
                "index": 0,
                "import_name": "___CSS_LOADER_AT_RULE_IMPORT_0___",
                "layer": "base",
                "supports": None,
                "media": None,
            },
            {
                "index": 1,
                "url": "//cdn.example.com/b.css",
                "layer": None,
                "supports": None,
                "media": None,
            },
        ]
        assert data["css"] == "\n"
