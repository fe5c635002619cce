"""Tests for configuration objects: parser options and loader context."""

import re

import pytest

from atimport.loader import LoaderContext
from atimport.model.diagnostic import Diagnostic, Severity
from atimport.options import ImportParserOptions


class TestImportParserOptions:
    def test_defaults(self):
        options = ImportParserOptions()
        assert options.is_support_absolute_url is False
        assert options.is_support_data_url is False
        assert options.externals == ()
        assert options.filter is None
        assert options.is_css_stylesheet is False
        assert options.url_handler is None
        assert options.report_unresolved is False

    def test_externals_coerced_to_tuple(self):
        pattern = re.compile(r"^ext/")
        options = ImportParserOptions(externals=["a.css", pattern])
        assert options.externals == ("a.css", pattern)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"is_support_absolute_url": "yes"},
            {"is_support_data_url": 1},
            {"is_css_stylesheet": None},
            {"report_unresolved": "false"},
            {"externals": "a.css"},
            {"externals": ["a.css", 3]},
            {"filter": "not callable"},
            {"url_handler": 42},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            ImportParserOptions(**kwargs)

    def test_handle_url_identity(self):
        assert ImportParserOptions().handle_url("./a.css") == "./a.css"

    def test_handle_url_custom(self):
        options = ImportParserOptions(url_handler=lambda r: r.upper())
        assert options.handle_url("./a.css") == "./A.CSS"

    def test_frozen(self):
        options = ImportParserOptions()
        with pytest.raises(AttributeError):
            options.is_css_stylesheet = True


class TestLoaderContext:
    def test_context_defaults_to_directory(self):
        ctx = LoaderContext(resource_path="/p/src/app.css", get_resolve=lambda options: None)
        assert ctx.context == "/p/src"
        assert ctx.root_context is None
        assert ctx.diagnostics == []

    def test_explicit_context(self):
        ctx = LoaderContext(resource_path="/p/app.css", get_resolve=lambda o: None, context="/q")
        assert ctx.context == "/q"

    def test_requires_resource_path(self):
        with pytest.raises(ValueError):
            LoaderContext(resource_path="", get_resolve=lambda o: None)

    def test_requires_callable_factory(self):
        with pytest.raises(ValueError):
            LoaderContext(resource_path="/p/app.css", get_resolve=None)

    def test_emit_collects(self):
        ctx = LoaderContext(resource_path="/p/app.css", get_resolve=lambda o: None)
        warning = Diagnostic(code="w", severity=Severity.WARNING, message="w")
        error = Diagnostic(code="e", severity=Severity.ERROR, message="e")
        ctx.emit_warning(warning)
        ctx.emit_error(error)
        assert ctx.diagnostics == [warning, error]
