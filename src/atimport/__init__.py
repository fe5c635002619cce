"""atimport - stylesheet @import analyzer and dependency resolver."""

from atimport.engine import ImportParser, parse_imports
from atimport.loader import LoaderContext
from atimport.model import ApiRecord, Diagnostic, ImportParseResult, ImportRecord, Severity
from atimport.options import ImportParserOptions
from atimport.resolver import ResolutionError, ResolveOptions, Resolver
from atimport.stylesheet import parse_stylesheet

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ImportParser",
    "parse_imports",
    "LoaderContext",
    "ImportParserOptions",
    "ImportParseResult",
    "ImportRecord",
    "ApiRecord",
    "Diagnostic",
    "Severity",
    "ResolutionError",
    "ResolveOptions",
    "Resolver",
    "parse_stylesheet",
]
