"""atimport model layer -- public type re-exports."""

from atimport.model.at_rule import ParsedAtRule, ResolvedAtRule
from atimport.model.diagnostic import Diagnostic, Severity
from atimport.model.records import ApiRecord, ImportParseResult, ImportRecord
from atimport.model.result import Err, ErrorContext, ErrorKind, Ok, Result

__all__ = [
    # at-rules
    "ParsedAtRule",
    "ResolvedAtRule",
    # records
    "ImportRecord",
    "ApiRecord",
    "ImportParseResult",
    # diagnostic
    "Severity",
    "Diagnostic",
    # result
    "Ok",
    "Err",
    "ErrorKind",
    "ErrorContext",
    "Result",
]
