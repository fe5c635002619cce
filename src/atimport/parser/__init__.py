"""@import parameter parsing and at-rule classification."""

from atimport.parser.classifier import classify_at_rule, parse_at_rule
from atimport.parser.errors import ImportSyntaxError
from atimport.parser.params import stringify, tokenize_params

__all__ = [
    "classify_at_rule",
    "parse_at_rule",
    "ImportSyntaxError",
    "tokenize_params",
    "stringify",
]
