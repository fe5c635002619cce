from atimport.stylesheet.parser import parse_stylesheet
from atimport.stylesheet.model import AtRule, Comment, Node, ParseIssue, Raw, Root, Whitespace

__all__ = [
    "parse_stylesheet",
    "Root",
    "Node",
    "AtRule",
    "Comment",
    "Whitespace",
    "Raw",
    "ParseIssue",
]
