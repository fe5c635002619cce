"""Build a mutable stylesheet tree from CSS source using tinycss2.

Whitespace and comments are preserved so that ``Root.to_css()`` reproduces
the source minus whatever the import pipeline removed.
"""

from __future__ import annotations

import tinycss2

from atimport.stylesheet.model import AtRule, Comment, Node, ParseIssue, Raw, Root, Whitespace

__all__ = ["parse_stylesheet"]

# At-rules whose block holds nested rules rather than declarations.
_GROUP_RULES = {
    "media",
    "supports",
    "layer",
    "container",
    "document",
    "-moz-document",
    "scope",
    "starting-style",
}


def _convert(token, root: Root) -> Node | None:
    """Wrap one tinycss2 rule-level node, or record it as a parse issue."""
    line = getattr(token, "source_line", None)
    column = getattr(token, "source_column", None)
    if token.type == "error":
        root.parse_errors.append(ParseIssue(message=token.message, line=line, column=column))
        return None
    if token.type == "whitespace":
        return Whitespace(token.value, line, column)
    if token.type == "comment":
        return Comment(token.value, line, column)
    if token.type == "at-rule":
        rule = AtRule(token.at_keyword, prelude=list(token.prelude), line=line, column=column)
        if token.content is not None:
            if token.lower_at_keyword in _GROUP_RULES:
                rule.nodes = []
                for child in tinycss2.parse_rule_list(token.content):
                    node = _convert(child, root)
                    if node is not None:
                        rule.append(node)
            else:
                rule.content = list(token.content)
        return rule
    return Raw(token, line, column)


def parse_stylesheet(source: str, path: str | None = None) -> Root:
    """Parse CSS *source* into a :class:`Root` tree.

    tinycss2 parse errors never raise; they are collected on
    ``Root.parse_errors`` and the offending input is dropped from the tree.
    """
    root = Root(path=path)
    for token in tinycss2.parse_stylesheet(source):
        node = _convert(token, root)
        if node is not None:
            root.append(node)
    return root
