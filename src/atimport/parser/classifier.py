"""At-rule classifier: turns one ``@import`` rule into a :class:`ParsedAtRule`.

Handles every form of the ``@import`` prelude::

    @import "a.css";
    @import url(a.css) layer(base) supports(display: grid) screen;
    @import url("style-loader!./a.css") print;
"""

from __future__ import annotations

import logging
from typing import Iterable

from atimport.model.at_rule import ParsedAtRule
from atimport.model.result import Err, ErrorContext, ErrorKind, Ok
from atimport.parser.errors import ImportSyntaxError
from atimport.parser.params import is_function, is_word, stringify, tokenize_params
from atimport.stylesheet.model import AtRule, Comment, Root
from atimport.urls import IGNORE_COMMENT_RE, External, is_url_requestable, normalize_url

__all__ = ["classify_at_rule", "parse_at_rule"]

logger = logging.getLogger("atimport.classifier")


def _is_ignore_comment(text: str) -> bool:
    matched = IGNORE_COMMENT_RE.search(text)
    return bool(matched and matched.group(2) == "true")


def _is_ignored(at_rule: AtRule) -> bool:
    """True when a ``webpackIgnore: true`` comment opts the rule out."""
    comments = at_rule.after_name_comments
    if comments and _is_ignore_comment(comments[-1].value):
        return True
    prev = at_rule.prev()
    return isinstance(prev, Comment) and _is_ignore_comment(prev.text)


def _fail(at_rule: AtRule, kind: ErrorKind, message: str | None = None) -> ImportSyntaxError:
    excerpt = at_rule.to_css()
    return ImportSyntaxError(
        message or f'Unable to find uri in "{excerpt}"',
        kind,
        excerpt=excerpt,
        line=at_rule.line,
        column=at_rule.column,
    )


def _extract_url(at_rule: AtRule, first) -> tuple[str, bool]:
    """Return ``(url, is_string_value)`` from the first parameter token."""
    if first.type == "string":
        return first.value, True
    if not is_function(first):
        raise _fail(at_rule, ErrorKind.MISSING_URL)
    if not is_function(first, "url"):
        raise _fail(at_rule, ErrorKind.INVALID_FUNCTION)
    if first.type == "url":
        return first.value, False
    arguments = tokenize_params(first.arguments)
    if arguments and arguments[0].type == "string":
        return arguments[0].value, True
    return stringify(first.arguments), False


def _flush(buffer: list) -> str:
    return stringify(buffer).strip().lower()


def _split_conditions(tokens: Iterable) -> tuple[str | None, str | None, str | None]:
    """Split the tokens after the URL into ``(layer, supports, media)``."""
    layer = supports = media = None
    buffer: list = []
    for token in tokens:
        if is_function(token, "layer"):
            buffer.extend(token.arguments)
            layer = _flush(buffer)
            buffer = []
        elif is_word(token, "layer"):
            layer = _flush(buffer)
            buffer = []
        elif is_function(token, "supports"):
            buffer.extend(token.arguments)
            supports = _flush(buffer)
            buffer = []
        else:
            buffer.append(token)
    if buffer:
        media = _flush(buffer)
    return layer, supports, media


def parse_at_rule(
    at_rule: AtRule,
    *,
    is_support_absolute_url: bool = False,
    is_support_data_url: bool = False,
    externals: Iterable[External] = (),
) -> ParsedAtRule | None:
    """Classify *at_rule*; returns ``None`` for rules that are not processed.

    Raises :class:`ImportSyntaxError` for malformed rules.
    """
    # Only top-level @import rules are converted.
    if not isinstance(at_rule.parent, Root):
        return None
    if _is_ignored(at_rule):
        logger.debug("Skipping ignored import at line %s", at_rule.line)
        return None

    # `@import url('http://') :root {}`
    if at_rule.has_block:
        raise _fail(
            at_rule,
            ErrorKind.CHILD_NODES,
            "It looks like you didn't end your @import statement correctly. "
            "Child nodes are attached to it.",
        )

    tokens = tokenize_params(at_rule.prelude)
    # `@import ;` or `@import foo-bar;`
    if not tokens:
        raise _fail(at_rule, ErrorKind.MISSING_URL)

    url, is_string_value = _extract_url(at_rule, tokens[0])
    url = normalize_url(url, is_string_value)

    verdict = is_url_requestable(
        url,
        is_support_absolute_url=is_support_absolute_url,
        is_support_data_url=is_support_data_url,
        externals=externals,
    )

    prefix = None
    if verdict.requestable and verdict.need_resolve:
        parts = url.split("!")
        if len(parts) > 1:
            url = parts.pop()
            prefix = "!".join(parts)

    # `@import "";` or `@import url();`
    if not url.strip():
        raise _fail(at_rule, ErrorKind.EMPTY_URL)

    layer, supports, media = _split_conditions(tokens[1:])

    return ParsedAtRule(
        at_rule=at_rule,
        url=url,
        requestable=verdict.requestable,
        need_resolve=verdict.need_resolve,
        prefix=prefix,
        layer=layer,
        supports=supports,
        media=media,
        line=at_rule.line,
        column=at_rule.column,
    )


def classify_at_rule(
    at_rule: AtRule,
    *,
    is_support_absolute_url: bool = False,
    is_support_data_url: bool = False,
    externals: Iterable[External] = (),
) -> Ok[ParsedAtRule] | Err | None:
    """Tagged-result wrapper around :func:`parse_at_rule`.

    Returns ``Ok(parsed)``, ``Err(kind, context)`` for malformed rules, or
    ``None`` when the rule is skipped (nested or explicitly ignored).
    """
    try:
        parsed = parse_at_rule(
            at_rule,
            is_support_absolute_url=is_support_absolute_url,
            is_support_data_url=is_support_data_url,
            externals=externals,
        )
    except ImportSyntaxError as exc:
        return Err(
            kind=exc.kind,
            context=ErrorContext(
                message=str(exc), excerpt=exc.excerpt, line=exc.line, column=exc.column
            ),
        )
    if parsed is None:
        return None
    return Ok(parsed)
