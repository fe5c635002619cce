"""Tokenize and re-serialize ``@import`` parameters with tinycss2."""

from __future__ import annotations

from typing import Iterable

import tinycss2


def tokenize_params(source: str | Iterable) -> list:
    """Return the component values of an ``@import`` parameter list.

    *source* is either raw text or an at-rule prelude. Comments are dropped
    and leading/trailing whitespace tokens are stripped; whitespace between
    values is kept so that :func:`stringify` reproduces the original spacing.
    """
    if isinstance(source, str):
        tokens = tinycss2.parse_component_value_list(source)
    else:
        tokens = list(source)
    tokens = [t for t in tokens if t.type != "comment"]
    while tokens and tokens[0].type == "whitespace":
        tokens.pop(0)
    while tokens and tokens[-1].type == "whitespace":
        tokens.pop()
    return tokens


def stringify(tokens: Iterable) -> str:
    return tinycss2.serialize(list(tokens))


def is_function(token, name: str | None = None) -> bool:
    """True for a function call, including tinycss2's unquoted ``url(...)`` token."""
    if token.type == "url":
        return name is None or name == "url"
    if token.type != "function":
        return False
    return name is None or token.lower_name == name


def is_word(token, value: str) -> bool:
    return token.type == "ident" and token.lower_value == value
