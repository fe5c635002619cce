"""URL helpers: normalization, requestability checks and request building."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Union
from urllib.parse import unquote, urlparse
from urllib.request import url2pathname

__all__ = [
    "IGNORE_COMMENT_RE",
    "Requestability",
    "decode_uri",
    "is_data_url",
    "is_url_requestable",
    "normalize_url",
    "requestify",
    "url_to_request",
]

External = Union[str, "re.Pattern[str]"]

# Matches `/* webpackIgnore: true */`; group 2 is the flag.
IGNORE_COMMENT_RE = re.compile(r"webpackIgnore:(\s+)?(true|false)")

_EDGE_WHITESPACE = r"[ \t\n\r\f]*"
_LEADING_RE = re.compile("^" + _EDGE_WHITESPACE)
_TRAILING_RE = re.compile(_EDGE_WHITESPACE + "$")
_ESCAPED_NEWLINE_RE = re.compile(r"\\(\n|\r\n|\r|\f)")
_NATIVE_WIN32_PATH_RE = re.compile(r"^[A-Z]:[/\\]|^\\\\", re.IGNORECASE)
_DATA_URL_RE = re.compile(r"^data:", re.IGNORECASE)
_FILE_URL_RE = re.compile(r"^file:", re.IGNORECASE)
_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.-]*:", re.IGNORECASE)
_HTTP_RE = re.compile(r"^https?:", re.IGNORECASE)
_MODULE_REQUEST_RE = re.compile(r"^[^?]*~")
# Escapes of URI reserved characters (`;/?:@&=+$,#`); decoding leaves them encoded.
_RESERVED_ESCAPE_RE = re.compile(r"(%(?:23|24|26|2B|2C|2F|3A|3B|3D|3F|40))", re.IGNORECASE)


@dataclass(frozen=True)
class Requestability:
    requestable: bool
    need_resolve: bool


def is_data_url(url: str) -> bool:
    return bool(_DATA_URL_RE.match(url))


def decode_uri(url: str) -> str:
    """Percent-decode *url*, keeping escapes of reserved characters intact."""
    parts = _RESERVED_ESCAPE_RE.split(url)
    # Odd positions hold the captured reserved escapes.
    return "".join(part if i % 2 else unquote(part) for i, part in enumerate(parts))


def normalize_url(url: str, is_string_value: bool) -> str:
    """Trim edge whitespace, drop escaped newlines and percent-decode *url*.

    Windows native paths and ``data:`` URLs are returned without decoding.
    """
    normalized = _TRAILING_RE.sub("", _LEADING_RE.sub("", url, count=1), count=1)
    if is_string_value and _ESCAPED_NEWLINE_RE.search(normalized):
        normalized = _ESCAPED_NEWLINE_RE.sub("", normalized)
    if _NATIVE_WIN32_PATH_RE.match(url) or is_data_url(url):
        return normalized
    return decode_uri(normalized)


def _matches_external(url: str, externals: Iterable[External]) -> bool:
    for external in externals:
        if isinstance(external, str):
            if external == url:
                return True
        elif external.search(url):
            return True
    return False


def is_url_requestable(
    url: str,
    *,
    is_support_absolute_url: bool = False,
    is_support_data_url: bool = False,
    externals: Iterable[External] = (),
) -> Requestability:
    """Decide whether *url* becomes a bundler request and whether to resolve it."""
    # Protocol-relative and fragment-only URLs stay in the output as written.
    if url.startswith("//") or url.startswith("#"):
        return Requestability(False, False)
    if _matches_external(url, externals):
        return Requestability(False, False)
    if is_data_url(url) and is_support_data_url:
        return Requestability(True, False)
    if _FILE_URL_RE.match(url):
        return Requestability(True, True)
    if _SCHEME_RE.match(url) and not _NATIVE_WIN32_PATH_RE.match(url):
        if is_support_absolute_url and _HTTP_RE.match(url):
            return Requestability(True, False)
        return Requestability(False, False)
    return Requestability(True, True)


def url_to_request(url: str, root: str | None = None) -> str:
    """Turn a CSS URL into a bundler request.

    Relative URLs get a ``./`` prefix, root-relative URLs are joined onto
    *root* and a ``~`` marks a module request (``~pkg/a.css`` -> ``pkg/a.css``).
    """
    if url == "":
        return ""
    if re.match(r"^[a-zA-Z]:\\", url):
        request = url
    elif root and url.startswith("/"):
        if _MODULE_REQUEST_RE.match(root):
            request = re.sub(r"([^~/])$", r"\1/", root) + url[1:]
        else:
            request = root + url
    elif re.match(r"^\.\.?/", url):
        request = url
    else:
        request = "./" + url
    return _MODULE_REQUEST_RE.sub("", request, count=1)


def requestify(url: str, root_context: str | None = None) -> str:
    """Build the bundler-relative request form of a resolvable *url*."""
    if _FILE_URL_RE.match(url):
        return url2pathname(urlparse(url).path)
    if url.startswith("/"):
        return url_to_request(url, root_context)
    return url_to_request(url)
