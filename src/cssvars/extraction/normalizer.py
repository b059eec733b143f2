"""Rewrite a JavaScript object literal into JSON-like literal text.

The steps run in a fixed order, each a pure text rewrite:

1. ``${PREFIX.name}`` interpolations become ``var(--prefix-name)``.
2. Bare keys before a colon are double-quoted.
3. Single-quoted and backtick strings become double-quoted.
4. Trailing commas before ``}`` or ``]`` are dropped.
5. Line and block comments are stripped.

String literals and comments are treated as opaque by steps 2-5, so a ``//`` inside a
URL or a colon inside a value is never rewritten.
"""

from __future__ import annotations

import re

from cssvars.naming import kebab_case

__all__ = [
    "convert_quotes",
    "normalize_literal",
    "quote_keys",
    "resolve_interpolations",
    "strip_comments",
    "strip_trailing_commas",
]

_DQ = r'"(?:\\[\s\S]|[^"\\\n])*"'
_SQ = r"'(?:\\[\s\S]|[^'\\\n])*'"
_BT = r"`(?:\\[\s\S]|[^`\\])*`"
_LINE_COMMENT = r"//[^\n]*"
_BLOCK_COMMENT = r"/\*[\s\S]*?\*/"

_OPAQUE = "|".join([_LINE_COMMENT, _BLOCK_COMMENT, _DQ, _SQ, _BT])

_INTERPOLATION_RE = re.compile(
    r"\$\{\s*(?P<prefix>[A-Z_][A-Z0-9_]*)\s*\.\s*(?P<name>[A-Za-z_$][\w$]*)\s*\}"
)

_KEY_RE = re.compile(
    rf"(?P<opaque>{_OPAQUE})"
    r"|(?<![\w$.])(?P<key>[A-Za-z_$][\w$]*|\d+)(?P<space>\s*):"
)

_STRING_RE = re.compile(
    rf"(?P<comment>{_LINE_COMMENT}|{_BLOCK_COMMENT})"
    rf"|(?P<double>{_DQ})"
    rf"|(?P<single>{_SQ})"
    rf"|(?P<template>{_BT})"
)

_TRAILING_COMMA_RE = re.compile(rf"(?P<opaque>{_OPAQUE})|,\s*(?P<close>[}}\]])")

_COMMENT_RE = re.compile(
    rf"(?P<string>{_DQ}|{_SQ}|{_BT})|(?P<comment>{_LINE_COMMENT}|{_BLOCK_COMMENT})"
)

# Inside a string body: an escape sequence or a bare double quote.
_BODY_RE = re.compile(r'\\[\s\S]|"|\n')


def resolve_interpolations(text: str) -> str:
    """Replace ``${COLORS.primaryDark}`` with ``var(--colors-primary-dark)``."""

    def _replace(match: re.Match[str]) -> str:
        prefix = match.group("prefix").lower()
        return f"var(--{prefix}-{kebab_case(match.group('name'))})"

    return _INTERPOLATION_RE.sub(_replace, text)


def quote_keys(text: str) -> str:
    """Double-quote bare identifier and numeric keys: ``{a: 1}`` -> ``{"a": 1}``."""

    def _replace(match: re.Match[str]) -> str:
        if match.group("opaque") is not None:
            return match.group("opaque")
        return f'"{match.group("key")}"{match.group("space")}:'

    return _KEY_RE.sub(_replace, text)


def _requote(body: str, delimiter: str) -> str:
    """Re-escape a string body so it can sit between double quotes."""

    def _replace(match: re.Match[str]) -> str:
        token = match.group(0)
        if token == '"':
            return '\\"'
        if token == "\n":
            return "\\n"
        if token == "\\" + delimiter:
            return delimiter
        return token

    return _BODY_RE.sub(_replace, body)


def convert_quotes(text: str) -> str:
    """Turn ``'...'`` and backtick strings into ``"..."`` strings."""

    def _replace(match: re.Match[str]) -> str:
        if match.group("single") is not None:
            return '"' + _requote(match.group("single")[1:-1], "'") + '"'
        if match.group("template") is not None:
            return '"' + _requote(match.group("template")[1:-1], "`") + '"'
        return match.group(0)

    return _STRING_RE.sub(_replace, text)


def strip_trailing_commas(text: str) -> str:
    """Drop a comma that directly precedes a closing brace or bracket."""

    def _replace(match: re.Match[str]) -> str:
        if match.group("opaque") is not None:
            return match.group("opaque")
        return match.group("close")

    return _TRAILING_COMMA_RE.sub(_replace, text)


def strip_comments(text: str) -> str:
    """Remove ``//`` line comments and ``/* */`` block comments."""

    def _replace(match: re.Match[str]) -> str:
        if match.group("string") is not None:
            return match.group("string")
        return ""

    return _COMMENT_RE.sub(_replace, text)


_STEPS = (
    resolve_interpolations,
    quote_keys,
    convert_quotes,
    strip_trailing_commas,
    strip_comments,
)


def normalize_literal(raw: str) -> str:
    """Run every normalization step over *raw* in order."""
    text = raw
    for step in _STEPS:
        text = step(text)
    return text
