"""Locate the object literal bound to a constant name in source text.

Three export shapes are tried in priority order::

    export const THEME = { ... };
    export default { THEME: { ... } };
    const THEME = { ... };

A pattern finds the opening brace, then the literal is extended to its balanced
closing brace. Braces inside strings, template literals and comments do not count.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

from cssvars.scanning import find_closing_bracket

__all__ = ["STRATEGIES", "locate_literal"]

Strategy = Callable[[str, str], Optional[str]]

# Optional TypeScript annotation between the binding name and "=".
_ANNOTATION = r"(?:\s*:\s*[^=;{]+?)?"


def _balanced_from(source: str, open_index: int) -> str | None:
    close = find_closing_bracket(source, open_index)
    if close is None:
        return None
    return source[open_index : close + 1]


def _name(constant_name: str) -> str:
    return re.escape(constant_name) + r"(?![\w$])"


def match_export_const(source: str, constant_name: str) -> str | None:
    """``export const NAME = { ... }``"""
    pattern = re.compile(
        r"export\s+const\s+" + _name(constant_name) + _ANNOTATION + r"\s*=\s*(?=\{)"
    )
    for match in pattern.finditer(source):
        literal = _balanced_from(source, match.end())
        if literal is not None:
            return literal
    return None


def match_export_object(source: str, constant_name: str) -> str | None:
    """``export { ... NAME: { ... } ... }`` and ``export default { ... }``"""
    export_re = re.compile(r"export\s+(?:default\s+)?(?=\{)|export(?=\{)")
    member_re = re.compile(r"(?<![\w$.])" + _name(constant_name) + r"\s*:\s*(?=\{)")
    for export in export_re.finditer(source):
        outer_open = export.end()
        outer_close = find_closing_bracket(source, outer_open)
        if outer_close is None:
            continue
        member = member_re.search(source, outer_open + 1, outer_close)
        if member is None:
            continue
        literal = _balanced_from(source, member.end())
        if literal is not None:
            return literal
    return None


def match_declaration(source: str, constant_name: str) -> str | None:
    """``const|let|var NAME = { ... }``"""
    pattern = re.compile(
        r"(?<![\w$.])(?:const|let|var)\s+"
        + _name(constant_name)
        + _ANNOTATION
        + r"\s*=\s*(?=\{)"
    )
    for match in pattern.finditer(source):
        literal = _balanced_from(source, match.end())
        if literal is not None:
            return literal
    return None


STRATEGIES: list[Strategy] = [
    match_export_const,
    match_export_object,
    match_declaration,
]


def locate_literal(source: str, constant_name: str) -> str | None:
    """Return the object literal text bound to *constant_name*, or None.

    The first strategy in STRATEGIES that matches wins.
    """
    for strategy in STRATEGIES:
        literal = strategy(source, constant_name)
        if literal is not None:
            return literal
    return None
